"""
Central configuration for the kakeibo application.

Path resolution lives in kakeibo.workspace.Workspace. See it for how the
workspace root is chosen:
  1. Explicit --data-dir CLI option
  2. KAKEIBO_DATA environment variable
  3. Current working directory

User-adjustable settings are read from kakeibo.yml at the workspace root
(see kakeibo.model.settings).
"""

DATA_DIR_ENV = "KAKEIBO_DATA"
LOG_LEVEL_ENV = "KAKEIBO_LOG_LEVEL"

STORE_DIRNAME = "store"
DEFAULT_DATA_FILE = "data.json"
SETTINGS_FILENAME = "kakeibo.yml"

DEFAULT_CURRENCY_LABEL = "yen"
