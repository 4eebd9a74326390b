from __future__ import annotations

"""
Interactive menu: pick register, summarize or balance until quitting.
"""

import logging
from typing import Optional

from rich.prompt import Prompt

from . import balance as cmd_balance
from . import register as cmd_register
from . import summarize as cmd_summarize
from .util import console
from kakeibo.model.settings import Settings
from kakeibo.services.validation import SERVICE_TYPES, InputValidator
from kakeibo.workspace import Workspace

logger = logging.getLogger(__name__)

QUIT = "q"
MENU_LABEL = "0:register, 1:summarize, 2:balance, q:quit"


def run(*, workspace: Workspace, settings: Optional[Settings] = None) -> int:
    """Prompt for an action and run it, repeating until 'q' or end of input.

    Returns the exit code of the last action run (0 if none ran).
    """
    settings = settings or Settings()
    last_code = 0

    while True:
        try:
            choice = Prompt.ask(
                f"What would you like to do? ({MENU_LABEL})",
                choices=[str(n) for n in SERVICE_TYPES] + [QUIT],
                show_choices=False,
            )
            if choice == QUIT:
                break
            last_code = _dispatch(choice, workspace, settings)
        except (EOFError, KeyboardInterrupt):
            # End of input ends the session like 'q'.
            console.print()
            break

    return last_code


def _dispatch(choice: str, workspace: Workspace, settings: Settings) -> int:
    service_type = InputValidator.validate_service_type(
        InputValidator.parse_number(choice, "Service type")
    )
    logger.debug("Menu choice: %s", service_type)

    if service_type == 0:
        return cmd_register.run(workspace=workspace, settings=settings)
    if service_type == 1:
        return cmd_summarize.run(workspace=workspace, settings=settings)
    return cmd_balance.run(workspace=workspace, settings=settings)
