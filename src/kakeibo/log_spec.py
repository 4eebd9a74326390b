from __future__ import annotations

import logging

from rich.logging import RichHandler

from kakeibo.log import resolve_level, setup_logging


class DescribeResolveLevel:
    def it_should_default_to_warning(self, monkeypatch):
        monkeypatch.delenv("KAKEIBO_LOG_LEVEL", raising=False)
        assert resolve_level() == logging.WARNING

    def it_should_use_debug_when_verbose(self, monkeypatch):
        monkeypatch.setenv("KAKEIBO_LOG_LEVEL", "ERROR")
        assert resolve_level(verbose=True) == logging.DEBUG

    def it_should_read_level_from_env(self, monkeypatch):
        monkeypatch.setenv("KAKEIBO_LOG_LEVEL", "info")
        assert resolve_level() == logging.INFO

    def it_should_ignore_unknown_level_names(self, monkeypatch):
        monkeypatch.setenv("KAKEIBO_LOG_LEVEL", "chatty")
        assert resolve_level() == logging.WARNING


class DescribeSetupLogging:
    def it_should_install_a_single_rich_handler(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging(verbose=True)
            setup_logging(verbose=True)
            assert len([h for h in root.handlers if isinstance(h, RichHandler)]) == 1
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
