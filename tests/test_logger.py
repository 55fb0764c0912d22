import logging

from coltypes.core.logger import HANDLER_NAME, LOG_LEVEL_ENV_VAR, configure_root_logger, get_logger, resolve_level


def test_resolve_level_uses_env_var_when_no_level_given(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "warning")
    assert resolve_level() == logging.WARNING
    assert resolve_level("debug") == logging.DEBUG


def test_resolve_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    assert resolve_level() == logging.INFO
    assert resolve_level("not-a-level") == logging.INFO


def test_configure_root_logger_is_idempotent():
    configure_root_logger("INFO")
    before = len(logging.getLogger().handlers)
    configure_root_logger("DEBUG")
    assert len(logging.getLogger().handlers) == before
    assert logging.getLogger("coltypes").level == logging.DEBUG


def test_get_logger_sets_requested_level():
    logger = get_logger("coltypes.test", level="WARNING")
    assert logger.name == "coltypes.test"
    assert logger.level == logging.WARNING


def test_configure_root_logger_installs_one_named_handler():
    configure_root_logger()
    configure_root_logger()
    named = [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]
    assert len(named) == 1
