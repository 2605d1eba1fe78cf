import logging

from hydroconf.utils.logging import get_logger


def test_get_logger_returns_named_logger():
    assert get_logger("hydroconf.test").name == "hydroconf.test"


def test_library_logger_has_null_handler():
    import hydroconf  # noqa: F401

    handlers = logging.getLogger("hydroconf").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
