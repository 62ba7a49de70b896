import io
import logging

from dozerpath.log import PACKAGE_LOGGER, setup_logging


def _restore(logger: logging.Logger, handlers: list[logging.Handler], level: int) -> None:
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_setup_logging_leaves_root_handlers_alone():
    root = logging.getLogger()
    package = logging.getLogger(PACKAGE_LOGGER)
    host_handler = logging.NullHandler()
    saved_root, saved_package = list(root.handlers), list(package.handlers)
    saved_root_level, saved_package_level = root.level, package.level
    root.addHandler(host_handler)
    try:
        setup_logging("debug")
        assert host_handler in root.handlers
        assert package.level == logging.DEBUG
    finally:
        _restore(root, saved_root, saved_root_level)
        _restore(package, saved_package, saved_package_level)


def test_repeat_setup_replaces_handler_and_writes_package_records():
    package = logging.getLogger(PACKAGE_LOGGER)
    saved, saved_level = list(package.handlers), package.level
    first, second = io.StringIO(), io.StringIO()
    try:
        setup_logging("info", stream=first)
        handler = setup_logging("warning", stream=second)
        assert package.handlers.count(handler) == 1
        assert len(package.handlers) == len(saved) + 1

        logging.getLogger("dozerpath.search").warning("bound tightened")
        assert "WARNING dozerpath.search: bound tightened" in second.getvalue()
        assert first.getvalue() == ""

        setup_logging("nonsense", stream=second)
        assert package.level == logging.INFO
    finally:
        _restore(package, saved, saved_level)
