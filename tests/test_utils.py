"""Tests for inputmask.utils."""


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from inputmask.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "inputmask.mymodule"

    def test_logger_with_inputmask_prefix(self) -> None:
        from inputmask.utils.logger import get_logger

        logger = get_logger("inputmask.compiler")
        assert logger.name == "inputmask.compiler"

    def test_logger_name_starting_with_inputmask_not_submodule(self) -> None:
        """Names starting with 'inputmask' but not submodules should get prefix."""
        from inputmask.utils.logger import get_logger

        logger = get_logger("inputmask_other")
        assert logger.name == "inputmask.inputmask_other"

    def test_logger_exact_inputmask_name(self) -> None:
        """The exact name 'inputmask' should not get double-prefixed."""
        from inputmask.utils.logger import get_logger

        logger = get_logger("inputmask")
        assert logger.name == "inputmask"

    def test_compiler_logs_debug_on_compile(self, caplog) -> None:
        import logging

        from inputmask import compile_format

        with caplog.at_level(logging.DEBUG, logger="inputmask"):
            compile_format("[00]-[00]")
        assert any("Compiled format" in record.getMessage() for record in caplog.records)

    def test_package_logger_has_null_handler(self) -> None:
        import logging

        from inputmask.utils.logger import ROOT_LOGGER_NAME

        handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers
        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)

    def test_child_loggers_propagate_to_package_logger(self) -> None:
        from inputmask.utils.logger import get_logger

        logger = get_logger("widgets")
        assert logger.parent is not None
        assert logger.parent.name == "inputmask"
