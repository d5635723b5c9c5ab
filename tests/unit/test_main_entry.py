"""Unit tests for the package entry points and public exports."""

import runpy
import sys
from unittest.mock import patch

import pytest

import html2jsx
from html2jsx.exceptions import ConfigError, DependencyError, Html2JsxError, ParsingError, ValidationError


@pytest.mark.unit
class TestMainModule:
    def test_main_module_importable(self):
        import html2jsx.__main__  # noqa: F401

    def test_run_as_module(self):
        with patch("html2jsx.cli.main", return_value=0) as cli_main:
            with pytest.raises(SystemExit) as exc_info:
                runpy.run_module("html2jsx", run_name="__main__")
        assert exc_info.value.code == 0
        cli_main.assert_called_once_with()

    def test_help(self):
        from html2jsx.cli import main

        with patch.object(sys, "argv", ["html2jsx", "--help"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 0


@pytest.mark.unit
class TestPublicApi:
    def test_exports(self):
        for name in html2jsx.__all__:
            assert hasattr(html2jsx, name)

    def test_version(self):
        assert html2jsx.__version__ == "1.0.0"


@pytest.mark.unit
class TestExceptions:
    @pytest.mark.parametrize("error_class", [ValidationError, ParsingError, ConfigError])
    def test_hierarchy(self, error_class):
        assert issubclass(error_class, Html2JsxError)

    def test_original_error_kept(self):
        cause = ValueError("boom")
        error = ParsingError("failed", parsing_stage="parse", original_error=cause)
        assert error.original_error is cause
        assert error.parsing_stage == "parse"
        assert str(error) == "failed"

    def test_dependency_error_install_hint(self):
        error = DependencyError("HTML parser 'html5lib'", missing_packages=["html5lib"])
        assert isinstance(error, Html2JsxError)
        assert "pip install html5lib" in error.message
        assert error.component == "HTML parser 'html5lib'"

    def test_dependency_error_custom_message(self):
        error = DependencyError("rich-output", missing_packages=["rich"], message="no rich")
        assert error.message == "no rich"
        assert error.missing_packages == ["rich"]
