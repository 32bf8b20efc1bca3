#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_decorators.py
"""Unit tests for dependency checking and timing helpers."""

import logging
from unittest.mock import patch

import pytest

from mdlatex.exceptions import DependencyError
from mdlatex.utils.decorators import debug_timer, requires_dependencies
from mdlatex.utils.packages import check_version_requirement, get_package_version


@pytest.mark.unit
class TestRequiresDependencies:
    """Tests for the requires_dependencies decorator."""

    def test_available_dependency_runs_method(self) -> None:
        """Test the wrapped function runs when imports succeed."""

        @requires_dependencies("markdown", [("mistune", "mistune", "")])
        def convert() -> str:
            return "ok"

        assert convert() == "ok"

    def test_missing_dependency_raises(self) -> None:
        """Test a missing package raises DependencyError."""

        @requires_dependencies("markdown", [("not-a-package", "mdlatex_missing_module", ">=1.0")])
        def convert() -> str:
            return "never"

        with pytest.raises(DependencyError) as exc_info:
            convert()

        assert exc_info.value.missing_packages == [("not-a-package", ">=1.0")]
        assert isinstance(exc_info.value.original_import_error, ImportError)

    def test_version_mismatch_raises(self) -> None:
        """Test an installed but too old package raises DependencyError."""

        @requires_dependencies("markdown", [("mistune", "mistune", ">=999.0")])
        def convert() -> str:
            return "never"

        with pytest.raises(DependencyError) as exc_info:
            convert()

        assert exc_info.value.version_mismatches[0][0] == "mistune"

    def test_preserves_metadata(self) -> None:
        """Test functools.wraps keeps the wrapped name."""

        @requires_dependencies("markdown", [])
        def parse_document() -> None:
            """Docstring."""

        assert parse_document.__name__ == "parse_document"
        assert parse_document.__doc__ == "Docstring."


@pytest.mark.unit
class TestPackages:
    """Tests for version lookup helpers."""

    def test_installed_package_version(self) -> None:
        """Test an installed distribution reports a version."""
        assert get_package_version("mistune") is not None

    def test_missing_package_version(self) -> None:
        """Test a missing distribution reports None."""
        assert get_package_version("mdlatex-no-such-distribution") is None

    def test_requirement_met(self) -> None:
        """Test a satisfied specifier."""
        with patch("mdlatex.utils.packages.get_package_version", return_value="3.0.2"):
            assert check_version_requirement("mistune", ">=3.0.0") == (True, "3.0.2")

    def test_requirement_not_met(self) -> None:
        """Test an unsatisfied specifier."""
        with patch("mdlatex.utils.packages.get_package_version", return_value="2.0.5"):
            assert check_version_requirement("mistune", ">=3.0.0") == (False, "2.0.5")

    def test_invalid_specifier(self) -> None:
        """Test a malformed specifier is treated as unmet."""
        with patch("mdlatex.utils.packages.get_package_version", return_value="3.0.0"):
            assert check_version_requirement("mistune", "not a spec") == (False, "3.0.0")


@pytest.mark.unit
class TestDebugTimer:
    """Tests for debug_timer."""

    def test_logs_when_debug_enabled(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test elapsed time is logged at DEBUG."""
        logger = logging.getLogger("mdlatex.tests.timer")

        with caplog.at_level(logging.DEBUG, logger="mdlatex.tests.timer"):
            with debug_timer(logger, "Rendering (latex)"):
                pass

        assert "Rendering (latex) completed in" in caplog.text

    def test_silent_when_debug_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test nothing is logged above DEBUG."""
        logger = logging.getLogger("mdlatex.tests.timer_quiet")

        with caplog.at_level(logging.INFO, logger="mdlatex.tests.timer_quiet"):
            with debug_timer(logger, "Parsing (markdown)"):
                pass

        assert caplog.text == ""
