"""Pytest configuration and shared fixtures for the mdlatex test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from mdlatex.ast import Document, Paragraph, Text
from mdlatex.renderers.latex import LatexRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def renderer():
    """Provide a default LaTeX renderer that is closed after the test."""
    with LatexRenderer() as latex_renderer:
        yield latex_renderer


@pytest.fixture
def sample_markdown() -> str:
    """Provide a short Markdown document touching most block kinds."""
    return (
        "# Introduction\n"
        "\n"
        "Some *emphasis*, **strong** text and `code_span`.\n"
        "\n"
        "- first\n"
        "- second\n"
        "\n"
        "> quoted\n"
        "\n"
        "```python\n"
        "print('hi')\n"
        "```\n"
        "\n"
        "| a | b |\n"
        "|:--|--:|\n"
        "| 1 | 2 |\n"
    )


@pytest.fixture
def simple_document() -> Document:
    """Provide a document with a single paragraph."""
    return Document(children=[Paragraph(content=[Text(content="Hello, World!")])])
