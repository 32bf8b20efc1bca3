#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that parsers inherit from. A
parser turns some input format into the mdlatex AST consumed by the LaTeX
renderer.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from mdlatex.ast import Document
from mdlatex.exceptions import InvalidOptionsError
from mdlatex.options.base import BaseParserOptions
from mdlatex.utils.io_utils import InputSource, read_text_content

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method should handle all supported input types:
    - str: File path to read, or the document text itself
    - Path: File path to read
    - IO[bytes] or IO[str]: File-like object
    - bytes: Raw document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration.

        Parameters
        ----------
        options : BaseParserOptions or None, default = None
            Format-specific parsing options. If None, default options will be used.

        """
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: InputSource) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            The input document to parse

        Returns
        -------
        Document
            AST Document node

        Raises
        ------
        ParsingError
            If parsing fails due to invalid format

        """
        pass

    @staticmethod
    def _load_text_content(input_data: InputSource) -> str:
        """Load text from any supported input type."""
        return read_text_content(input_data)
