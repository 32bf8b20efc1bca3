#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from. It
provides the options validation and output writing shared by text renderers.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdlatex.ast import Document
from mdlatex.constants import DEFAULT_OUTPUT_ENCODING
from mdlatex.exceptions import InvalidOptionsError, OutputWriteError
from mdlatex.options.base import BaseRendererOptions
from mdlatex.utils.io_utils import write_content

logger = logging.getLogger(__name__)


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from mdlatex.renderers.base import BaseRenderer
        >>>
        >>> class PlainRenderer(BaseRenderer):
        ...     def render(self, doc, output):
        ...         self.write_text_output(self.render_to_string(doc), output)
        ...
        ...     def render_to_string(self, doc):
        ...         return "rendered output"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options or BaseRendererOptions()

    @abstractmethod
    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST to the specified output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination. Can be:
            - File path (str or Path)
            - File-like object in binary or text mode

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If output cannot be written and ``fail_on_resource_errors`` is set

        """
        pass

    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document as a string

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    def render_to_bytes(self, doc: Document) -> bytes:
        """Render the AST to UTF-8 encoded bytes.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        bytes
            Rendered document as bytes

        """
        return self.render_to_string(doc).encode(DEFAULT_OUTPUT_ENCODING)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    def write_text_output(self, text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If output cannot be written and ``fail_on_resource_errors`` is set
        TypeError
            If output type is not supported

        Examples
        --------
        Write to BytesIO:
            >>> from io import BytesIO
            >>> from mdlatex.renderers.latex import LatexRenderer
            >>> buffer = BytesIO()
            >>> LatexRenderer().write_text_output("\\\\hrule", buffer)
            >>> buffer.getvalue()
            b'\\\\hrule'

        """
        try:
            write_content(text, output)
        except OSError as e:
            destination = str(output) if isinstance(output, (str, Path)) else getattr(output, "name", "<stream>")
            if self.options.fail_on_resource_errors:
                raise OutputWriteError(str(destination), original_error=e) from e
            logger.warning(f"Could not write output to {destination}: {e}")
