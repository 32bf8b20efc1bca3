#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/api.py
"""High-level entry points for Markdown to LaTeX conversion.

The functions here wire the Markdown parser and the LaTeX renderer together.
Keyword arguments are routed to whichever options class declares a field of
the same name, and override the matching field of an explicit options object.

Examples
--------
    >>> from mdlatex.api import to_latex
    >>> to_latex("Some *emphasis* and 50%.")
    'Some \\\\emph{emphasis} and 50\\\\%.\\n'

"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Optional, TypeVar, Union

from mdlatex.ast import Document
from mdlatex.options.base import CloneFrozenMixin
from mdlatex.options.latex import LatexRendererOptions
from mdlatex.options.markdown import MarkdownParserOptions
from mdlatex.parsers.markdown import MarkdownParser
from mdlatex.renderers.latex import LatexRenderer
from mdlatex.utils.io_utils import InputSource

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=CloneFrozenMixin)


def _split_kwargs_for_parser_and_renderer(kwargs: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split kwargs between parser and renderer based on their field names.

    Parameters
    ----------
    kwargs : dict
        Keyword arguments to split

    Returns
    -------
    tuple[dict, dict]
        (parser_kwargs, renderer_kwargs)

    """
    parser_fields = {f.name for f in fields(MarkdownParserOptions)}
    renderer_fields = {f.name for f in fields(LatexRendererOptions)}

    parser_kwargs = {}
    renderer_kwargs = {}
    unmatched = []

    for k, v in kwargs.items():
        if k in parser_fields:
            parser_kwargs[k] = v
        elif k in renderer_fields:
            renderer_kwargs[k] = v
        else:
            unmatched.append(k)

    if unmatched:
        logger.debug(f"Kwargs don't match parser or renderer fields: {unmatched}")

    return parser_kwargs, renderer_kwargs


def _build_options(options: Optional[OptionsT], options_class: type[OptionsT], kwargs: dict[str, Any]) -> OptionsT:
    """Apply keyword overrides to an options object, creating one if needed."""
    if options is None:
        return options_class(**kwargs)
    if kwargs:
        return options.create_updated(**kwargs)
    return options


def to_ast(
    source: InputSource,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    **kwargs: Any,
) -> Document:
    """Parse Markdown into an AST document.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown text, a path to a Markdown file, or a file-like object
    parser_options : MarkdownParserOptions, optional
        Parser options
    kwargs : Any
        Parser options that override ``parser_options``

    Returns
    -------
    Document
        AST document node

    """
    parser_kwargs, _ = _split_kwargs_for_parser_and_renderer(kwargs)
    options = _build_options(parser_options, MarkdownParserOptions, parser_kwargs)
    return MarkdownParser(options).parse(source)


def from_ast(
    ast_doc: Document,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    *,
    renderer_options: Optional[LatexRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Render an AST document to a LaTeX fragment.

    Parameters
    ----------
    ast_doc : Document
        AST Document node to render
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. If None, returns the rendered fragment.
    renderer_options : LatexRendererOptions, optional
        Renderer options
    kwargs : Any
        Renderer options that override ``renderer_options``

    Returns
    -------
    str or None
        The LaTeX fragment if ``output`` is None, otherwise None

    """
    _, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    options = _build_options(renderer_options, LatexRendererOptions, renderer_kwargs)

    with LatexRenderer(options) as renderer:
        if output is None:
            return renderer.render_to_string(ast_doc)
        renderer.render(ast_doc, output)
        return None


def to_latex(
    source: InputSource,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[LatexRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Convert Markdown to a LaTeX fragment.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown text, a path to a Markdown file, or a file-like object
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. If None, returns the rendered fragment.
    parser_options : MarkdownParserOptions, optional
        Parser options
    renderer_options : LatexRendererOptions, optional
        Renderer options
    kwargs : Any
        Parser or renderer options, routed by field name

    Returns
    -------
    str or None
        The LaTeX fragment if ``output`` is None, otherwise None

    Examples
    --------
        >>> to_latex("line one\\nline two", hard_wrap=True)
        'line one\\\\\\\\\\nline two\\n'

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    doc = to_ast(source, parser_options=parser_options, **parser_kwargs)
    return from_ast(doc, output, renderer_options=renderer_options, **renderer_kwargs)


__all__ = ["from_ast", "to_ast", "to_latex"]
