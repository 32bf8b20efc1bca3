#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/options/__init__.py
"""Options dataclasses for the mdlatex parser and renderer."""

from mdlatex.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdlatex.options.latex import LatexRendererOptions
from mdlatex.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "LatexRendererOptions",
    "MarkdownParserOptions",
]
