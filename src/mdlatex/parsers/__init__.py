#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/parsers/__init__.py
"""Parsers that build the mdlatex AST from source documents."""

from mdlatex.parsers.base import BaseParser
from mdlatex.parsers.markdown import MarkdownParser, markdown_to_ast

__all__ = ["BaseParser", "MarkdownParser", "markdown_to_ast"]
