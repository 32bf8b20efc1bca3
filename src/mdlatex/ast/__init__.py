#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The module consists of several components:

- nodes: AST node classes and the closed NodeKind enumeration
- utils: plain-text extraction
- walker: the depth-first walk that drives a renderer's emission rules

Examples
--------
Basic usage:

    >>> from mdlatex.ast import Document, Heading, Paragraph, Text
    >>> from mdlatex.renderers.latex import LatexRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> LatexRenderer().render_to_string(doc)
    '\\\\section{Title}\\n\\nHello world\\n'

"""

from __future__ import annotations

from mdlatex.ast.nodes import (
    BLOCK_KINDS,
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteContainer,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    Highlight,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    NodeKind,
    Paragraph,
    Quote,
    Strikethrough,
    Strong,
    StrongEmphasis,
    Superscript,
    Table,
    TableBody,
    TableCell,
    TableHeader,
    TableRow,
    Text,
    ThematicBreak,
    Underline,
    get_node_children,
)
from mdlatex.ast.utils import extract_text
from mdlatex.ast.walker import DocumentWalker, EmissionRule

__all__ = [
    "Alignment",
    "BLOCK_KINDS",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "DocumentWalker",
    "EmissionRule",
    "Emphasis",
    "FootnoteContainer",
    "FootnoteDefinition",
    "FootnoteReference",
    "HTMLBlock",
    "HTMLInline",
    "Heading",
    "Highlight",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeKind",
    "Paragraph",
    "Quote",
    "Strikethrough",
    "Strong",
    "StrongEmphasis",
    "Superscript",
    "Table",
    "TableBody",
    "TableCell",
    "TableHeader",
    "TableRow",
    "Text",
    "ThematicBreak",
    "Underline",
    "extract_text",
    "get_node_children",
]
