#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
extract_text : Extract plain text from a node or list of nodes

Examples
--------
Extract text from a heading:

    >>> from mdlatex.ast import Heading, Text, Emphasis
    >>> from mdlatex.ast.utils import extract_text
    >>>
    >>> heading = Heading(level=1, content=[
    ...     Text(content="Hello "),
    ...     Emphasis(content=[Text(content="world")])
    ... ])
    >>> extract_text(heading)
    'Hello world'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from mdlatex.ast.nodes import Code, Image, Text, get_node_children

if TYPE_CHECKING:
    from mdlatex.ast.nodes import Node


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = "") -> str:
    """Extract plain text from a node or list of nodes.

    Text and code span content is returned verbatim; an image contributes its
    alt text. Everything else contributes the text of its children.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = ""
        String placed between the text of sibling nodes

    Returns
    -------
    str
        Concatenated text content, unescaped

    Examples
    --------
        >>> from mdlatex.ast import Paragraph, Strong, Text
        >>> para = Paragraph(content=[
        ...     Text(content="This is "),
        ...     Strong(content=[Text(content="bold")]),
        ...     Text(content=" text.")
        ... ])
        >>> extract_text(para)
        'This is bold text.'
        >>> extract_text(para.content, joiner="|")
        'This is |bold| text.'

    """
    if isinstance(node_or_nodes, list):
        return joiner.join(part for part in (extract_text(node, joiner=joiner) for node in node_or_nodes) if part)

    node = node_or_nodes

    if isinstance(node, (Text, Code)):
        return node.content

    if isinstance(node, Image):
        return node.alt_text

    return extract_text(get_node_children(node), joiner=joiner)


__all__ = [
    "extract_text",
]
