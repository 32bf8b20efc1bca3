#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/ast/walker.py
"""Depth-first document walker driving a table of emission rules.

The walker is the only component that traverses the tree. For every node it
renders the children first, each into a fresh :class:`OutputBuffer`, then
hands the node, its attributes and the children's rendered text to the rule
registered for the node's kind. Rendering is therefore bottom-up per subtree
even though traversal starts at the root.

Block rules return ``None``. Inline rules return a boolean: ``False`` means
"not handled", in which case the walker writes a fallback so the node's text
is not lost.

"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

from mdlatex.ast.nodes import Node, NodeKind, get_node_children
from mdlatex.ast.utils import extract_text
from mdlatex.exceptions import RenderingError
from mdlatex.utils.buffer import OutputBuffer
from mdlatex.utils.escape import escape_latex

logger = logging.getLogger(__name__)

EmissionRule = Callable[[OutputBuffer, Node, str], Optional[bool]]


class DocumentWalker:
    """Walk a node tree in document order and apply emission rules.

    Parameters
    ----------
    rules : Mapping[NodeKind, EmissionRule]
        Emission rule for every node kind

    Examples
    --------
        >>> from mdlatex.renderers.latex import LatexRenderer
        >>> from mdlatex.ast import Document, Paragraph, Text
        >>> renderer = LatexRenderer()
        >>> walker = DocumentWalker(renderer.dispatch_table)
        >>> walker.walk(Document(children=[Paragraph(content=[Text(content="100%")])]))
        '100\\\\%\\n'

    """

    def __init__(self, rules: Mapping[NodeKind, EmissionRule]):
        self._rules = rules

    def walk(self, root: Node) -> str:
        """Render ``root`` and everything below it.

        Parameters
        ----------
        root : Node
            Root of the tree, normally a Document

        Returns
        -------
        str
            The rendered LaTeX fragment

        Raises
        ------
        RenderingError
            If the tree contains an object that is not an mdlatex node

        """
        out = OutputBuffer()
        self._walk_node(root, out)
        return out.getvalue()

    def _walk_node(self, node: Node, out: OutputBuffer) -> None:
        kind = getattr(node, "kind", None)
        if not isinstance(kind, NodeKind):
            raise RenderingError(f"Cannot render object of type {type(node).__name__}", rendering_stage="walk")

        content = ""
        children = get_node_children(node)
        if children:
            work = OutputBuffer()
            for child in children:
                self._walk_node(child, work)
            content = work.getvalue()

        handled = self._rules[kind](out, node, content)
        if handled is False:
            self._write_fallback(out, node, content)

    @staticmethod
    def _write_fallback(out: OutputBuffer, node: Node, content: str) -> None:
        """Write the plain text of a node whose rule declined to render it."""
        logger.debug(f"{node.kind.value} node not handled, falling back to plain text")
        if content:
            # Children were already rendered, and escaped, by their own rules
            out.put(content)
        else:
            out.put(escape_latex(extract_text(node)))
