#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy consumed by the LaTeX renderer. Each
node class carries a ``kind`` drawn from the closed :class:`NodeKind`
enumeration; the renderer's dispatch table maps every kind to exactly one
emission rule.

Node Hierarchy
--------------
Block-level nodes represent structural document elements:
    - Document, Paragraph, Heading, BlockQuote, CodeBlock
    - List, ListItem, ThematicBreak
    - Table, TableHeader, TableBody, TableRow, TableCell
    - FootnoteContainer, FootnoteDefinition, HTMLBlock

Inline nodes represent text formatting:
    - Text, Code, Emphasis, Strong, StrongEmphasis
    - Underline, Strikethrough, Highlight, Quote, Superscript
    - Link, Image, LineBreak, FootnoteReference, HTMLInline

"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional

from mdlatex.constants import Alignment


class NodeKind(Enum):
    """Closed set of node kinds understood by the renderer."""

    # Block kinds
    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BLOCK_QUOTE = "block_quote"
    CODE_BLOCK = "code_block"
    LIST = "list"
    LIST_ITEM = "list_item"
    HORIZONTAL_RULE = "horizontal_rule"
    TABLE = "table"
    TABLE_HEADER = "table_header"
    TABLE_BODY = "table_body"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    FOOTNOTE_CONTAINER = "footnote_container"
    FOOTNOTE_DEFINITION = "footnote_definition"
    RAW_BLOCK = "raw_block"

    # Inline kinds
    TEXT = "text"
    CODE_SPAN = "code_span"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    STRONG_EMPHASIS = "strong_emphasis"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    HIGHLIGHT = "highlight"
    QUOTE = "quote"
    LINE_BREAK = "line_break"
    LINK = "link"
    IMAGE = "image"
    SUPERSCRIPT = "superscript"
    FOOTNOTE_REFERENCE = "footnote_reference"
    RAW_INLINE = "raw_inline"

    @property
    def is_block(self) -> bool:
        """Return True for block-level kinds."""
        return self in BLOCK_KINDS


BLOCK_KINDS = frozenset(
    {
        NodeKind.DOCUMENT,
        NodeKind.PARAGRAPH,
        NodeKind.HEADING,
        NodeKind.BLOCK_QUOTE,
        NodeKind.CODE_BLOCK,
        NodeKind.LIST,
        NodeKind.LIST_ITEM,
        NodeKind.HORIZONTAL_RULE,
        NodeKind.TABLE,
        NodeKind.TABLE_HEADER,
        NodeKind.TABLE_BODY,
        NodeKind.TABLE_ROW,
        NodeKind.TABLE_CELL,
        NodeKind.FOOTNOTE_CONTAINER,
        NodeKind.FOOTNOTE_DEFINITION,
        NodeKind.RAW_BLOCK,
    }
)


class Node(ABC):
    """Base class for all AST nodes.

    Subclasses are dataclasses that declare their :class:`NodeKind` in the
    ``kind`` class attribute.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    kind: ClassVar[NodeKind]
    metadata: dict[str, Any]


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Heading(Node):
    """Heading node.

    Levels 1-5 map onto LaTeX sectioning commands; deeper levels are still
    accepted and rendered as a plain brace group.

    Parameters
    ----------
    level : int
        Heading level (1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.HEADING

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is positive."""
        if self.level < 1:
            raise ValueError(f"Heading level must be >= 1, got {self.level}")


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes in the paragraph
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class CodeBlock(Node):
    """Code block node.

    The content is literal source code and is never escaped.

    Parameters
    ----------
    content : str
        Code content
    language : str or None, default = None
        Language tag for syntax highlighting
    metadata : dict, default = empty dict
        Code block metadata (the full info string is kept under ``info_string``)

    """

    kind: ClassVar[NodeKind] = NodeKind.CODE_BLOCK

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class BlockQuote(Node):
    """Block quote node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the quote
    metadata : dict, default = empty dict
        Block quote metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.BLOCK_QUOTE

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    metadata : dict, default = empty dict
        List metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.LIST

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    metadata : dict, default = empty dict
        List item metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ThematicBreak(Node):
    """Thematic break node (horizontal rule)."""

    kind: ClassVar[NodeKind] = NodeKind.HORIZONTAL_RULE

    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Table(Node):
    """Table node.

    The declared ``alignments`` fix the column count of the rendered
    ``tabular`` environment, independently of how many cells each row holds.

    Parameters
    ----------
    header : TableHeader or None, default = None
        Header section
    body : TableBody or None, default = None
        Body section
    alignments : list, default = empty list
        Column alignments ('left', 'center', 'right', or None)
    metadata : dict, default = empty dict
        Table metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE

    header: Optional[TableHeader] = None
    body: Optional[TableBody] = None
    alignments: list[Alignment | None] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class TableHeader(Node):
    """Header section of a table.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Header rows
    metadata : dict, default = empty dict
        Header metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE_HEADER

    rows: list[TableRow] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class TableBody(Node):
    """Body section of a table.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Body rows
    metadata : dict, default = empty dict
        Body metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE_BODY

    rows: list[TableRow] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class TableRow(Node):
    """Table row node containing cells.

    Parameters
    ----------
    cells : list of TableCell, default = empty list
        Cells in this row
    metadata : dict, default = empty dict
        Row metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE_ROW

    cells: list[TableCell] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class TableCell(Node):
    """Table cell node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline content of the cell
    column : int, default = 0
        Zero-based column index of the cell within its row
    alignment : {'left', 'center', 'right'} or None, default = None
        Cell alignment
    metadata : dict, default = empty dict
        Cell metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE_CELL

    content: list[Node] = field(default_factory=list)
    column: int = 0
    alignment: Alignment | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class FootnoteContainer(Node):
    """Container for the footnote definitions collected at the end of a document.

    Parameters
    ----------
    definitions : list of FootnoteDefinition, default = empty list
        Footnote definitions in order of first reference
    metadata : dict, default = empty dict
        Container metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.FOOTNOTE_CONTAINER

    definitions: list[FootnoteDefinition] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class FootnoteDefinition(Node):
    """Footnote definition node.

    Parameters
    ----------
    identifier : str
        Footnote key as written in the source (e.g., "note1")
    ordinal : int, default = 0
        1-based position of the footnote in reference order
    children : list of Node, default = empty list
        Block-level content of the footnote
    metadata : dict, default = empty dict
        Definition metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.FOOTNOTE_DEFINITION

    identifier: str
    ordinal: int = 0
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block node.

    Raw markup is never copied into LaTeX output.

    Parameters
    ----------
    content : str
        Raw HTML content
    metadata : dict, default = empty dict
        Block metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.RAW_BLOCK

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Text content (escaped at render time)
    metadata : dict, default = empty dict
        Text metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Code(Node):
    """Inline code span node.

    Parameters
    ----------
    content : str
        Code content (escaped at render time)
    metadata : dict, default = empty dict
        Code metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.CODE_SPAN

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Emphasized inline nodes
    metadata : dict, default = empty dict
        Emphasis metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.EMPHASIS

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Strong(Node):
    """Strong (bold) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes in bold
    metadata : dict, default = empty dict
        Strong metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.STRONG

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class StrongEmphasis(Node):
    """Bold italic node (``***text***``).

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes in bold italic
    metadata : dict, default = empty dict
        Node metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.STRONG_EMPHASIS

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Underline(Node):
    """Underline node."""

    kind: ClassVar[NodeKind] = NodeKind.UNDERLINE

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Strikethrough(Node):
    """Strikethrough node."""

    kind: ClassVar[NodeKind] = NodeKind.STRIKETHROUGH

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Highlight(Node):
    """Highlighted (marked) text node."""

    kind: ClassVar[NodeKind] = NodeKind.HIGHLIGHT

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Quote(Node):
    """Inline quotation node (text between typographic double quotes)."""

    kind: ClassVar[NodeKind] = NodeKind.QUOTE

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Superscript(Node):
    """Superscript node."""

    kind: ClassVar[NodeKind] = NodeKind.SUPERSCRIPT

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class LineBreak(Node):
    """Hard line break node."""

    kind: ClassVar[NodeKind] = NodeKind.LINE_BREAK

    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Link(Node):
    """Link node.

    A URL starting with ``#`` refers to an anchor in the same document.

    Parameters
    ----------
    url : str
        Link destination URL or ``#anchor``
    content : list of Node, default = empty list
        Inline nodes representing link text
    title : str or None, default = None
        Optional link title
    metadata : dict, default = empty dict
        Link metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.LINK

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image path or URL
    alt_text : str, default = ''
        Alternative text, used as the figure caption
    title : str or None, default = None
        Optional image title
    metadata : dict, default = empty dict
        Image metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.IMAGE

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class FootnoteReference(Node):
    """Footnote reference node (inline).

    Parameters
    ----------
    identifier : str
        Footnote key as written in the source
    ordinal : int, default = 0
        1-based footnote number, which is what gets rendered
    metadata : dict, default = empty dict
        Footnote reference metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.FOOTNOTE_REFERENCE

    identifier: str
    ordinal: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class HTMLInline(Node):
    """Raw inline HTML node. Dropped by the LaTeX renderer."""

    kind: ClassVar[NodeKind] = NodeKind.RAW_INLINE

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node, in document order.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    Examples
    --------
    >>> heading = Heading(level=1, content=[Text("Hello "), Strong(content=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    if isinstance(node, (Document, BlockQuote, ListItem, FootnoteDefinition)):
        return list(node.children)

    if isinstance(
        node,
        (
            Heading,
            Paragraph,
            Emphasis,
            Strong,
            StrongEmphasis,
            Underline,
            Strikethrough,
            Highlight,
            Quote,
            Superscript,
            Link,
            TableCell,
        ),
    ):
        return list(node.content)

    if isinstance(node, List):
        return list(node.items)

    if isinstance(node, Table):
        children: list[Node] = []
        if node.header is not None:
            children.append(node.header)
        if node.body is not None:
            children.append(node.body)
        return children

    if isinstance(node, (TableHeader, TableBody)):
        return list(node.rows)

    if isinstance(node, TableRow):
        return list(node.cells)

    if isinstance(node, FootnoteContainer):
        return list(node.definitions)

    # Leaf nodes
    return []
