#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/utils/escape.py
"""LaTeX text escaping utilities.

This module provides the two escaping transforms used by the LaTeX renderer.
They are kept as separate functions so each call site states which safety
class applies:

- :func:`escape_latex` for text placed in running text or inside any command
  argument (normal text, code spans, titles, alt text, language names)
- :func:`escape_href` for text placed in a hyperlink or file path argument
  (link targets, image paths)

Both functions are pure and total: every input string produces an output and
characters outside the reserved sets are returned unchanged.

"""

from __future__ import annotations

LATEX_SPECIAL_CHARS: dict[str, str] = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "#": r"\#",
    "_": r"\_",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

# Characters that cannot appear literally in a URL argument. Grouping
# characters and whitespace are percent-encoded; hyperref still needs
# "%" and "#" protected from TeX's own tokenizer.
HREF_SPECIAL_CHARS: dict[str, str] = {
    "\\": "%5C",
    "{": "%7B",
    "}": "%7D",
    " ": "%20",
    "%": r"\%",
    "#": r"\#",
}
HREF_SPECIAL_CHARS.update({chr(code): f"%{code:02X}" for code in [*range(0x00, 0x20), 0x7F]})

LATEX_RESERVED = frozenset(LATEX_SPECIAL_CHARS)
HREF_RESERVED = frozenset(HREF_SPECIAL_CHARS)

_LATEX_TABLE = str.maketrans(LATEX_SPECIAL_CHARS)
_HREF_TABLE = str.maketrans(HREF_SPECIAL_CHARS)


def escape_latex(text: str) -> str:
    r"""Escape special LaTeX characters in text content.

    Every reserved character is replaced in a single pass, so the braces
    introduced by a replacement (``\textbackslash{}``) are never escaped a
    second time.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe inside any LaTeX command argument

    Examples
    --------
        >>> escape_latex("50% of $10 & {more}")
        '50\\% of \\$10 \\& \\{more\\}'
        >>> escape_latex("C:\\temp")
        'C:\\textbackslash{}temp'

    """
    if not text:
        return text
    return text.translate(_LATEX_TABLE)


def escape_href(text: str) -> str:
    r"""Escape text used as a hyperlink target or graphics path.

    Parameters
    ----------
    text : str
        URL or path to escape

    Returns
    -------
    str
        Escaped text safe as the argument of ``\hyperref``, ``\href`` or
        ``\includegraphics``

    Examples
    --------
        >>> escape_href("https://example.com/a b#top")
        'https://example.com/a%20b\\#top'
        >>> escape_href("https://example.com/?q=50%")
        'https://example.com/?q=50\\%'

    """
    if not text:
        return text
    return text.translate(_HREF_TABLE)
