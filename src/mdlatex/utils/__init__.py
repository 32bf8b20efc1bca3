#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/utils/__init__.py
"""Utility modules for the mdlatex package.

This package contains the escaping transforms, the append-only output buffer,
I/O helpers and dependency checking decorators.
"""

from mdlatex.utils.buffer import OutputBuffer
from mdlatex.utils.escape import HREF_RESERVED, LATEX_RESERVED, escape_href, escape_latex

__all__ = [
    "HREF_RESERVED",
    "LATEX_RESERVED",
    "OutputBuffer",
    "escape_href",
    "escape_latex",
]
