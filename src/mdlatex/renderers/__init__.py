#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/renderers/__init__.py
"""Renderers that turn the mdlatex AST into output text."""

from mdlatex.renderers.base import BaseRenderer
from mdlatex.renderers.latex import LatexFlags, LatexRenderer, RendererState, create_renderer, destroy_renderer

__all__ = [
    "BaseRenderer",
    "LatexFlags",
    "LatexRenderer",
    "RendererState",
    "create_renderer",
    "destroy_renderer",
]
