"""Base classes for parser and renderer options.

This module defines the foundation classes for the options objects used by
the mdlatex parser and renderer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdlatex.constants import DEFAULT_FAIL_ON_RESOURCE_ERRORS


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    fail_on_resource_errors : bool, default=False
        Whether writing the rendered output should raise instead of logging
        a warning when the destination cannot be written.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    fail_on_resource_errors: bool = field(
        default=DEFAULT_FAIL_ON_RESOURCE_ERRORS,
        metadata={
            "help": "Raise OutputWriteError when output cannot be written instead of logging a warning",
            "importance": "advanced",
            "exclude_from_cli": True,
        },
    )

    def __post_init__(self) -> None:
        """Validate base renderer options."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Notes
    -----
    Subclasses should define format-specific parsing options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate base parser options."""
        pass
