"""Base classes for parser and renderer options.

This module defines the foundation classes for the option dataclasses
used by the mdstream renderer and the markdown event adapter.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdstream.constants import DEFAULT_CHECK_BALANCE


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

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
    check_balance : bool, default False
        Verify that every Start event is closed by an End event of the same
        kind and raise UnbalancedEventsError otherwise. Upstream parsers are
        trusted to emit balanced streams, so this is a debugging aid.

    """

    check_balance: bool = field(
        default=DEFAULT_CHECK_BALANCE,
        metadata={
            "help": "Raise UnbalancedEventsError when Start/End events do not pair up",
            "importance": "advanced",
        },
    )


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Subclasses define format-specific parsing options as frozen dataclass
    fields.
    """
