#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/renderers/base.py
"""Base classes for event-stream renderers.

This module defines the abstract base class that renderers inherit from.
A renderer consumes an iterable of events exactly once, in order, and
produces a string.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from mdstream.events import Event
from mdstream.exceptions import InvalidOptionsError
from mdstream.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for event-stream renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from mdstream.events import Text
        >>> from mdstream.renderers.base import BaseRenderer
        >>>
        >>> class TextOnlyRenderer(BaseRenderer):
        ...     def render(self, events):
        ...         return "".join(e.text for e in events if isinstance(e, Text))

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options or BaseRendererOptions()

    @abstractmethod
    def render(self, events: Iterable[Event]) -> str:
        """Render an event stream to a string.

        Parameters
        ----------
        events : iterable of Event
            Balanced event stream; consumed exactly once

        Returns
        -------
        str
            Rendered output

        """
        pass

    def push(self, buffer: list[str], events: Iterable[Event]) -> None:
        """Render an event stream and append the result to ``buffer``.

        Parameters
        ----------
        buffer : list of str
            Caller-owned list of output fragments
        events : iterable of Event
            Balanced event stream; consumed exactly once

        """
        rendered = self.render(events)
        if rendered:
            buffer.append(rendered)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
