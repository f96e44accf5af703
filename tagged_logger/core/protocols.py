"""Protocol definitions for console sinks.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

__all__ = ("ConsoleSink",)


@runtime_checkable
class ConsoleSink(Protocol):
    """Protocol for the facility that renders log text.

    A sink exposes three independent channels. The info channel must accept
    inline ``<color=#RRGGBBAA>...</color>`` markup; what it does with the
    markup (render, translate, strip) is up to the sink.

    Example Implementation:
        >>> class PrintSink:
        ...     def info(self, text: str) -> None:
        ...         print(text)
        ...     def warning(self, text: str) -> None:
        ...         print('WARNING', text)
        ...     def error(self, text: str) -> None:
        ...         print('ERROR', text)
    """

    @abstractmethod
    def info(self, text: str) -> None:
        """Write to the informational channel."""
        ...

    @abstractmethod
    def warning(self, text: str) -> None:
        """Write to the warning channel."""
        ...

    @abstractmethod
    def error(self, text: str) -> None:
        """Write to the error channel."""
        ...
