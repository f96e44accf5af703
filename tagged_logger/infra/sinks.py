"""Console sinks that render tagged log lines.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, assert_never

# Third-party (alphabetical)
from rich.console import Console
from rich.text import Text

# Local imports (core first, then alphabetical)
from ..core.constants import COLOR_MARKUP_PATTERN, DEFAULT_COMPONENT
from .logging import get_logger

if TYPE_CHECKING:
    import logfire

    from ..core.protocols import ConsoleSink
    from ..core.types import LogLevel, LogRecord, SinkKind

__all__ = ('LogfireSink', 'RichConsoleSink', 'MemorySink', 'create_sink', 'strip_markup', 'markup_to_text')


def strip_markup(text: str) -> str:
    """Remove ``<color=#...>`` wrappers, keeping the wrapped text."""
    return COLOR_MARKUP_PATTERN.sub(lambda match: match.group('body'), text)


def markup_to_text(text: str, *, style: str | None = None) -> Text:
    """Translate inline color markup into a styled :class:`rich.text.Text`.

    The alpha byte is dropped; terminals have no notion of it.
    """
    rendered = Text(style=style or '')
    position = 0
    for match in COLOR_MARKUP_PATTERN.finditer(text):
        rendered.append(text[position:match.start()])
        rendered.append(match.group('body'), style=f"#{match.group('hex')[:6]}")
        position = match.end()
    rendered.append(text[position:])
    return rendered


@dataclass
class LogfireSink:
    """Forward the three channels to a component-tagged logfire logger.

    Records only reach a console or backend once the host has called
    :func:`tagged_logger.infra.logging.configure_logging`.

    Example:
        >>> sink = LogfireSink(component='matchmaking')
        >>> sink.info('[Matchmaker] <color=#3F80F2FF>connected</color>')
    """

    component: str = DEFAULT_COMPONENT
    keep_markup: bool = False
    _logger: logfire.Logfire = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._logger = get_logger(self.component)

    def info(self, text: str) -> None:
        self._logger.info('{message}', message=self._render(text))

    def warning(self, text: str) -> None:
        self._logger.warning('{message}', message=text)

    def error(self, text: str) -> None:
        self._logger.error('{message}', message=text)

    def _render(self, text: str) -> str:
        return text if self.keep_markup else strip_markup(text)


@dataclass
class RichConsoleSink:
    """Render to a terminal through :mod:`rich`, honoring color markup."""

    console: Console = field(default_factory=lambda: Console(stderr=True, highlight=False))
    warning_style: str = 'yellow'
    error_style: str = 'bold red'

    def info(self, text: str) -> None:
        self.console.print(markup_to_text(text))

    def warning(self, text: str) -> None:
        self.console.print(markup_to_text(text, style=self.warning_style))

    def error(self, text: str) -> None:
        self.console.print(markup_to_text(text, style=self.error_style))


@dataclass
class MemorySink:
    """Keep every write in order, for inspection."""

    records: list[LogRecord] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def info(self, text: str) -> None:
        self._append('info', text)

    def warning(self, text: str) -> None:
        self._append('warning', text)

    def error(self, text: str) -> None:
        self._append('error', text)

    def messages(self, level: LogLevel | None = None) -> list[str]:
        """Return written texts, optionally for one channel only."""
        with self._lock:
            return [text for record_level, text in self.records if level is None or record_level == level]

    def clear(self) -> None:
        with self._lock:
            self.records.clear()

    def _append(self, level: LogLevel, text: str) -> None:
        with self._lock:
            self.records.append((level, text))


def create_sink(kind: SinkKind) -> ConsoleSink:
    """Build one of the bundled sinks by name."""
    match kind:
        case 'logfire':
            return LogfireSink()
        case 'rich':
            return RichConsoleSink()
        case 'memory':
            return MemorySink()
        case _:
            assert_never(kind)
