"""Tagged, color-annotated logging facade.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from typing import TYPE_CHECKING, Final

# Local imports (core first, then alphabetical)
from .core.categories import Category, category_color, coerce_category
from .core.constants import COLOR_MARKUP_TEMPLATE, TAG_TEMPLATE
from .infra.config import get_predicate, get_sink, validate_predicate, validate_sink

if TYPE_CHECKING:
    from .core.protocols import ConsoleSink
    from .core.types import EnvironmentPredicate, HexColor

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "TaggedLogger",
    "format_message",
    "log_info_global",
    "log_warning_global",
    "log_error_global",
)

# =============================================================================
# Section 3: Constants
# =============================================================================
DEFAULT_CATEGORY: Final[Category] = Category.OTHER


# =============================================================================
# Section 12: Functions
# =============================================================================
def format_message(name: str, message: object, hex_color: HexColor | None = None) -> str:
    """Build ``[name] message``, wrapping the message in color markup if given.

    Example:
        >>> format_message("Matchmaker", "connected", "3F80F2FF")
        '[Matchmaker] <color=#3F80F2FF>connected</color>'
        >>> format_message("Store", "purchase failed")
        '[Store] purchase failed'
    """
    text = str(message)
    if hex_color:
        text = COLOR_MARKUP_TEMPLATE.format(hex_color=hex_color, message=text)
    return TAG_TEMPLATE.format(name=name, message=text)


def log_info_global(name: str, message: object) -> None:
    """Log an uncolored informational line without a logger instance."""
    if get_predicate()():
        get_sink().info(format_message(name, message))


def log_warning_global(name: str, message: object) -> None:
    """Log a warning line without a logger instance."""
    if get_predicate()():
        get_sink().warning(format_message(name, message))


def log_error_global(name: str, message: object) -> None:
    """Log an error line without a logger instance."""
    if get_predicate()():
        get_sink().error(format_message(name, message))


# =============================================================================
# Section 11: Classes
# =============================================================================
class TaggedLogger:
    """Logger bound to a display name and a category color.

    The category is resolved to its hex color once, here; only the color is
    kept. Every call re-checks the environment predicate and does nothing
    outside development sessions.

    Example:
        >>> log = TaggedLogger("Matchmaker", Category.NETWORK)
        >>> log.log_info("connected")  # [Matchmaker] <color=#3F80F2FF>connected</color>
    """

    __slots__ = ("_name", "_hex_color", "_sink", "_predicate")

    def __init__(
        self,
        name: str,
        category: Category | str = DEFAULT_CATEGORY,
        *,
        sink: ConsoleSink | None = None,
        predicate: EnvironmentPredicate | None = None,
    ) -> None:
        object.__setattr__(self, "_name", str(name))
        object.__setattr__(self, "_hex_color", category_color(coerce_category(category)).to_hex_rgba())
        object.__setattr__(self, "_sink", validate_sink(sink) if sink is not None else None)
        object.__setattr__(self, "_predicate", validate_predicate(predicate) if predicate is not None else None)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, hex_color={self._hex_color!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def hex_color(self) -> HexColor:
        """``RRGGBBAA`` color applied to informational messages."""
        return self._hex_color

    # -------------------------------------------------------------------------
    # Instance logging
    # -------------------------------------------------------------------------
    def log_info(self, message: object) -> None:
        if self._enabled():
            self._resolve_sink().info(format_message(self._name, message, self._hex_color))

    def log_warning(self, message: object) -> None:
        if self._enabled():
            self._resolve_sink().warning(format_message(self._name, message))

    def log_error(self, message: object) -> None:
        if self._enabled():
            self._resolve_sink().error(format_message(self._name, message))

    # -------------------------------------------------------------------------
    # Global logging
    # -------------------------------------------------------------------------
    log_info_global = staticmethod(log_info_global)
    log_warning_global = staticmethod(log_warning_global)
    log_error_global = staticmethod(log_error_global)

    def _enabled(self) -> bool:
        predicate = self._predicate if self._predicate is not None else get_predicate()
        return bool(predicate())

    def _resolve_sink(self) -> ConsoleSink:
        return self._sink if self._sink is not None else get_sink()
