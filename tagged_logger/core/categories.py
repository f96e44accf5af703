"""Log categories and their display colors.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final, assert_never

# Local imports (core first, then alphabetical)
from .color import Color
from .exceptions import UnknownCategoryError

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("Category", "CATEGORY_COLORS", "category_color", "coerce_category")


# =============================================================================
# Section 8: Enumerations
# =============================================================================
class Category(str, Enum):
    """Subsystem a log message belongs to."""

    NETWORK = "network"
    FIREBASE = "firebase"
    ADS = "ads"
    UI = "ui"
    UX = "ux"
    GAME_LOGIC = "game_logic"
    DATA = "data"
    OTHER = "other"


# =============================================================================
# Section 12: Functions
# =============================================================================
def category_color(category: Category) -> Color:
    """Return the display color for ``category``.

    The match is exhaustive: adding a member to :class:`Category` without a
    case here is reported by the type checker through ``assert_never``.
    """
    match category:
        case Category.NETWORK:
            return Color(r=0.247, g=0.502, b=0.949)  # blue
        case Category.FIREBASE:
            return Color(r=0.2, g=0.8, b=0.3)  # green
        case Category.ADS:
            return Color(r=0.95, g=0.35, b=0.55)  # pink
        case Category.UI:
            return Color(r=1.0, g=0.9, b=0.2)  # yellow
        case Category.UX:
            return Color(r=0.3, g=0.85, b=0.85)  # cyan
        case Category.GAME_LOGIC:
            return Color(r=1.0, g=0.6, b=0.2)  # orange
        case Category.DATA:
            return Color(r=0.8, g=0.4, b=0.9)  # purple
        case Category.OTHER:
            return Color(r=0.7, g=0.7, b=0.7)  # gray
        case _:
            assert_never(category)


def coerce_category(value: Category | str) -> Category:
    """Accept a member or its string value; reject anything else."""
    if isinstance(value, Category):
        return value
    if isinstance(value, str):
        try:
            return Category(value.lower())
        except ValueError:
            pass
    raise UnknownCategoryError(value, known=[member.value for member in Category])


# =============================================================================
# Section 13: Module State
# =============================================================================
CATEGORY_COLORS: Final[Mapping[Category, Color]] = MappingProxyType(
    {category: category_color(category) for category in Category}
)
