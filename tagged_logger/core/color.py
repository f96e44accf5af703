"""RGBA color value and its hex encodings.

Channels are floats in [0, 1]. Conversion to bytes rounds half to even,
which is what the editor console's own color conversion does, so a logger
built here embeds the same hex string the engine would have produced.
"""
from __future__ import annotations

from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field

from .constants import CHANNEL_MAX, HEX_COLOR_PATTERN
from .exceptions import InvalidColorError
from .types import HexColor

__all__ = ['Channel', 'Color']

Channel = Annotated[float, Field(ge=0.0, le=1.0)]


class Color(BaseModel):
    """Immutable RGBA color."""

    model_config = ConfigDict(frozen=True)

    r: Channel
    g: Channel
    b: Channel
    a: Channel = 1.0

    @classmethod
    def from_hex(cls, value: str) -> Self:
        """Parse ``RRGGBB`` or ``RRGGBBAA`` (leading ``#`` optional)."""
        if not isinstance(value, str):
            raise InvalidColorError(value, 'expected a string')
        match = HEX_COLOR_PATTERN.match(value.strip())
        if match is None:
            raise InvalidColorError(value, 'expected RRGGBB or RRGGBBAA hex digits')
        digits = match.group('hex')
        if len(digits) == 6:
            digits += 'FF'
        r, g, b, a = (int(digits[i:i + 2], 16) / CHANNEL_MAX for i in range(0, 8, 2))
        return cls(r=r, g=g, b=b, a=a)

    def to_bytes(self) -> tuple[int, int, int, int]:
        return tuple(round(channel * CHANNEL_MAX) for channel in (self.r, self.g, self.b, self.a))  # type: ignore[return-value]

    def to_hex_rgba(self) -> HexColor:
        """Return the upper-case ``RRGGBBAA`` form used in console markup."""
        return ''.join(f'{byte:02X}' for byte in self.to_bytes())

    def to_hex_rgb(self) -> HexColor:
        return self.to_hex_rgba()[:6]
