"""Style types: resolved styles, partial style modifiers, and styled sections."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Flag, auto


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color. Alpha 0 is reserved for ``NO_COLOR``."""

    r: int
    g: int
    b: int
    a: int = 0xFF

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#rrggbb`` (the leading ``#`` is optional)."""
        digits = value.strip().removeprefix("#")
        if len(digits) != 6:
            raise ValueError(f"Invalid color {value!r}: expected #rrggbb")
        try:
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError:
            raise ValueError(f"Invalid color {value!r}: not hexadecimal") from None
        return cls(r, g, b)

    def to_hex(self) -> str:
        if self == NO_COLOR:
            return "none"
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


# Sentinel: a channel set to NO_COLOR emits no escape code at all.
NO_COLOR = Color(0, 0, 0, 0)


class FontStyle(Flag):
    """Font attributes. The empty flag means no attributes."""

    BOLD = auto()
    ITALIC = auto()
    UNDERLINE = auto()


NO_FONT_STYLE = FontStyle(0)


@dataclass(frozen=True, slots=True)
class StyleModifier:
    """A partial style. ``None`` on a channel means "inherit"."""

    foreground: Color | None = None
    background: Color | None = None
    font_style: FontStyle | None = None

    def compose(self, other: StyleModifier) -> StyleModifier:
        """Return the modifier equivalent to applying ``self`` then ``other``."""
        return StyleModifier(
            foreground=other.foreground if other.foreground is not None else self.foreground,
            background=other.background if other.background is not None else self.background,
            font_style=other.font_style if other.font_style is not None else self.font_style,
        )


@dataclass(frozen=True, slots=True)
class Style:
    """A fully resolved style."""

    foreground: Color = NO_COLOR
    background: Color = NO_COLOR
    font_style: FontStyle = NO_FONT_STYLE

    def apply(self, modifier: StyleModifier) -> Style:
        """Overlay *modifier*: set channels win, unset channels pass through."""
        changes: dict[str, Color | FontStyle] = {}
        if modifier.foreground is not None:
            changes["foreground"] = modifier.foreground
        if modifier.background is not None:
            changes["background"] = modifier.background
        if modifier.font_style is not None:
            changes["font_style"] = modifier.font_style
        return replace(self, **changes) if changes else self


NO_STYLE = Style()

StyleSection = tuple[Style, str]
ModifierSection = tuple[StyleModifier, str]
