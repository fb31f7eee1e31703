"""
Styled text model: immutable sequences of (fragment, style) pairs.

Overview
- Category: closed set of semantic rendering categories.
- Style: a category, plus a color for the one open variant (custom).
- StyledText: ordered, immutable fragments; `+` concatenates without merging.
- styled(x, style): coerce a str (or StyledText) into StyledText.

Rendering
- StyledText implements __rich__, so any rich console prints it directly.
- Categories map to rich styles through a palette; a host may override any
  entry by defining a __styles__ mapping in __main__, e.g.:

    __styles__ = {"info": "bold cyan", "error": "bold #FF4DA6"}

Example
    >>> text = styled("1: ", Style.INFO) + "Pink"
    >>> str(text)
    '1: Pink'
    >>> [style.category for _, style in text]
    [<Category.INFO: 'info'>, <Category.PLAIN: 'plain'>]
"""
from enum import StrEnum
from typing import final

from rich.color import Color, ColorParseError
from rich.style import Style as RichStyle
from rich.text import Text

from .utils import *


class Category(StrEnum):
    """
    semantic rendering category of a text fragment.

    `custom` is the only category that carries a color; every other category is
    resolved through the palette.
    """
    PLAIN = "plain"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    CUSTOM = "custom"


# Default palette, overridable through __main__.__styles__
_PALETTE = {
    Category.PLAIN: "",
    Category.INFO: "cyan",
    Category.SUCCESS: "green",
    Category.WARNING: "yellow",
    Category.ERROR: "red",
}


def palette():
    """
    Return the effective category -> rich style table.

    Host overrides are looked up by category value ("info", "error", ...) in
    the __styles__ mapping of __main__ on every call.
    """
    overrides = getattr(__import__("__main__"), "__styles__", {})
    return {category: overrides.get(category.value, style) for category, style in _PALETTE.items()}


@final
class Style:
    """
    Immutable rendering style of a fragment.

    Use the predefined instances (Style.PLAIN, Style.INFO, Style.SUCCESS,
    Style.WARNING, Style.ERROR) or Style.custom(color) for an explicit color.
    Colors are anything rich can parse ("bright_red", "#00E5FF", "color(38)").
    """

    __slots__ = ("_category", "_color")

    def __new__(cls, category=Category.PLAIN, /, color=Unset):
        try:
            category = Category(category)
        except ValueError:
            raise ValueError(f"style category {category!r} is not a valid category") from None

        if category is Category.CUSTOM:
            if not isinstance(color, str):
                raise TypeError("custom style 'color' must be a string")
            try:
                Color.parse(color)
            except ColorParseError:
                raise ValueError(f"custom style color {color!r} is not a valid color") from None
        elif color is not Unset:
            raise TypeError(f"{category.value} style cannot have a color")

        self = super().__new__(cls)
        object.__setattr__(self, "_category", category)
        object.__setattr__(self, "_color", coalesce(color))
        return self

    @classmethod
    def custom(cls, color, /):
        return cls(Category.CUSTOM, color=color)

    @property
    def category(self):
        return self._category

    @property
    def color(self):
        return self._color

    def resolve(self):
        """
        Map this style to a rich style, honoring the current palette.
        """
        if self._category is Category.CUSTOM:
            return RichStyle(color=self._color)
        return RichStyle.parse(palette()[self._category])

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __eq__(self, other):
        if not isinstance(other, Style):
            return NotImplemented
        return (self._category, self._color) == (other._category, other._color)

    def __hash__(self):
        return hash((self._category, self._color))

    def __repr__(self):
        if self._category is Category.CUSTOM:
            return f"Style.custom({self._color!r})"
        return f"Style.{self._category.name}"


Style.PLAIN = Style(Category.PLAIN)
Style.INFO = Style(Category.INFO)
Style.SUCCESS = Style(Category.SUCCESS)
Style.WARNING = Style(Category.WARNING)
Style.ERROR = Style(Category.ERROR)


@final
class StyledText:
    """
    Immutable, ordered sequence of (fragment, style) pairs.

    - StyledText() is the empty value (no fragments).
    - StyledText("abc", Style.INFO) holds a single fragment.
    - a + b keeps every fragment of both sides in order; fragments are never
      merged, even when adjacent styles are equal. A plain str on either side
      becomes one plain fragment.
    """

    __slots__ = ("_fragments",)

    def __new__(cls, fragment=Unset, /, style=Style.PLAIN):
        if fragment is Unset:
            return cls._assemble(())
        if not isinstance(fragment, str):
            raise TypeError("StyledText() fragment must be a string")
        if not isinstance(style, Style):
            raise TypeError("StyledText() style must be a Style")
        return cls._assemble(((fragment, style),))

    @classmethod
    def _assemble(cls, fragments, /):
        self = object.__new__(cls)
        object.__setattr__(self, "_fragments", tuple(fragments))
        return self

    @property
    def fragments(self):
        return self._fragments

    def __add__(self, other):
        if isinstance(other, str):
            other = StyledText(other)
        if not isinstance(other, StyledText):
            return NotImplemented
        return StyledText._assemble(self._fragments + other._fragments)

    def __radd__(self, other):
        if isinstance(other, str):
            return StyledText(other) + self
        return NotImplemented

    def __iter__(self):
        return iter(self._fragments)

    def __len__(self):
        return len(self._fragments)

    def __str__(self):
        return "".join(fragment for fragment, _ in self._fragments)

    def __eq__(self, other):
        if not isinstance(other, StyledText):
            return NotImplemented
        return self._fragments == other._fragments

    def __hash__(self):
        return hash(self._fragments)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __repr__(self):
        return f"StyledText({', '.join(f'({fragment!r}, {style!r})' for fragment, style in self._fragments)})"

    def __rich__(self):
        return Text.assemble(*((fragment, style.resolve()) for fragment, style in self._fragments))


def styled(object, style=Style.PLAIN, /):
    """
    Coerce a str into a single-fragment StyledText; StyledText passes through.

    The style argument only applies to strings; existing StyledText keeps its
    own fragment styles.
    """
    if isinstance(object, StyledText):
        return object
    if isinstance(object, str):
        return StyledText(object, style)
    raise TypeError("styled() argument must be a string or a StyledText")


__all__ = (
    "Category",
    "Style",
    "StyledText",
    "styled",
    "palette",
)
