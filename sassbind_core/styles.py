from enum import IntEnum
from typing import Any, Tuple

from .exceptions import InvalidStyleError


class OutputStyle(IntEnum):
    """Mirror of libsass' ``enum Sass_Output_Style``.

    The values are part of the native ABI and must not be reordered.
    """

    NESTED = 0
    EXPANDED = 1
    COMPACT = 2
    COMPRESSED = 3

    @property
    def style_name(self) -> str:
        return STYLE_NAMES[self.value]

    @classmethod
    def from_name(cls, name: Any) -> "OutputStyle":
        if not isinstance(name, str) or name not in STYLE_NAMES:
            raise InvalidStyleError(name)
        return cls(STYLE_NAMES.index(name))

    @classmethod
    def from_ordinal(cls, value: Any) -> "OutputStyle":
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidStyleError(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidStyleError(value) from None


STYLE_NAMES: Tuple[str, ...] = ("nested", "expanded", "compact", "compressed")
