"""
Element kind abstraction.

This module defines `ElementKind`, the numeric precision tag carried by every
tensor. The kind selects the backing buffer representation and, with it, the
overflow and rounding behavior applied when values are stored.

The domain layer deliberately does not import NumPy; the member values are
canonical dtype names which the infrastructure layer maps onto concrete
NumPy dtypes.
"""

from enum import Enum
from typing import Union


class ElementKind(Enum):
    """
    Enumeration of supported element kinds.

    Attributes
    ----------
    FLOAT32 : ElementKind
        32-bit IEEE float.
    INT32 : ElementKind
        32-bit signed integer.
    FLOAT64 : ElementKind
        64-bit IEEE float.
    INT8 : ElementKind
        8-bit signed integer.
    UINT8 : ElementKind
        8-bit unsigned integer.
    """

    FLOAT32 = "float32"
    INT32 = "int32"
    FLOAT64 = "float64"
    INT8 = "int8"
    UINT8 = "uint8"

    @classmethod
    def parse(cls, kind: Union["ElementKind", str]) -> "ElementKind":
        """
        Normalize a user-facing kind specifier into an `ElementKind`.

        Parameters
        ----------
        kind : Union[ElementKind, str]
            Either an `ElementKind` member or its canonical name
            (e.g. ``"float32"``). Names are matched case-insensitively.

        Returns
        -------
        ElementKind
            The normalized element kind.

        Raises
        ------
        ValueError
            If the name does not denote a supported kind.
        """
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            try:
                return cls(kind.strip().lower())
            except ValueError:
                pass
        raise ValueError(
            f"Invalid element kind {kind!r}. Expected one of "
            f"{[k.value for k in cls]}"
        )

    def is_float(self) -> bool:
        """Return True for floating-point kinds."""
        return self in (ElementKind.FLOAT32, ElementKind.FLOAT64)

    def is_integer(self) -> bool:
        """Return True for integer kinds."""
        return not self.is_float()

    @property
    def bits(self) -> int:
        """Width of one element in bits."""
        return _BITS[self]

    @property
    def signed(self) -> bool:
        """Whether the kind can represent negative values."""
        return self is not ElementKind.UINT8

    def __str__(self) -> str:
        return self.value


_BITS = {
    ElementKind.FLOAT32: 32,
    ElementKind.INT32: 32,
    ElementKind.FLOAT64: 64,
    ElementKind.INT8: 8,
    ElementKind.UINT8: 8,
}

DEFAULT_KIND = ElementKind.FLOAT32
"""Element kind used by factories when none is given."""

KindLike = Union[ElementKind, str]
"""Anything accepted by `ElementKind.parse`."""
