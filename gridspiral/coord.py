"""
Integer coordinate types.

A spiral can be asked to emit its coordinates as members of a fixed-width
integer type. Arithmetic on such a type wraps around silently, the way
machine integers do: an unsigned 8-bit walk that steps left of zero lands
on 255, a signed one that steps right of 127 lands on -128.

The default type, :data:`INT`, is Python's own unbounded ``int`` and never
wraps.
"""

from .util import SpiralError

import logging
logger = logging.getLogger(__name__)

__all__ = ["CoordType", "INT", "I8", "I16", "I32", "I64", "I128",
        "U8", "U16", "U32", "U64", "U128", "coord_type"]


class CoordType:
    """
    An integer type with a fixed width (or none).

    Args:
      name: how this type is called in configuration files.
      bits: the width. ``None`` means unbounded.
      signed: whether values are two's-complement signed.
    """
    def __init__(self, name, bits=None, signed=True):
        self.name = name
        self.bits = bits
        self.signed = signed
        if bits is None:
            self.min = self.max = None
            self._mask = None
        else:
            self._mask = (1 << bits) - 1
            if signed:
                self.min = -(1 << (bits-1))
                self.max = (1 << (bits-1)) - 1
            else:
                self.min = 0
                self.max = self._mask

    def __repr__(self):
        return "<CoordType %s>" % (self.name,)

    @property
    def bounded(self):
        return self.bits is not None

    def __contains__(self, value):
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        if self.bits is None:
            return True
        return self.min <= value <= self.max

    def wrap(self, value):
        """Reduce an arbitrary integer into this type's range."""
        if self._mask is None:
            return value
        value &= self._mask
        if self.signed and value > self.max:
            value -= 1 << self.bits
        return value

    def add(self, a, b):
        """Wrapping addition."""
        return self.wrap(a + b)

    def sub(self, a, b):
        """Wrapping subtraction."""
        return self.wrap(a - b)


INT = CoordType("int")

I8 = CoordType("i8", 8)
I16 = CoordType("i16", 16)
I32 = CoordType("i32", 32)
I64 = CoordType("i64", 64)
I128 = CoordType("i128", 128)

U8 = CoordType("u8", 8, signed=False)
U16 = CoordType("u16", 16, signed=False)
U32 = CoordType("u32", 32, signed=False)
U64 = CoordType("u64", 64, signed=False)
U128 = CoordType("u128", 128, signed=False)

_TYPES = {t.name: t for t in (INT, I8, I16, I32, I64, I128, U8, U16, U32, U64, U128)}


def coord_type(t):
    """
    Return the :class:`CoordType` for ``t``, which may already be one, or
    its name (``"i32"``, ``"u8"``, ``"int"`` …).
    """
    if isinstance(t, CoordType):
        return t
    if t is None:
        return INT
    try:
        return _TYPES[str(t).lower()]
    except KeyError:
        raise SpiralError("Unknown coordinate type: %r" % (t,)) from None
