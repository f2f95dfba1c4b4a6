"""Tagged runtime values with 32-bit numeric payloads."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import Union

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_FLOAT32 = struct.Struct("<f")

Payload = Union[int, float, bool, None]


class ValueKind(enum.IntEnum):
    """The kind tag carried by every value."""

    NIL = 0
    INT = 1
    FLOAT = 2
    BOOLEAN = 3
    STRING = 4
    ARRAY = 5
    DICT = 6
    OBJECT = 7
    TUPLE = 8


def _to_float32(number: float) -> float:
    return _FLOAT32.unpack(_FLOAT32.pack(number))[0]


@dataclass(frozen=True)
class Value:
    """An immutable tagged value.

    Integers are signed 32-bit and floats are single precision; a float
    payload is rounded to the nearest single-precision number.
    """

    kind: ValueKind = ValueKind.NIL
    payload: Payload = None

    def __post_init__(self) -> None:
        kind = ValueKind(self.kind)
        object.__setattr__(self, "kind", kind)
        payload = self.payload

        if kind is ValueKind.INT:
            if isinstance(payload, bool) or not isinstance(payload, int):
                raise TypeError(f"INT value needs an int payload, got {payload!r}")
            if not INT_MIN <= payload <= INT_MAX:
                raise OverflowError(f"{payload} does not fit in a 32-bit integer")
        elif kind is ValueKind.FLOAT:
            if isinstance(payload, bool) or not isinstance(payload, (int, float)):
                raise TypeError(f"FLOAT value needs a float payload, got {payload!r}")
            object.__setattr__(self, "payload", _to_float32(float(payload)))
        elif kind is ValueKind.BOOLEAN:
            if not isinstance(payload, bool):
                raise TypeError(f"BOOLEAN value needs a bool payload, got {payload!r}")
        elif payload is not None:
            raise TypeError(f"{kind.name} value carries no payload, got {payload!r}")

    @classmethod
    def nil(cls) -> Value:
        """Return the nil value."""
        return cls()

    @classmethod
    def of(cls, obj: object) -> Value:
        """Build a value from None, a bool, an int, a float or a Value."""
        if isinstance(obj, Value):
            return obj
        if obj is None:
            return cls()
        if isinstance(obj, bool):
            return cls(ValueKind.BOOLEAN, obj)
        if isinstance(obj, int):
            return cls(ValueKind.INT, obj)
        if isinstance(obj, float):
            return cls(ValueKind.FLOAT, obj)
        raise TypeError(f"cannot make a value from {type(obj).__name__}")

    def to_python(self) -> Payload:
        """Return the Python object this value stands for."""
        if self.kind in (ValueKind.NIL, ValueKind.INT, ValueKind.FLOAT, ValueKind.BOOLEAN):
            return self.payload
        raise TypeError(f"{self.kind.name} value has no Python form")