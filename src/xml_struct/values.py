"""Value types for serialized XML trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class VString:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VInteger:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class VFloat:
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass
class VSequence:
    items: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class VMapping:
    entries: dict[str, "Value"] = field(default_factory=dict)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.entries.items()) + "}"

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, key: str) -> "Value":
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries


Scalar = Union[VString, VInteger, VFloat, VBool]

Value = Union[VString, VInteger, VFloat, VBool, VMapping, VSequence]


def is_scalar(value: Value) -> bool:
    return isinstance(value, (VString, VInteger, VFloat, VBool))


def to_python(value: Value):
    """Convert a Value into plain Python objects.

    - VMapping → dict (same key order)
    - VSequence → list
    - scalars → their ``str`` / ``int`` / ``float`` / ``bool`` payload
    """
    if isinstance(value, VMapping):
        return {k: to_python(v) for k, v in value.entries.items()}
    if isinstance(value, VSequence):
        return [to_python(v) for v in value.items]
    if is_scalar(value):
        return value.value
    raise TypeError(f"not a Value: {value!r}")
