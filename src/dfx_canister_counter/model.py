"""Data model for parsed dfx.json documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


# ---------------------------------------------------------------------------
# Null — singleton for JSON null
# ---------------------------------------------------------------------------

class _NullType:
    """The JSON ``null`` value."""

    _instance: _NullType | None = None

    def __new__(cls) -> _NullType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "VNull"

    def __bool__(self) -> bool:
        return False


VNull = _NullType()


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VBool:
    value: bool


@dataclass(frozen=True, slots=True)
class VNumber:
    value: int | float


@dataclass(frozen=True, slots=True)
class VText:
    value: str


@dataclass(frozen=True, slots=True)
class VList:
    items: list[Value] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class VDict:
    entries: dict[str, Value] = field(default_factory=dict)  # document order

    def get(self, key: str) -> Value | None:
        return self.entries.get(key)


Value = Union[VBool, VNumber, VText, VList, VDict, _NullType]


def kind_name(value: Value) -> str:
    """Return the JSON kind of *value* (``"object"``, ``"string"``, ...)."""
    if value is VNull:
        return "null"
    if isinstance(value, VBool):
        return "boolean"
    if isinstance(value, VNumber):
        return "number"
    if isinstance(value, VText):
        return "string"
    if isinstance(value, VList):
        return "array"
    return "object"


# ---------------------------------------------------------------------------
# Conversion to / from decoded JSON
# ---------------------------------------------------------------------------

def from_python(obj: Any) -> Value:
    """Convert a ``json.loads`` result into a Value tree.

    - ``None`` → VNull
    - ``bool`` → VBool (checked before numbers, bool is an int subclass)
    - ``int`` / ``float`` → VNumber
    - ``str`` → VText
    - ``list`` → VList
    - ``dict`` → VDict (key order kept)
    """
    if obj is None:
        return VNull
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, (int, float)):
        return VNumber(obj)
    if isinstance(obj, str):
        return VText(obj)
    if isinstance(obj, list):
        return VList([from_python(item) for item in obj])
    if isinstance(obj, dict):
        return VDict({str(k): from_python(v) for k, v in obj.items()})
    raise TypeError(f"cannot convert {type(obj).__name__} to a document value")


def to_python(value: Value) -> Any:
    """Inverse of :func:`from_python`."""
    if value is VNull:
        return None
    if isinstance(value, (VBool, VNumber, VText)):
        return value.value
    if isinstance(value, VList):
        return [to_python(v) for v in value.items]
    if isinstance(value, VDict):
        return {k: to_python(v) for k, v in value.entries.items()}
    raise TypeError(f"not a document value: {value!r}")
