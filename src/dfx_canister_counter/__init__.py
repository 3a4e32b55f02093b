"""dfx-canister-counter — canister statistics for dfx.json projects."""

__version__ = "0.1.0"

from .model import (
    Value,
    VBool,
    VDict,
    VList,
    VNull,
    VNumber,
    VText,
    from_python,
    to_python,
)
from .errors import CounterError, IoError, ParseError, SchemaError
from .reader import load_document, read_document, resolve_config_path
from .analyzer import Analysis, CanisterInfo, analyze_canisters, count_canisters

__all__ = [
    "Value",
    "VBool",
    "VDict",
    "VList",
    "VNull",
    "VNumber",
    "VText",
    "from_python",
    "to_python",
    "CounterError",
    "IoError",
    "ParseError",
    "SchemaError",
    "load_document",
    "read_document",
    "resolve_config_path",
    "Analysis",
    "CanisterInfo",
    "analyze_canisters",
    "count_canisters",
]
