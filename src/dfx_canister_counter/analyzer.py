"""Analyzer: counts canisters and groups them by declared type."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .config import CANISTERS_KEY, TYPE_KEY, UNSPECIFIED_TYPE
from .errors import SchemaError
from .logging_config import get_logger
from .model import Value, VDict, VText, kind_name

logger = get_logger(__name__)


@dataclass(frozen=True)
class CanisterInfo:
    name: str
    type_name: str


@dataclass(frozen=True)
class Analysis:
    """Result of one :func:`analyze_canisters` call.

    ``by_type`` is read-only and keyed in first-seen order; use
    :meth:`sorted_types` for a stable listing. ``total`` must equal both
    ``len(canisters)`` and the sum of ``by_type``.
    """

    total: int = 0
    by_type: Mapping[str, int] = field(default_factory=dict, hash=False)
    canisters: tuple[CanisterInfo, ...] = ()

    def __post_init__(self) -> None:
        # Freeze the histogram even when the caller passed a plain dict
        object.__setattr__(self, "by_type", MappingProxyType(dict(self.by_type)))
        object.__setattr__(self, "canisters", tuple(self.canisters))
        if not self.total == len(self.canisters) == sum(self.by_type.values()):
            raise ValueError(
                f"inconsistent analysis: total={self.total}, "
                f"{len(self.canisters)} canisters, "
                f"{sum(self.by_type.values())} classified"
            )

    def sorted_types(self) -> list[tuple[str, int]]:
        return sorted(self.by_type.items())


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def analyze_canisters(doc: Value) -> Analysis:
    """Classify every canister declared in a parsed dfx.json.

    - A missing ``canisters`` key is an empty project, not an error.
    - A canister without ``type`` is counted as ``"unspecified"``.
    - Anything else of the wrong shape raises SchemaError; no partial
      result is returned.
    """
    if not isinstance(doc, VDict):
        raise SchemaError("$", f"expected a JSON object at the root, got {kind_name(doc)}")

    canisters = doc.get(CANISTERS_KEY)
    if canisters is None:
        logger.debug("No %r key; treating project as empty", CANISTERS_KEY)
        return Analysis()

    if not isinstance(canisters, VDict):
        raise SchemaError(
            CANISTERS_KEY, f"expected an object, got {kind_name(canisters)}"
        )

    histogram: dict[str, int] = {}
    infos: list[CanisterInfo] = []
    for name, definition in canisters.entries.items():
        type_name = _canister_type(name, definition)
        histogram[type_name] = histogram.get(type_name, 0) + 1
        infos.append(CanisterInfo(name=name, type_name=type_name))
        logger.debug("Canister %s: %s", name, type_name)

    return Analysis(total=len(infos), by_type=histogram, canisters=tuple(infos))


def count_canisters(doc: Value) -> tuple[int, dict[str, int]]:
    """Return just ``(total, {type: count})`` for *doc*."""
    analysis = analyze_canisters(doc)
    return analysis.total, dict(analysis.by_type)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _canister_type(name: str, definition: Value) -> str:
    path = f"{CANISTERS_KEY}.{name}"
    if not isinstance(definition, VDict):
        raise SchemaError(path, f"expected an object, got {kind_name(definition)}")

    declared = definition.get(TYPE_KEY)
    if declared is None:
        return UNSPECIFIED_TYPE
    if isinstance(declared, VText):
        return declared.value
    raise SchemaError(
        f"{path}.{TYPE_KEY}", f"expected a string, got {kind_name(declared)}"
    )
