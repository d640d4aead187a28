"""
Serialization helpers for the sample catalog.

Provides JSON/YAML export and re-import via an intermediate dict representation.
Values that JSON and YAML cannot carry losslessly are stored as text:
    - Decimal  -> "3.14159265359"
    - datetime -> ISO-8601 string
Each entry keeps its kind, so the reverse direction restores the Python type.
"""
from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict

import yaml

from dtdemo.kinds import PrimitiveKind
from dtdemo.values import SampleCatalog, SampleValue

GROUPS = ("integers", "floats", "text", "booleans", "moments", "constants")


def value_to_plain(value: Any, kind: PrimitiveKind) -> Any:
    if kind == PrimitiveKind.DECIMAL:
        return str(value)
    if kind == PrimitiveKind.DATETIME:
        return value.isoformat()
    return value


def value_from_plain(data: Any, kind: PrimitiveKind) -> Any:
    if kind == PrimitiveKind.DECIMAL:
        return Decimal(data)
    if kind == PrimitiveKind.DATETIME:
        return datetime.fromisoformat(data)
    if kind in (PrimitiveKind.FLOAT, PrimitiveKind.DOUBLE):
        return float(data)
    return data


def sample_to_dict(s: SampleValue) -> Dict[str, Any]:
    return {
        "label": s.label,
        "kind": s.kind.value,
        "value": value_to_plain(s.value, s.kind),
        "note": s.note,
    }


def sample_from_dict(d: Dict[str, Any]) -> SampleValue:
    kind = PrimitiveKind(d["kind"])
    return SampleValue(
        label=d["label"],
        kind=kind,
        value=value_from_plain(d["value"], kind),
        note=d.get("note"),
    )


def catalog_to_dict(c: SampleCatalog) -> Dict[str, Any]:
    return {group: [sample_to_dict(s) for s in getattr(c, group)] for group in GROUPS}


def catalog_from_dict(d: Dict[str, Any]) -> SampleCatalog:
    return SampleCatalog(**{
        group: tuple(sample_from_dict(s) for s in d.get(group, []))
        for group in GROUPS
    })


def catalog_to_json(c: SampleCatalog) -> str:
    return json.dumps(catalog_to_dict(c), ensure_ascii=False, indent=2)


def catalog_from_json(s: str) -> SampleCatalog:
    d = json.loads(s)
    return catalog_from_dict(d)


def catalog_to_yaml(c: SampleCatalog) -> str:
    return yaml.safe_dump(catalog_to_dict(c), allow_unicode=True, sort_keys=False)


def catalog_from_yaml(s: str) -> SampleCatalog:
    d = yaml.safe_load(s)
    return catalog_from_dict(d)
