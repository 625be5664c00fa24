from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from packages.domain.policies import NumericColumnPolicy, TableNamingPolicy


@dataclass(frozen=True)
class ExtractionPolicies:
    numeric_column: NumericColumnPolicy
    table_naming: TableNamingPolicy


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Top-level YAML object must be a mapping: {path}")

    return data


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ValueError(f"`{key}` must be a mapping in policy file")
    return section


def _string_list(section: dict[str, Any], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = section.get(key)
    if raw is None:
        return default
    if not isinstance(raw, list):
        raise ValueError(f"`{key}` must be a list in policy file")
    return tuple(str(item).strip().lower() for item in raw if str(item).strip())


def _number(section: dict[str, Any], key: str, default: float, kind: type) -> Any:
    raw = section.get(key, default)
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"`{key}` must be a number in policy file, got {raw!r}")
    try:
        return kind(raw)
    except ValueError as exc:
        raise ValueError(f"`{key}` must be a number in policy file, got {raw!r}") from exc


def _numeric_policy(section: dict[str, Any]) -> NumericColumnPolicy:
    defaults = NumericColumnPolicy()
    pattern = defaults.pattern
    if section.get("pattern"):
        try:
            pattern = re.compile(str(section["pattern"]), flags=re.ASCII)
        except re.error as exc:
            raise ValueError(f"Invalid numeric pattern: {exc}") from exc
    threshold = _number(section, "threshold", defaults.threshold, float)
    return NumericColumnPolicy(pattern=pattern, threshold=threshold)


def _naming_policy(section: dict[str, Any]) -> TableNamingPolicy:
    defaults = TableNamingPolicy()
    return TableNamingPolicy(
        boilerplate_headings=_string_list(
            section, "boilerplate_headings", defaults.boilerplate_headings
        ),
        heading_tags=_string_list(section, "heading_tags", defaults.heading_tags),
        max_context_length=_number(section, "max_context_length", defaults.max_context_length, int),
        max_header_cell_length=_number(
            section, "max_header_cell_length", defaults.max_header_cell_length, int
        ),
    )


def load_policies(path: Path | None) -> ExtractionPolicies:
    """Load heuristic overrides; absent keys keep their defaults."""
    if path is None:
        return ExtractionPolicies(NumericColumnPolicy(), TableNamingPolicy())

    data = _load_yaml(path)
    return ExtractionPolicies(
        numeric_column=_numeric_policy(_section(data, "numeric_column")),
        table_naming=_naming_policy(_section(data, "table_naming")),
    )
