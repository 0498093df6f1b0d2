"""Stable serialization of figures for regression snapshots."""

from __future__ import annotations

from typing import Any

from figure_builder.figure import Figure


def _round_value(value: Any):
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return round(value, 6)
    if isinstance(value, (list, tuple)):
        return [_round_value(item) for item in value]
    return value


def figure_to_snapshot(figure: Figure) -> dict[str, Any]:
    return {
        "kind": figure.kind,
        "color": figure.color,
        "size": _round_value(figure.size),
        "components": list(figure.components),
    }
