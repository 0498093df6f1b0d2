"""Named preset catalog for the figure director.

Each preset is an ordered sequence of builder steps. Presets only issue
steps; retrieving the result stays with the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

STEP_NAMES = frozenset(
    {"build_kind", "build_color", "build_size", "add_texture", "add_component"}
)


@dataclass(frozen=True)
class PresetStep:
    name: str
    value: Any


@dataclass(frozen=True)
class PresetDefinition:
    preset_id: str
    description: str = ""
    steps: tuple[PresetStep, ...] = field(default_factory=tuple)


def _steps(*pairs: tuple[str, Any]) -> tuple[PresetStep, ...]:
    return tuple(PresetStep(name=name, value=value) for name, value in pairs)


_PRESETS: dict[str, PresetDefinition] = {
    "simple_circle": PresetDefinition(
        preset_id="simple_circle",
        description="Plain blue circle",
        steps=_steps(
            ("build_kind", "circle"),
            ("build_color", "blue"),
            ("build_size", 5.0),
        ),
    ),
    "textured_square": PresetDefinition(
        preset_id="textured_square",
        description="Green square with a wood texture",
        steps=_steps(
            ("build_kind", "square"),
            ("build_color", "green"),
            ("build_size", 10.0),
            ("add_texture", "wood"),
        ),
    ),
    "outlined_triangle": PresetDefinition(
        preset_id="outlined_triangle",
        description="Red metal triangle with an outline",
        steps=_steps(
            ("build_kind", "triangle"),
            ("build_color", "red"),
            ("build_size", 7.5),
            ("add_texture", "metal"),
            ("add_component", "Outline"),
        ),
    ),
}


def _normalize_preset_id(preset_id: str | None) -> str:
    return str(preset_id or "").strip().lower()


def preset_ids() -> tuple[str, ...]:
    return tuple(sorted(_PRESETS))


def get_preset(preset_id: str | None) -> PresetDefinition:
    """Return the preset definition or raise KeyError for unknown ids."""
    normalized = _normalize_preset_id(preset_id)
    try:
        return _PRESETS[normalized]
    except KeyError:
        raise KeyError(preset_id) from None
