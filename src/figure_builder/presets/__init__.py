"""Director preset catalog."""

from figure_builder.presets.catalog import (
    PresetDefinition,
    PresetStep,
    get_preset,
    preset_ids,
)

__all__ = [
    "PresetDefinition",
    "PresetStep",
    "get_preset",
    "preset_ids",
]
