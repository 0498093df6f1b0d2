"""Director that replays named presets against a builder."""

from __future__ import annotations

from figure_builder.builder import FigureBuilderProtocol
from figure_builder.diagnostics import DiagnosticsSink, emit_simple, inherit_sink
from figure_builder.errors import InvalidArgument, InvalidState
from figure_builder.presets.catalog import STEP_NAMES, get_preset


class FigureDirector:
    """Encodes reusable construction sequences over a builder it does not own."""

    def __init__(
        self,
        builder: FigureBuilderProtocol | None = None,
        *,
        diag: DiagnosticsSink | None = None,
    ) -> None:
        self._builder = builder
        # None means: use the sink of whichever builder is set at build time.
        self.diag = diag

    @property
    def builder(self) -> FigureBuilderProtocol | None:
        return self._builder

    @builder.setter
    def builder(self, builder: FigureBuilderProtocol) -> None:
        self._builder = builder

    def set_builder(self, builder: FigureBuilderProtocol) -> None:
        self._builder = builder

    def _require_builder(self, preset_id: str) -> FigureBuilderProtocol:
        if self._builder is None:
            raise InvalidState(f"Cannot build preset {preset_id!r}: no builder is set")
        return self._builder

    def build_preset(self, preset_id: str) -> None:
        builder = self._require_builder(preset_id)
        try:
            preset = get_preset(preset_id)
        except KeyError:
            raise InvalidArgument(
                f"Unknown figure preset {preset_id!r}",
                argument="preset_id",
                value=preset_id,
            ) from None

        emit_simple(
            inherit_sink(self.diag, builder),
            run_id=str(getattr(builder, "run_id", "")),
            stage="direct",
            component="director",
            code="PRESET_SELECTED",
            path="preset_id",
            source="preset",
            input_value=preset_id,
            resolved_value=preset.preset_id,
            payload={"steps": [step.name for step in preset.steps]},
        )
        for step in preset.steps:
            if step.name not in STEP_NAMES:
                raise InvalidState(f"Preset {preset.preset_id!r} names unknown step {step.name!r}")
            getattr(builder, step.name)(step.value)

    def build_simple_circle(self) -> None:
        self.build_preset("simple_circle")

    def build_textured_square(self) -> None:
        self.build_preset("textured_square")
