"""Fluent builder that assembles a Figure step by step."""

from __future__ import annotations

import math
import uuid
from numbers import Real
from typing import Any, Protocol

from figure_builder.diagnostics import DiagnosticsSink, Severity, diag_sink_from_env, emit_simple
from figure_builder.errors import InvalidArgument
from figure_builder.figure import Figure

TEXTURE_LABEL = "Texture ({texture})"


class FigureBuilderProtocol(Protocol):
    """Steps a director or client may issue against a builder."""

    def reset(self) -> FigureBuilderProtocol: ...

    def build_kind(self, kind: str) -> FigureBuilderProtocol: ...

    def build_color(self, color: str) -> FigureBuilderProtocol: ...

    def build_size(self, size: float) -> FigureBuilderProtocol: ...

    def add_texture(self, texture: str) -> FigureBuilderProtocol: ...

    def add_component(self, label: str) -> FigureBuilderProtocol: ...

    def get_result(self) -> Figure: ...


def _checked_size(size: Any) -> Real:
    if isinstance(size, bool) or not isinstance(size, Real):
        raise InvalidArgument(
            f"Figure size must be a real number, got {size!r}",
            argument="size",
            value=size,
        )
    # Compare without converting: exact ints and Fractions are stored as given.
    if size != size or size == math.inf or size <= 0:
        raise InvalidArgument(
            f"Figure size must be a finite number greater than zero, got {size!r}",
            argument="size",
            value=size,
        )
    return size


class FigureBuilder:
    """Concrete builder owning exactly one in-progress Figure."""

    def __init__(self, *, diag: DiagnosticsSink | None = None, run_id: str = "") -> None:
        self.run_id = run_id or uuid.uuid4().hex
        self.diag = diag if diag is not None else diag_sink_from_env()
        self._figure = Figure()

    def _emit(self, code: str, path: str = "", **kwargs: Any) -> None:
        emit_simple(
            self.diag,
            run_id=self.run_id,
            stage="build",
            component="builder",
            code=code,
            path=path,
            **kwargs,
        )

    def _applied(self, path: str, value: Any) -> FigureBuilder:
        self._emit("STEP_APPLIED", path, input_value=value, resolved_value=value, source="client")
        return self

    def reset(self) -> FigureBuilder:
        self._figure = Figure()
        self._emit("BUILDER_RESET", reason="start a new figure")
        return self

    def build_kind(self, kind: str) -> FigureBuilder:
        self._figure._set_kind(kind)
        return self._applied("kind", kind)

    def build_color(self, color: str) -> FigureBuilder:
        self._figure._set_color(color)
        return self._applied("color", color)

    def build_size(self, size: float) -> FigureBuilder:
        try:
            value = _checked_size(size)
        except InvalidArgument as exc:
            self._emit(
                "STEP_REJECTED",
                "size",
                severity=Severity.WARN,
                source="client",
                input_value=size,
                reason=exc.message,
            )
            raise
        self._figure._set_size(value)
        return self._applied("size", value)

    def add_texture(self, texture: str) -> FigureBuilder:
        label = TEXTURE_LABEL.format(texture=texture)
        self._figure._add_component(label)
        return self._applied("components", label)

    def add_component(self, label: str) -> FigureBuilder:
        self._figure._add_component(label)
        return self._applied("components", label)

    def get_result(self) -> Figure:
        """Hand the finished figure to the caller and start a fresh one."""
        result = self._figure
        self._emit(
            "RESULT_TAKEN",
            resolved_value={"kind": result.kind, "components": len(result.components)},
            reason="figure handed to caller",
        )
        self.reset()
        return result
