from __future__ import annotations

import re
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from figure_builder.builder import FigureBuilderProtocol
from figure_builder.diagnostics import DiagnosticsSink, emit_simple, inherit_sink
from figure_builder.director import FigureDirector
from figure_builder.figure import DEFAULT_COLOR, DEFAULT_KIND, Figure


# =========================
# Aliases / Canonicalization
# =========================

def _canon(s: str) -> str:
    s = s.strip().lower()
    s = s.replace("-", " ")
    s = s.replace("_", " ")
    s = re.sub(r"\s+", " ", s)
    return s


KIND_ALIASES = {
    "circle": "circle",
    "round": "circle",
    "disc": "circle",

    "square": "square",
    "quad": "square",

    "triangle": "triangle",
    "tri": "triangle",
}


def _label(v) -> str:
    if not isinstance(v, str):
        raise ValueError("label must be a string")
    stripped = v.strip()
    if not stripped:
        raise ValueError("label must not be empty")
    return stripped


# =========================
# Request model
# =========================

class FigureRequest(BaseModel):
    """
    Declarative figure description. Fields left unset keep the builder's
    defaults (or the preset's values when preset_id is given).
    """

    kind: str = DEFAULT_KIND
    color: str = DEFAULT_COLOR
    size: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)

    textures: List[str] = Field(default_factory=list)
    components: List[str] = Field(default_factory=list)

    preset_id: Optional[str] = None

    @field_validator("kind", mode="before")
    @classmethod
    def _v_kind(cls, v):
        v = _label(v)
        return KIND_ALIASES.get(_canon(v), v)

    @field_validator("color", mode="before")
    @classmethod
    def _v_color(cls, v):
        return _label(v)

    @field_validator("textures", "components", mode="before")
    @classmethod
    def _v_labels(cls, v):
        if v is None:
            return []
        return [_label(item) for item in v]

    @field_validator("preset_id", mode="before")
    @classmethod
    def _v_preset_id(cls, v):
        if v is None:
            return v
        stripped = str(v).strip()
        return stripped or None


# =========================
# Request -> builder calls
# =========================

def build_from_request(
    builder: FigureBuilderProtocol,
    request: FigureRequest,
    director: FigureDirector | None = None,
    *,
    diag: DiagnosticsSink | None = None,
) -> Figure:
    """
    Replay a validated request against the builder and return the result.
    Preset steps run first; explicitly set request fields override them.
    """

    sink = inherit_sink(diag, builder)
    run_id = str(getattr(builder, "run_id", ""))
    explicit = request.model_fields_set

    # 1) Preset, if any. A caller-supplied director only lends its sink;
    #    it keeps pointing at its own builder.
    if request.preset_id is not None:
        preset_director = FigureDirector(builder, diag=director.diag if director is not None else None)
        preset_director.build_preset(request.preset_id)

    # 2) Scalar fields: only explicit values override preset output.
    if "kind" in explicit or request.preset_id is None:
        builder.build_kind(request.kind)
    if "color" in explicit or request.preset_id is None:
        builder.build_color(request.color)
    if request.size is not None:
        builder.build_size(request.size)

    # 3) Components in order.
    for texture in request.textures:
        builder.add_texture(texture)
    for component in request.components:
        builder.add_component(component)

    emit_simple(
        sink,
        run_id=run_id,
        stage="request",
        component="schema",
        code="REQUEST_APPLIED",
        source="request",
        input_value=request.model_dump(),
        reason="request replayed against builder",
    )
    return builder.get_result()
