from __future__ import annotations

import io
import json
import sys
from contextlib import redirect_stdout
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

from figure_builder.builder import FigureBuilder
from figure_builder.diagnostics import (
    DIAG_JSONL_ENV,
    JsonlDiagnosticsSink,
    ListDiagnosticsSink,
    NoopDiagnosticsSink,
    Severity,
    VALID_COMPONENTS,
    VALID_SEVERITIES,
    VALID_SOURCES,
    VALID_STAGES,
    build_diagnostics_summary,
    diag_sink_from_env,
    emit_simple,
)
from figure_builder.director import FigureDirector
from figure_builder.errors import InvalidArgument
from figure_builder.schema import FigureRequest, build_from_request


REQUIRED_KEYS = {
    "ts",
    "run_id",
    "stage",
    "component",
    "code",
    "severity",
    "path",
    "source",
    "input_value",
    "resolved_value",
    "reason",
    "meta",
}


def test_build_session_is_stdout_silent_and_events_follow_contract():
    sink = ListDiagnosticsSink()
    builder = FigureBuilder(diag=sink)
    director = FigureDirector(builder, diag=sink)

    buf = io.StringIO()
    with redirect_stdout(buf):
        director.build_textured_square()
        builder.add_component("Frame").get_result()
        with pytest.raises(InvalidArgument):
            builder.build_size(-1)
    assert buf.getvalue() == ""

    assert sink.events
    for event in sink.events:
        payload = event.to_dict()
        assert set(payload.keys()) == REQUIRED_KEYS
        assert payload["run_id"] == builder.run_id
        assert payload["severity"] in VALID_SEVERITIES
        assert payload["stage"] in VALID_STAGES
        assert payload["source"] in VALID_SOURCES
        assert payload["component"] in VALID_COMPONENTS
        assert isinstance(payload["code"], str) and payload["code"]

    summary = build_diagnostics_summary(sink.events)
    assert summary["total"] == len(sink.events)
    assert summary["by_code"]["PRESET_SELECTED"] == 1
    assert summary["by_code"]["STEP_APPLIED"] == 5
    assert summary["by_code"]["STEP_REJECTED"] == 1
    assert summary["by_severity"]["warn"] == 1
    assert summary["by_stage"]["direct"] == 1


def test_emit_simple_contract_and_normalization():
    sink = ListDiagnosticsSink()
    event = emit_simple(
        sink,
        run_id="run-1",
        stage="build",
        component="builder",
        code="UNIT_EVENT",
        path="size",
        payload={"min": 0},
        severity=Severity.WARN,
        source="client",
        input_value=-10,
        meta={"hint": "positive"},
    )
    assert sink.events[-1] is event
    assert event.meta == {"hint": "positive", "payload": {"min": 0}}
    assert event.severity == int(Severity.WARN)

    normalized = emit_simple(
        sink,
        code="UNIT_EVENT_NORMALIZE",
        stage="unknown_stage",
        component="unknown_component",
        source="unknown_source",
        severity=99,
    )
    assert normalized.stage == "build"
    assert normalized.component == "builder"
    assert normalized.source == "computed"
    assert normalized.severity == int(Severity.ERROR)
    assert normalized.meta["normalized_from"] == {
        "stage": "unknown_stage",
        "component": "unknown_component",
        "source": "unknown_source",
    }
    assert normalized.reason == "normalized diagnostics vocabulary"


def test_summary_is_stable_on_empty_input():
    assert build_diagnostics_summary([]) == {
        "total": 0,
        "by_stage": {},
        "by_code": {},
        "by_severity": {},
    }


def test_sink_selection_from_env(monkeypatch, tmp_path):
    monkeypatch.delenv(DIAG_JSONL_ENV, raising=False)
    assert isinstance(diag_sink_from_env(), NoopDiagnosticsSink)

    out_path = tmp_path / "diag" / "events.jsonl"
    monkeypatch.setenv(DIAG_JSONL_ENV, str(out_path))
    assert isinstance(diag_sink_from_env(), JsonlDiagnosticsSink)

    builder = FigureBuilder(run_id="jsonl-run")
    builder.build_kind("circle").get_result()

    lines = out_path.read_text(encoding="utf-8").splitlines()
    records = [json.loads(line) for line in lines]
    assert [record["code"] for record in records] == ["STEP_APPLIED", "RESULT_TAKEN", "BUILDER_RESET"]
    assert all(set(record) == REQUIRED_KEYS for record in records)
    assert all(record["run_id"] == "jsonl-run" for record in records)

    FigureDirector(FigureBuilder(run_id="director-run")).build_simple_circle()
    build_from_request(FigureBuilder(run_id="request-run"), FigureRequest(kind="square", size=2))

    records = [json.loads(line) for line in out_path.read_text(encoding="utf-8").splitlines()]
    by_code = {record["code"]: record for record in records}
    assert by_code["PRESET_SELECTED"]["run_id"] == "director-run"
    assert by_code["PRESET_SELECTED"]["stage"] == "direct"
    assert by_code["REQUEST_APPLIED"]["run_id"] == "request-run"
    assert by_code["REQUEST_APPLIED"]["stage"] == "request"
