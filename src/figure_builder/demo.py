"""Console demonstration of the figure builder and director.

Usage:
  figure-builder-demo [--scenario circle|square|triangle|invalid] [--json]
"""

from __future__ import annotations

import json
import sys
from typing import Callable, Iterable, Tuple

from typing_extensions import Literal

from figure_builder.builder import FigureBuilder
from figure_builder.diagnostics import Severity, emit_simple
from figure_builder.director import FigureDirector
from figure_builder.errors import FigureBuildError
from figure_builder.figure import Figure
from figure_builder.snapshot import figure_to_snapshot

ScenarioName = Literal["circle", "square", "triangle", "invalid"]
SCENARIOS: Tuple[ScenarioName, ...] = ("circle", "square", "triangle", "invalid")


def _configure_output() -> None:
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is None:
        return
    try:
        reconfigure(encoding="utf-8")
    except (OSError, ValueError):
        pass


def _show(figure: Figure, as_json: bool) -> None:
    if as_json:
        print(json.dumps(figure_to_snapshot(figure), ensure_ascii=False, indent=2))
    else:
        figure.display()


def _scenario_circle(builder: FigureBuilder, director: FigureDirector) -> Figure:
    print("--- 1. Figure built by the director (simple circle) ---")
    director.build_simple_circle()
    return builder.get_result()


def _scenario_square(builder: FigureBuilder, director: FigureDirector) -> Figure:
    print("\n--- 2. Figure built by the director (textured square) ---")
    director.build_textured_square()
    return builder.get_result()


def _scenario_triangle(builder: FigureBuilder, director: FigureDirector) -> Figure:
    del director
    print("\n--- 3. Figure built by the client (chained triangle) ---")
    return (
        builder
        .build_kind("triangle")
        .build_color("red")
        .build_size(7.5)
        .add_texture("metal")
        .add_component("Outline")
        .get_result()
    )


def _scenario_invalid(builder: FigureBuilder, director: FigureDirector) -> Figure:
    del director
    print("\n--- 4. Validation check (size = -1) ---")
    try:
        builder.build_kind("broken").build_size(-1)
    except FigureBuildError:
        # Abandon the in-progress figure before re-raising to the scenario runner.
        builder.reset()
        raise
    return builder.get_result()


_SCENARIO_HANDLERS: dict[ScenarioName, Callable[[FigureBuilder, FigureDirector], Figure]] = {
    "circle": _scenario_circle,
    "square": _scenario_square,
    "triangle": _scenario_triangle,
    "invalid": _scenario_invalid,
}


def run_scenarios(
    names: Iterable[ScenarioName],
    *,
    as_json: bool = False,
    builder: FigureBuilder | None = None,
) -> int:
    builder = builder if builder is not None else FigureBuilder()
    director = FigureDirector(builder, diag=builder.diag)

    failures = 0
    for name in names:
        try:
            figure = _SCENARIO_HANDLERS[name](builder, director)
        except FigureBuildError as exc:
            failures += 1
            print(f"Error: {exc}")
            emit_simple(
                builder.diag,
                run_id=builder.run_id,
                stage="demo",
                component="demo",
                code="SCENARIO_FAILED",
                path=name,
                severity=Severity.WARN,
                reason=str(exc),
            )
            continue
        _show(figure, as_json)
    return failures


def main(argv=None) -> int:
    import argparse
    parser = argparse.ArgumentParser(description="Builder pattern demonstration")
    parser.add_argument("--scenario", choices=SCENARIOS, default=None, help="run a single scenario")
    parser.add_argument("--json", action="store_true", help="print figure snapshots as JSON")
    args = parser.parse_args(argv)

    _configure_output()
    print("## Builder pattern demonstration\n")

    names = (args.scenario,) if args.scenario else SCENARIOS
    run_scenarios(names, as_json=args.json)

    print("\nProgram finished.")
    # Failed scenarios are reported as text only.
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
