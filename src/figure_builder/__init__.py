"""Stepwise construction of geometric figures."""

from figure_builder.builder import FigureBuilder, FigureBuilderProtocol
from figure_builder.director import FigureDirector
from figure_builder.errors import FigureBuildError, InvalidArgument, InvalidState
from figure_builder.figure import Figure
from figure_builder.schema import FigureRequest, build_from_request
from figure_builder.snapshot import figure_to_snapshot

__all__ = [
    "Figure",
    "FigureBuildError",
    "FigureBuilder",
    "FigureBuilderProtocol",
    "FigureDirector",
    "FigureRequest",
    "InvalidArgument",
    "InvalidState",
    "build_from_request",
    "figure_to_snapshot",
]
