"""Figure product assembled by a builder."""

from __future__ import annotations

import sys
from typing import TextIO

DEFAULT_KIND = "undefined"
DEFAULT_SIZE = 0.0
DEFAULT_COLOR = "white"


def _format_size(size) -> str:
    try:
        return f"{float(size):.2f}"
    except OverflowError:
        return str(size)


class Figure:
    """Composite geometric figure.

    Fields are read-only from the outside. Only a builder is expected to call
    the underscore-prefixed setters, and only while the figure is in progress;
    once returned by ``get_result`` the instance is never touched again.
    """

    __slots__ = ("_kind", "_size", "_color", "_components")

    def __init__(self) -> None:
        self._kind = DEFAULT_KIND
        self._size = DEFAULT_SIZE
        self._color = DEFAULT_COLOR
        self._components: list[str] = []

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def size(self) -> float:
        return self._size

    @property
    def color(self) -> str:
        return self._color

    @property
    def components(self) -> tuple[str, ...]:
        return tuple(self._components)

    # Builder-only mutation, no validation here.

    def _set_kind(self, kind: str) -> None:
        self._kind = kind

    def _set_size(self, size: float) -> None:
        self._size = size

    def _set_color(self, color: str) -> None:
        self._color = color

    def _add_component(self, component: str) -> None:
        self._components.append(component)

    def describe(self) -> str:
        lines = [
            "Built figure:",
            f"\t- Kind: {self._kind}",
            f"\t- Color: {self._color}",
            f"\t- Size (side/radius): {_format_size(self._size)}",
            f"\t- Components: {', '.join(self._components)}",
        ]
        return "\n".join(lines)

    def display(self, stream: TextIO | None = None) -> None:
        out = stream if stream is not None else sys.stdout
        out.write(f"\n{self.describe()}\n")

    def __repr__(self) -> str:
        return (
            f"Figure(kind={self._kind!r}, size={self._size!r}, "
            f"color={self._color!r}, components={self._components!r})"
        )
