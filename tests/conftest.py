"""Shared fixtures."""

import logging

import pytest

from shapeofview.domain import FillStyle, Path, Point, Rect, StrokeStyle


class RecordingCanvas:
    """Canvas that records every call as ``(name, args)``."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def save(self) -> None:
        self.calls.append(("save", ()))

    def restore(self) -> None:
        self.calls.append(("restore", ()))

    def translate(self, dx: float, dy: float) -> None:
        self.calls.append(("translate", (dx, dy)))

    def clip_path(self, path: Path, anti_alias: bool = True) -> None:
        self.calls.append(("clip_path", (path, anti_alias)))

    def draw_shadow(self, path: Path, elevation: float) -> None:
        self.calls.append(("draw_shadow", (path, elevation)))

    def draw_path(
        self,
        path: Path,
        fill: FillStyle | None = None,
        stroke: StrokeStyle | None = None,
    ) -> None:
        self.calls.append(("draw_path", (path, fill, stroke)))

    def draw_circle(self, center: Point, radius: float, stroke: StrokeStyle) -> None:
        self.calls.append(("draw_circle", (center, radius, stroke)))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def calls_named(self, name: str) -> list[tuple]:
        return [args for call, args in self.calls if call == name]


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def square() -> Rect:
    return Rect(0, 0, 100, 100)


@pytest.fixture
def restore_root_logger():
    """Remove handlers added to the root logger during the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
