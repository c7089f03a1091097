"""Value types shared by the engine: the viewport rectangle and per-invocation metadata."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Viewport:
    """Logical coordinate rectangle in integer user units (mirrors ``viewBox``)."""

    x: int
    y: int
    width: int
    height: int

    def copy(self) -> Viewport:
        return Viewport(self.x, self.y, self.width, self.height)

    @property
    def origin(self) -> tuple[int, int]:
        return (self.x, self.y)

    def to_view_box(self) -> str:
        return f"{self.x} {self.y} {self.width} {self.height}"


@dataclass
class PassInfo:
    """Invocation metadata handed to every pass by the host pipeline."""

    # 0-based, incremented once per full pipeline pass
    pass_index: int = 0
    source_path: str | None = None
