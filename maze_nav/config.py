from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .constants import DEFAULT_MAZE_HEIGHT, DEFAULT_MAZE_WIDTH
from .types import Coordinate, as_coordinate


@dataclass
class MazeConfig:
    """Generation request. Start/finish default to the top-left and bottom-right interior cells."""

    height: int = DEFAULT_MAZE_HEIGHT
    width: int = DEFAULT_MAZE_WIDTH
    start: Optional[Tuple[int, int]] = None
    finish: Optional[Tuple[int, int]] = None
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        assert isinstance(self.height, int), "height must be an int"
        assert isinstance(self.width, int), "width must be an int"
        for name in ("start", "finish"):
            value = getattr(self, name)
            if value is not None:
                assert len(value) == 2, f"{name} must have two components"
                setattr(self, name, tuple(int(v) for v in value))
        if self.seed is not None:
            self.seed = int(self.seed)

    def resolved_start(self) -> Coordinate:
        return as_coordinate(self.start) if self.start is not None else Coordinate(1, 1)

    def resolved_finish(self) -> Coordinate:
        if self.finish is not None:
            return as_coordinate(self.finish)
        return Coordinate(self.height - 2, self.width - 2)

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any] | None) -> "MazeConfig":
        d = cfg or {}
        # Allow a nested "maze" block or top-level keys
        m = d.get("maze", d)
        return cls(
            height=int(m.get("height", DEFAULT_MAZE_HEIGHT)),
            width=int(m.get("width", DEFAULT_MAZE_WIDTH)),
            start=m.get("start"),
            finish=m.get("finish"),
            seed=m.get("seed"),
        )
