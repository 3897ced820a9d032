"""The log that flies off the tree after a chop, and the frame-rate counter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

LOG_START_X = 810.0
LOG_START_Y = 720.0
LOG_SPEED_X = 1000.0
LOG_SPEED_Y = -1500.0
LOG_MIN_X = -100.0
LOG_MAX_X = 2000.0


@dataclass
class Log:
    """A chopped log that flies sideways and upwards until it leaves the screen."""

    x: float = LOG_START_X
    y: float = LOG_START_Y
    speed_x: float = LOG_SPEED_X
    speed_y: float = LOG_SPEED_Y
    active: bool = False

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def _reset_position(self) -> None:
        self.x = LOG_START_X
        self.y = LOG_START_Y

    def launch(self, speed_x: float) -> None:
        """Send the log flying from the tree at ``speed_x`` pixels a second."""
        self._reset_position()
        self.speed_x = speed_x
        self.active = True

    def update(self, dt: float) -> None:
        """Move a flying log by ``dt`` seconds; park it once off screen."""
        if not self.active:
            return
        self.x += self.speed_x * dt
        self.y += self.speed_y * dt
        if self.x < LOG_MIN_X or self.x > LOG_MAX_X:
            self.active = False
            self._reset_position()


@dataclass
class FpsCounter:
    """Counts frames and refreshes its reading once at least a second has passed."""

    frame_count: int = 0
    elapsed: float = 0.0
    fps: float = 0.0
    text: str = ""

    def tick(self, dt: float) -> Optional[str]:
        """Count one frame of ``dt`` seconds; return the new text when refreshed."""
        self.frame_count += 1
        self.elapsed += dt
        if self.elapsed < 1.0:
            return None
        self.fps = self.frame_count / self.elapsed
        self.frame_count = 0
        self.elapsed = 0.0
        self.text = f"FPS: {self.fps:.2f}"
        return self.text