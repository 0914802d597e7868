"""Car animation: slide in from the left edge, then bounce in place.

The renderer repaints a fixed-height region of the terminal in place. Before
every frame it moves the cursor up by the region height, blanks those rows,
and moves back up again, so the cursor always returns to the same row and
nothing scrolls.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, TextIO

from pnpm_car.frames import CAR_FRAMES, FrameStore
from pnpm_car.terminal import get_terminal_width, safe_width

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pnpm_car.frames import Frame

log = logging.getLogger(__name__)

type WidthProvider = Callable[[], int]
type Sleeper = Callable[[float], Awaitable[object]]

# Animation timing (milliseconds per frame), 10 FPS
FRAME_INTERVAL_MS = 100

SLIDE_START = 0
SLIDE_STEP = 3
MAX_SLIDE_DISTANCE = 24

REST_FRAME = 0
BOUNCE_SEQUENCE = (1, 2, 1, 0)
BOUNCE_LEFT_SEQUENCE = (3, 4, 3, 0)
BOUNCE_RIGHT_SEQUENCE = (5, 6, 5, 0, 0)
BOUNCE_FRAMES = (*BOUNCE_SEQUENCE, *BOUNCE_LEFT_SEQUENCE, *BOUNCE_RIGHT_SEQUENCE)

CURSOR_UP = "\x1b[{}A"


@dataclass(frozen=True, slots=True)
class AnimationStep:
    """Which frame to render and how far to indent it."""

    frame_index: int
    offset: int


def center_offset(term_width: int, car_width: int) -> int:
    """Column at which the car would sit centered (negative if it cannot fit)."""
    return term_width // 2 - car_width // 2


def slide_endpoint(term_width: int, car_width: int) -> int:
    """Offset where the slide-in stops: the distance cap or the center, whichever is closer."""
    return min(SLIDE_START + MAX_SLIDE_DISTANCE, center_offset(term_width, car_width))


def slide_offsets(endpoint: int) -> Iterator[int]:
    """Yield slide-in offsets from the left edge to ``endpoint``.

    Offsets advance by ``SLIDE_STEP``; a final shorter step lands exactly on
    ``endpoint``. Nothing is yielded when the endpoint lies left of the start.
    """
    if endpoint < SLIDE_START:
        return
    offset = SLIDE_START
    for offset in range(SLIDE_START, endpoint + 1, SLIDE_STEP):
        yield offset
    if offset != endpoint:
        yield endpoint


def animation_steps(store: FrameStore, term_width: int) -> Iterator[AnimationStep]:
    """Lazily produce the full animation: slide-in, then the three bounce cycles."""
    endpoint = slide_endpoint(term_width, store.max_width())
    for offset in slide_offsets(endpoint):
        yield AnimationStep(REST_FRAME, offset)
    for frame_index in BOUNCE_FRAMES:
        yield AnimationStep(frame_index, endpoint)


def render_line(line: str, offset: int, term_width: int) -> str:
    """Position one line of art ``offset`` columns from the left edge.

    A negative offset scrolls the art off the left edge by trimming leading
    characters. Padding is clamped to the terminal width.
    """
    if offset < 0:
        return line[min(-offset, len(line)) :]
    return " " * min(offset, term_width) + line


class Animator:
    """Draws frames from a store into a fixed region of the terminal."""

    def __init__(
        self,
        store: FrameStore = CAR_FRAMES,
        *,
        width_provider: WidthProvider | None = None,
        sleep: Sleeper | None = None,
        stream: TextIO | None = None,
        interval: float = FRAME_INTERVAL_MS / 1000,
    ) -> None:
        self._store = store
        self._stream = sys.stdout if stream is None else stream
        self._width_provider = width_provider or partial(get_terminal_width, self._stream)
        self._sleep = sleep or asyncio.sleep
        self._interval = interval

    @property
    def height(self) -> int:
        """Rows in the repaint region, fixed by the reference frame."""
        return self._store.line_height()

    def terminal_width(self) -> int:
        return safe_width(self._width_provider)

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def _fit(self, frame: Frame) -> tuple[str, ...]:
        # Every frame must cover exactly the region height or rows leak
        height = self.height
        lines = frame.lines[:height]
        return lines + ("",) * (height - len(lines))

    def reserve(self) -> None:
        """Scroll out blank rows for the region the first clear moves into."""
        self._write("\n" * self.height)

    def clear(self, width: int | None = None) -> None:
        """Blank the region above the cursor and return the cursor to its top row."""
        if width is None:
            width = self.terminal_width()
        height = self.height
        move_up = CURSOR_UP.format(height)
        self._write(move_up + (" " * width + "\n") * height + move_up)

    def draw(self, step: AnimationStep) -> None:
        frame = self._store.get_frame(step.frame_index)
        width = self.terminal_width()
        self.clear(width)
        rows = (render_line(line, step.offset, width) + "\n" for line in self._fit(frame))
        self._write("".join(rows))

    async def run(self) -> None:
        """Play the whole animation once, leaving the region blank.

        The region is blanked even when a draw or pause raises, so an abandoned
        animation leaves no half-drawn car behind.
        """
        self.reserve()
        count = 0
        try:
            for step in animation_steps(self._store, self.terminal_width()):
                self.draw(step)
                count += 1
                await self._sleep(self._interval)
        finally:
            self.clear()
        log.debug("Animation finished after %d frames", count)


async def run(
    store: FrameStore = CAR_FRAMES,
    width_provider: WidthProvider | None = None,
    sleep: Sleeper | None = None,
    stream: TextIO | None = None,
) -> None:
    """Play the car animation on ``stream`` (stdout by default)."""
    await Animator(store, width_provider=width_provider, sleep=sleep, stream=stream).run()


__all__ = [
    "BOUNCE_FRAMES",
    "FRAME_INTERVAL_MS",
    "MAX_SLIDE_DISTANCE",
    "SLIDE_STEP",
    "AnimationStep",
    "Animator",
    "animation_steps",
    "center_offset",
    "render_line",
    "run",
    "slide_endpoint",
    "slide_offsets",
]
