"""Fixed catalog of car poses used by the startup animation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class Frame:
    """One multi-line pose of the art."""

    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> Frame:
        return cls(tuple(text.split("\n")))

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def width(self) -> int:
        return max((len(line) for line in self.lines), default=0)


class FrameStore:
    """Ordered, immutable collection of frames.

    Frame 0 is the reference frame: its height sizes the repaint region and
    its width is the car width used for centering.
    """

    __slots__ = ("_frames",)

    def __init__(self, frames: Iterable[Frame]) -> None:
        self._frames = tuple(frames)
        if not self._frames:
            msg = "FrameStore needs at least one frame"
            raise ValueError(msg)

    def __len__(self) -> int:
        return len(self._frames)

    def frame_count(self) -> int:
        return len(self._frames)

    def get_frame(self, index: int) -> Frame:
        """Return the frame at ``index``.

        Raises:
            IndexError: If ``index`` is outside ``0..frame_count() - 1``.
        """
        if not 0 <= index < len(self._frames):
            msg = f"Frame index {index} out of range (0..{len(self._frames) - 1})"
            raise IndexError(msg)
        return self._frames[index]

    def line_height(self) -> int:
        return self._frames[0].height

    def max_width(self) -> int:
        return self._frames[0].width


# Poses: 0 rest, 1 rising, 2 highest, 3/4 tilted left, 5/6 tilted right
_CAR_ART = (
    r"""

         ______________
        /|            |\
       / |____________| \
      /__|____________|__\
     |  __            __  |
     | |__|          |__| |
     |   ____P_M_P_N____  |
     \_/   \       /   \_/
        \__/       \__/""",
    r"""
         ______________
        /|            |\
       / |____________| \
      /__|____________|__\
     |  __            __  |
     | |__|          |__| |
     |   ____P_M_P_N____  |
     \_/_||_____x___||_\_/
        /  \       /  \
        \__/       \__/""",
    r"""         ______________
        /|            |\
       / |____________| \
      /__|____________|__\
     |  __            __  |
     | |__|          |__| |
     |   ____P_M_P_N____  |
     \_/ ||         || \_/
       \_||_____x___||_/
        /  \       /  \
        \__/       \__/""",
    r"""
                 ______
         _______/     |\
        /|      ______| \
       / |_____/ _____|__\
      /__|______/     __  |
     |  __           |__| |
     | |__|      P_N____  |
     |   ____P_M/____||_\_/
     \_/   \        /  \
        \__/        \__/""",
    r"""                   ___
              ____/   |\
         ____/     ___| \
        /|    ____/ __|__\
       / |___/ ____/  __  |
      /__|____/      |__| |
     |  __         N____  |
     | |__|    M_P/  || \_/
     |   ____P/_x____||_/
     \_/   \        /  \
        \__/        \__/""",
    r"""
         ______
        /|     \_______
       / |______      |\
      /__|_____ \_____| \
     |  __     \______|__\
     | |__|           __  |
     |   ____P_M     |__| |
    \_/__||_____\P_N____  |
        /  \        /   \_/
        \__/        \__/""",
    r"""         ____
        /|   \_____   
       / |____     \___
      /__|___ \____   |\
     |  __   \____ \__| \
     | |__|       \___|__\
     |   ____P        __  |
     \_/ ||   \M_P   |__| |
       \_||_____x_\N____  |
        /  \        /   \_/
        \__/        \__/""",
)

CAR_FRAMES = FrameStore(Frame.from_text(art) for art in _CAR_ART)

__all__ = ["CAR_FRAMES", "Frame", "FrameStore"]
