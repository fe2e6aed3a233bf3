"""Editor state for the tone slider: text, 2D slider, undo/redo history.

The session mirrors what the browser editor does. Dragging the slider is
local; one adjustment request goes out on release. While a request is in
flight every control is disabled and mutating calls return ``False``.
"""

from __future__ import annotations

import logging
import math
from typing import Awaitable, Callable

from pydantic import BaseModel, ConfigDict, Field

from shared.exceptions import ToneAPIError
from shared.models import AdjustmentResponse

logger = logging.getLogger(__name__)

Adjuster = Callable[[str, int, int], Awaitable[AdjustmentResponse]]

FALLBACK_ERROR = "Error analyzing tone. Please try again."


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def to_level(fraction: float) -> int:
    """Convert a slider fraction to a 0-100 level, rounding halves up."""
    return int(math.floor(fraction * 100 + 0.5))


class SliderPosition(BaseModel):
    """Slider handle position; x drives style, y drives tone."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(default=0.5, ge=0.0, le=1.0)
    y: float = Field(default=0.5, ge=0.0, le=1.0)

    @classmethod
    def clamped(cls, x: float, y: float) -> "SliderPosition":
        return cls(x=_clamp(x), y=_clamp(y))

    @property
    def tone_level(self) -> int:
        return to_level(self.y)

    @property
    def style_level(self) -> int:
        return to_level(self.x)


class EditorSession:
    """In-memory editor state driven by text edits and slider gestures."""

    def __init__(self, adjuster: Adjuster, initial_text: str = "") -> None:
        self.adjuster = adjuster
        self.text = initial_text
        self.original_text = ""
        self.slider = SliderPosition()
        self.history: list[str] = [initial_text] if initial_text else []
        self.history_index = 0 if initial_text else -1
        self.error = ""
        self.is_loading = False
        self.is_dragging = False
        self.preview_text = ""

    @property
    def can_undo(self) -> bool:
        return self.history_index > 0 and not self.is_loading

    @property
    def can_redo(self) -> bool:
        return self.history_index < len(self.history) - 1 and not self.is_loading

    def _push_history(self, snapshot: str) -> None:
        # a new snapshot discards everything past the cursor
        self.history = self.history[: self.history_index + 1]
        self.history.append(snapshot)
        self.history_index = len(self.history) - 1

    def type_text(self, new_text: str) -> bool:
        if self.is_loading:
            return False
        self.text = new_text
        self._push_history(new_text)
        return True

    def undo(self) -> bool:
        if not self.can_undo:
            return False
        self.history_index -= 1
        self.text = self.history[self.history_index]
        return True

    def redo(self) -> bool:
        if not self.can_redo:
            return False
        self.history_index += 1
        self.text = self.history[self.history_index]
        return True

    def reset(self) -> bool:
        """Restore the first captured text and centre the slider."""
        if self.is_loading:
            return False
        self.text = self.original_text
        self.slider = SliderPosition()
        self.history = [self.original_text]
        self.history_index = 0
        self.error = ""
        self.is_dragging = False
        self.preview_text = ""
        return True

    def press(self, x: float, y: float) -> bool:
        """Start a drag at (x, y)."""
        if self.is_loading:
            return False
        self.is_dragging = True
        self._move_handle(x, y)
        return True

    def drag(self, x: float, y: float) -> bool:
        """Move the handle during a drag; no request is sent."""
        if not self.is_dragging or self.is_loading:
            return False
        self._move_handle(x, y)
        return True

    async def release(self) -> bool:
        """End the drag and request an adjustment for the final position."""
        if not self.is_dragging:
            return False
        self.is_dragging = False
        self.preview_text = ""
        return await self.submit()

    async def set_slider(self, x: float, y: float) -> bool:
        """Discrete slider change: move the handle and submit at once."""
        if self.is_loading:
            return False
        self.slider = SliderPosition.clamped(x, y)
        return await self.submit()

    def _move_handle(self, x: float, y: float) -> None:
        self.slider = SliderPosition.clamped(x, y)
        self.preview_text = (
            f"Adjusting to {self.slider.tone_level}% tone, {self.slider.style_level}% style..."
        )

    async def submit(self) -> bool:
        """Send the current text with the slider's levels.

        Returns True when the text was replaced by the adjusted version.
        Blank text is never sent.
        """
        if self.is_loading or not self.text.strip():
            return False

        self.is_loading = True
        self.error = ""
        before = self.text
        try:
            result = await self.adjuster(before, self.slider.tone_level, self.slider.style_level)
        except ToneAPIError as exc:
            logger.error("Tone adjustment failed: %s", exc)
            self.error = str(exc) or FALLBACK_ERROR
            return False
        finally:
            self.is_loading = False

        if not result.adjusted_text:
            return False
        if not self.original_text:
            self.original_text = before
        self.text = result.adjusted_text
        self._push_history(result.adjusted_text)
        return True
