"""
Editing session for FX Studio.

An EditingSession owns the state of one open image: the original pixels,
the committed effect stack, the undo history and the currently displayed
render. It is the explicit replacement for UI-framework state: a host calls
its methods when the user commits, undoes, removes an effect, crops or
resizes, and draws whatever image they return.

Every operation validates its arguments before touching state, so a failed
call leaves the session exactly as it was.
"""

import logging
from typing import Any, List, Optional

from FX_Libs.constants import EXPORT_FILE_STEM, EXPORT_FILE_EXTENSION
from FX_Libs.EditorLib.effect_stack import EffectStack
from FX_Libs.EditorLib.history_log import HistoryLog
from FX_Libs.EditorLib.render_pipeline import RenderPipeline
from FX_Libs.EffectsLib.effect_settings import AppliedEffect
from FX_Libs.RasterLib import raster_ops
from FX_Libs.RasterLib.raster_buffer import RasterBuffer

logger = logging.getLogger(__name__)


class EditingSession:
    """
    Non-destructive editing state for one image.

    The history always starts with the "original, no effects" entry, so
    undo can step back to it but never past it.

    Example:
        >>> session = EditingSession(original)
        >>> session.commit(AppliedEffect.create("sepia"))
        >>> session.commit(AppliedEffect.create("noise", level=10))
        >>> session.undo()          # back to sepia only
        >>> session.export_filename()
        'edited-image-sepia-640x480.png'
    """

    def __init__(self, original: RasterBuffer, pipeline: Optional[RenderPipeline] = None) -> None:
        if not isinstance(original, RasterBuffer):
            raise TypeError(f"Expected RasterBuffer, got {type(original)}")
        self.pipeline = pipeline if pipeline is not None else RenderPipeline()
        self.stack = EffectStack()
        self.history = HistoryLog()
        self._original = original
        self._displayed = original
        self._reset(original)

    @property
    def original(self) -> RasterBuffer:
        return self._original

    @property
    def displayed(self) -> RasterBuffer:
        """The render of the committed stack."""
        return self._displayed

    @property
    def effects(self) -> List[AppliedEffect]:
        return list(self.stack)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    def _reset(self, original: RasterBuffer) -> None:
        self._original = original
        self._displayed = original
        self.stack.clear()
        self.history.clear()
        self.history.commit((), original)

    def load(self, original: RasterBuffer) -> None:
        """Replace the image; effects and history are discarded."""
        if not isinstance(original, RasterBuffer):
            raise TypeError(f"Expected RasterBuffer, got {type(original)}")
        self._reset(original)
        logger.info(f"Loaded {original.width}x{original.height} image")

    def render(self) -> RasterBuffer:
        """Re-render the committed stack from the original."""
        self._displayed = self.pipeline.render(self._original, self.stack)
        return self._displayed

    def preview(self, pending: Optional[AppliedEffect] = None) -> RasterBuffer:
        """
        Render the committed stack plus an uncommitted effect.

        Does not change the session; callers discard stale previews.
        """
        return self.pipeline.render(self._original, self.stack, pending)

    def commit(self, effect: AppliedEffect) -> RasterBuffer:
        """
        Append an effect to the stack and record the result in history.

        Any undone history entries are discarded.

        Returns:
            The new displayed image
        """
        if not isinstance(effect, AppliedEffect):
            raise TypeError(f"Expected AppliedEffect, got {type(effect)}")

        image = self.pipeline.render(self._original, self.stack, effect)
        self.stack.push(effect)
        self._displayed = image
        self.history.commit(self.stack.snapshot(), image)
        logger.info(f"Committed {effect.kind_name} effect ({len(self.stack)} in stack)")
        return image

    def undo(self) -> Optional[RasterBuffer]:
        """
        Restore the previous history state.

        Returns:
            The restored image, or None if there is nothing to undo
        """
        entry = self.history.undo()
        if entry is None:
            return None

        self.stack.replace(entry.effects)
        self._displayed = entry.result_image
        logger.info(f"Undo to history index {self.history.index} ({len(self.stack)} in stack)")
        return self._displayed

    def remove_effect(self, index: int) -> RasterBuffer:
        """
        Remove one effect from anywhere in the stack and re-render.

        The removal is recorded in history like a commit.

        Raises:
            IndexError: If index is out of range
        """
        if not -len(self.stack) <= index < len(self.stack):
            raise IndexError(f"effect index {index} out of range for stack of {len(self.stack)}")

        remaining = list(self.stack)
        removed = remaining.pop(index)
        image = self.pipeline.render(self._original, remaining)
        self.stack.remove_at(index)
        self._displayed = image
        self.history.commit(self.stack.snapshot(), image)
        logger.info(f"Removed {removed.kind_name} effect at index {index}")
        return image

    def crop(self, x: int, y: int, width: int, height: int) -> RasterBuffer:
        """
        Crop the displayed image and make it the new original.

        Effects and history are cleared since their pixel coordinates no
        longer apply.

        Raises:
            InvalidRegion: If the region is empty or out of bounds
        """
        cropped = raster_ops.crop(self._displayed, x, y, width, height)
        self._reset(cropped)
        logger.info(f"Cropped to {width}x{height} at ({x}, {y})")
        return cropped

    def resize(self, width: int, height: int) -> RasterBuffer:
        """
        Resize the displayed image and make it the new original.

        Effects and history are cleared.

        Raises:
            InvalidRegion: If either dimension is below 1
        """
        resized = raster_ops.resize(self._displayed, width, height)
        self._reset(resized)
        logger.info(f"Resized to {width}x{height}")
        return resized

    def export_filename(self) -> str:
        """Suggested download name: edited-image[-kind...]-WxH.png."""
        parts = [EXPORT_FILE_STEM]
        parts.extend(self.stack.kind_names())
        parts.append(f"{self._displayed.width}x{self._displayed.height}")
        return "-".join(parts) + EXPORT_FILE_EXTENSION

    def export_image(self) -> Any:
        """The displayed image as an RGBA PIL Image, ready for an encoder."""
        return raster_ops.to_pil_image(self._displayed)
