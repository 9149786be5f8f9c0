"""
Render Pipeline for the effect stack.

Rendering always starts again from the original image and replays every
committed effect in order, feeding each result into the next. Nothing is
applied incrementally on top of a previous render, so adjusting a pending
effect many times never accumulates rounding drift, and removing an effect
from the middle of the stack gives exactly the image that would have been
produced without it.

Row-independent effects may optionally be split into horizontal bands and
run on a thread pool; results are reassembled in row order and are equal to
the sequential result.
"""

import concurrent.futures
import logging
from typing import Dict, Iterable, List, Optional

import numpy as np

from FX_Libs.constants import DEFAULT_TILE_ROWS
from FX_Libs.EffectsLib.effect_registry import EffectRegistry, get_default_registry
from FX_Libs.EffectsLib.effect_settings import AppliedEffect
from FX_Libs.RasterLib.raster_buffer import RasterBuffer

logger = logging.getLogger(__name__)


class RenderPipeline:
    """
    Replays an effect stack over an original image.

    Example:
        >>> pipeline = RenderPipeline()
        >>> stack = [AppliedEffect.create("sepia"), AppliedEffect.create("contrast", level=20)]
        >>> preview = pipeline.render(original, stack)
    """

    def __init__(
        self,
        registry: Optional[EffectRegistry] = None,
        use_threading: bool = False,
        max_workers: Optional[int] = None,
        tile_rows: int = DEFAULT_TILE_ROWS,
    ) -> None:
        """
        Args:
            registry: Effect registry to dispatch through (default: global registry)
            use_threading: Split row-independent effects into bands on a thread pool
            max_workers: Maximum number of threads (default: None = CPU count)
            tile_rows: Rows per band when threading
        """
        if tile_rows < 1:
            raise ValueError(f"tile_rows must be >= 1, got {tile_rows}")
        self.registry = registry if registry is not None else get_default_registry()
        self.use_threading = use_threading
        self.max_workers = max_workers
        self.tile_rows = int(tile_rows)

    def render(
        self,
        original: RasterBuffer,
        stack: Iterable[AppliedEffect],
        pending: Optional[AppliedEffect] = None,
    ) -> RasterBuffer:
        """
        Render the stack (plus an optional uncommitted effect) over original.

        Args:
            original: The unmodified source image; never mutated
            stack: Committed effects in application order
            pending: Effect being previewed, applied after the stack

        Returns:
            The rendered image. With no effects it is equal to original.

        Raises:
            TypeError: If original is not a RasterBuffer
            RuntimeError: If an effect algorithm fails
        """
        if not isinstance(original, RasterBuffer):
            raise TypeError(f"Expected RasterBuffer, got {type(original)}")

        effects = list(stack)
        if pending is not None:
            effects.append(pending)

        result = original
        for position, effect in enumerate(effects):
            try:
                result = self.apply_effect(effect, result)
            except Exception as e:
                raise RuntimeError(
                    f"Error applying effect {position} ({effect.kind_name}): {str(e)}"
                ) from e

        logger.debug(f"Rendered {len(effects)} effects over {original.width}x{original.height} image")
        return result

    def apply_effect(self, effect: AppliedEffect, buffer: RasterBuffer) -> RasterBuffer:
        """Apply one effect, banding it across threads when allowed."""
        if (
            self.use_threading
            and buffer.height > self.tile_rows
            and self.registry.is_row_independent(effect.kind)
        ):
            return self._apply_banded(effect, buffer)
        return self.registry.apply(effect, buffer)

    def _apply_banded(self, effect: AppliedEffect, buffer: RasterBuffer) -> RasterBuffer:
        array = buffer.to_array()
        bands = [
            array[start:start + self.tile_rows]
            for start in range(0, buffer.height, self.tile_rows)
        ]
        results: List[Optional[np.ndarray]] = [None] * len(bands)

        with concurrent.futures.ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures: Dict[concurrent.futures.Future, int] = {}

            for band_index, band in enumerate(bands):
                band_buffer = RasterBuffer.from_array(band)
                future = executor.submit(self.registry.apply, effect, band_buffer)
                futures[future] = band_index

            # Collect results as they complete; order is restored by index
            for future in concurrent.futures.as_completed(futures):
                band_index = futures[future]
                results[band_index] = future.result().to_array()

        logger.debug(f"Applied {effect.kind_name} across {len(bands)} row bands")
        return RasterBuffer.from_array(np.concatenate(results, axis=0))


def render(
    original: RasterBuffer,
    stack: Iterable[AppliedEffect],
    pending: Optional[AppliedEffect] = None,
    registry: Optional[EffectRegistry] = None,
) -> RasterBuffer:
    """Render sequentially with a default pipeline."""
    return RenderPipeline(registry=registry).render(original, stack, pending)
