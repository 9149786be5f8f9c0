"""
Effect stack for FX Studio.

The stack is the ordered list of effects committed against the current
original image; insertion order is application order. It is the only
mutable editing state besides the history: pixels are always recomputed
from the original by replaying the stack.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from FX_Libs.EffectsLib.effect_settings import AppliedEffect


class EffectStack:
    """Ordered effects applied over the original image.

    Attributes:
        _effects: Committed effects, first applied first

    Iteration walks a copy, so the stack may be changed while iterating.
    """

    def __init__(self, effects: Optional[Iterable[AppliedEffect]] = None) -> None:
        self._effects: List[AppliedEffect] = []
        for effect in effects or ():
            self.push(effect)

    def push(self, effect: AppliedEffect) -> None:
        """Append an effect; it will be applied after every existing one."""
        if not isinstance(effect, AppliedEffect):
            raise TypeError(f"Expected AppliedEffect, got {type(effect)}")
        self._effects.append(effect)

    def remove_at(self, index: int) -> AppliedEffect:
        """
        Remove and return the effect at index.

        Raises:
            IndexError: If index is out of range
        """
        if not -len(self._effects) <= index < len(self._effects):
            raise IndexError(f"effect index {index} out of range for stack of {len(self._effects)}")
        return self._effects.pop(index)

    def replace(self, effects: Iterable[AppliedEffect]) -> None:
        """Replace the contents with a snapshot (used when restoring history)."""
        self.clear()
        for effect in effects:
            self.push(effect)

    def clear(self) -> None:
        """Remove every effect."""
        self._effects.clear()

    def snapshot(self) -> Tuple[AppliedEffect, ...]:
        """Immutable copy of the current order."""
        return tuple(self._effects)

    def kind_names(self) -> List[str]:
        """Kind names in application order, as used in export names."""
        return [effect.kind_name for effect in self._effects]

    def __len__(self) -> int:
        return len(self._effects)

    def __iter__(self) -> Iterator[AppliedEffect]:
        return iter(tuple(self._effects))

    def __getitem__(self, index: int) -> AppliedEffect:
        return self._effects[index]

    def __repr__(self) -> str:
        return f"EffectStack({self.kind_names()!r})"
