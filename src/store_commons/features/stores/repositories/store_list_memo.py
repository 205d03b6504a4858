"""In-process memo for the full store list."""

from typing import List, Optional, Tuple

from ..entities.store import Store


class StoreListMemo:
    """Holds the last loaded full store list.
    
    Every invalidate() bumps a generation counter. A loader captures the
    generation before it starts and passes it to set(); a value loaded
    before the most recent invalidation is rejected.
    """
    
    def __init__(self):
        self._value: Optional[List[Store]] = None
        self._generation = 0
    
    @property
    def generation(self) -> int:
        return self._generation
    
    def get(self) -> Optional[List[Store]]:
        return self._value
    
    def snapshot(self) -> Tuple[Optional[List[Store]], int]:
        """Return the memoized value together with the current generation."""
        return self._value, self._generation
    
    def set(self, value: List[Store], generation: int) -> bool:
        """Retain value if no invalidation happened since generation was read."""
        if generation != self._generation:
            return False
        self._value = value
        return True
    
    def invalidate(self) -> None:
        self._value = None
        self._generation += 1
