"""
Undo history - value snapshots of automaton state taken before each typed character.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .branch import Branch


@dataclass(frozen=True)
class Snapshot:
    segments: Tuple[Branch, ...]
    tips: Tuple[int, ...]
    symbols: Tuple[str, ...]
    typed_text: str


class History:
    """Unbounded LIFO stack of snapshots."""

    def __init__(self):
        self._stack: List[Snapshot] = []

    def push(self, snapshot: Snapshot):
        self._stack.append(snapshot)

    def pop(self) -> Optional[Snapshot]:
        if not self._stack:
            return None
        return self._stack.pop()

    def peek(self) -> Optional[Snapshot]:
        return self._stack[-1] if self._stack else None

    @property
    def snapshots(self) -> Tuple[Snapshot, ...]:
        """Oldest first."""
        return tuple(self._stack)

    def clear(self):
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)
