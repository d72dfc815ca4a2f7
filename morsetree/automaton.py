"""
GrowthAutomaton - grows a tree one Morse symbol at a time.

Typed characters become growth symbols ('.', '-', '|'). Each step pops one
symbol and expands the oldest tip into 1-3 children. The batch of children is
admitted only if none of them comes too close to the existing tree; otherwise
the tip dies and the symbol is retried on the next tip.
"""

from collections import deque
from enum import Enum
from typing import Callable, Deque, List, Optional, Tuple

import numpy as np

from .branch import Branch, encode_children
from .config import TreeConfig
from .encoder import encode_character
from .geometry import segment_distances
from .history import History, Snapshot
from .spatial import SegmentSpatialIndex


class StepResult(Enum):
    IDLE = 'idle'            # no pending symbol
    DISCARDED = 'discarded'  # symbol dropped, no tip left to grow
    REJECTED = 'rejected'    # tip died, symbol requeued at the front
    COMMITTED = 'committed'  # children added to the tree


class GrowthAutomaton:
    def __init__(self, config: Optional[TreeConfig] = None, root: Optional[Branch] = None):
        self.config = config or TreeConfig()
        self.history = History()
        self.spatial_index = SegmentSpatialIndex()
        self._segments: List[Branch] = []
        self._tips: Deque[int] = deque()
        self._symbols: Deque[str] = deque()
        self._typed_text = ''
        self.step_count = 0

        self.reset(root)

    def reset(self, root: Optional[Branch] = None, clear_history: bool = False):
        """Start over from a single root branch. History survives unless clear_history is set."""
        if root is None:
            root = self.config.root_branch()

        self._segments = [root]
        self._tips = deque([0])
        self._symbols = deque()
        self._typed_text = ''
        self.step_count = 0
        self.spatial_index.invalidate()

        if clear_history:
            self.history.clear()

    # ------------------------------------------------------------------ growth

    def too_close(self, child: Branch) -> bool:
        """
        True if child comes within clearance + half widths of any committed
        branch other than its own parent.
        """
        self.spatial_index.ensure_current(self._segments)
        indices = [
            i for i in self.spatial_index.candidates(child, self.config.clearance)
            if i != child.parent
        ]
        if not indices:
            return False

        distances = segment_distances(
            child.x1, child.y1, child.x2, child.y2, self.spatial_index.coords[indices]
        )
        limits = self.config.clearance + 0.5 * (child.width + self.spatial_index.widths[indices])
        return bool(np.any(distances < limits))

    def advance(self) -> StepResult:
        """Perform at most one symbol expansion attempt."""
        if not self._symbols:
            return StepResult.IDLE

        symbol = self._symbols.popleft()
        self.step_count += 1

        if not self._tips:
            return StepResult.DISCARDED

        tip_index = self._tips.popleft()
        tip = self._segments[tip_index]
        children = encode_children(symbol, tip, tip_index, self.config)

        for child in children:
            if self.too_close(child):
                # The tip stays retired; the symbol gets the next tip
                self._symbols.appendleft(symbol)
                return StepResult.REJECTED

        for child in children:
            self._tips.append(len(self._segments))
            self._segments.append(child)
        self.spatial_index.invalidate()

        return StepResult.COMMITTED

    def drain(self, max_steps: Optional[int] = None,
              callback: Optional[Callable[['GrowthAutomaton', int], None]] = None) -> int:
        """
        Advance until no symbols are pending.
        Optional callback is called after each step with (automaton, step).
        Returns the number of steps taken.
        """
        steps = 0
        committed = 0
        rejected = 0

        while self._symbols:
            if max_steps is not None and steps >= max_steps:
                break

            result = self.advance()
            steps += 1
            if result is StepResult.COMMITTED:
                committed += 1
            elif result is StepResult.REJECTED:
                rejected += 1

            if callback:
                callback(self, steps)

            if steps % 50 == 0:
                print(f"  Step {steps}: {len(self._segments)} branches, "
                      f"{len(self._tips)} tips, {len(self._symbols)} symbols pending")

        print(f"Growth settled after {steps} steps "
              f"({committed} committed, {rejected} rejected, {len(self._segments)} branches)")
        return steps

    # -------------------------------------------------------------- text input

    def emit_character(self, ch: str) -> bool:
        """
        Queue the growth symbols for one typed character.
        Returns False, changing nothing, if the character has no encoding.
        """
        encoding = encode_character(ch)
        if encoding is None:
            return False

        self.history.push(self.snapshot())
        self._symbols.extend(encoding.symbols)
        self._typed_text += encoding.text
        return True

    def type_text(self, text: str) -> int:
        return sum(1 for ch in text if self.emit_character(ch))

    # ------------------------------------------------------------------- undo

    def snapshot(self) -> Snapshot:
        return Snapshot(
            segments=tuple(self._segments),
            tips=tuple(self._tips),
            symbols=tuple(self._symbols),
            typed_text=self._typed_text
        )

    def restore(self, snapshot: Snapshot):
        self._segments = list(snapshot.segments)
        self._tips = deque(snapshot.tips)
        self._symbols = deque(snapshot.symbols)
        self._typed_text = snapshot.typed_text
        self.spatial_index.invalidate()

    def undo(self) -> bool:
        """Roll back to the state before the last accepted character."""
        snapshot = self.history.pop()
        if snapshot is None:
            return False
        self.restore(snapshot)
        return True

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

    # ------------------------------------------------------------- read views

    @property
    def segments(self) -> Tuple[Branch, ...]:
        return tuple(self._segments)

    @property
    def tip_indices(self) -> Tuple[int, ...]:
        return tuple(self._tips)

    @property
    def tips(self) -> Tuple[Branch, ...]:
        return tuple(self._segments[i] for i in self._tips)

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(self._symbols)

    @property
    def typed_text(self) -> str:
        return self._typed_text

    @property
    def is_idle(self) -> bool:
        return not self._symbols

    def get_segments(self) -> Tuple[Branch, ...]:
        return self.segments

    def get_tips(self) -> Tuple[Branch, ...]:
        return self.tips

    def get_typed_text(self) -> str:
        return self._typed_text
