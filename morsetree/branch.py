"""
Branch - a single immutable segment of the growing tree.

Branches live in an arena (the automaton's segment list) and refer to their
parent by index, the root having parent None.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING
import math

if TYPE_CHECKING:
    from .config import TreeConfig


DOT = '.'
DASH = '-'
BAR = '|'

# Heading offsets of the children, in units of branch_angle
CHILD_OFFSETS = {
    DOT: (-1, 0),
    DASH: (0, 1),
    BAR: (-1, 0, 1),
}
DEFAULT_OFFSETS = (0,)


@dataclass(frozen=True)
class Branch:
    x1: float
    y1: float
    x2: float
    y2: float
    angle: float
    length: float
    width: float
    parent: Optional[int] = None

    @property
    def start(self) -> Tuple[float, float]:
        return (self.x1, self.y1)

    @property
    def end(self) -> Tuple[float, float]:
        return (self.x2, self.y2)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __repr__(self) -> str:
        return (f"Branch(({self.x1:.2f}, {self.y1:.2f}) -> ({self.x2:.2f}, {self.y2:.2f}), "
                f"angle={self.angle:.1f}, w={self.width:.2f}, parent={self.parent})")


def derive_child(parent: Branch, parent_index: int, heading_delta: float,
                 config: 'TreeConfig') -> Branch:
    angle = parent.angle + heading_delta
    length = max(parent.length * config.length_decay, config.min_length)
    width = max(parent.width * config.width_decay, config.min_width)
    rad = math.radians(angle)
    return Branch(
        x1=parent.x2,
        y1=parent.y2,
        x2=parent.x2 + math.cos(rad) * length,
        y2=parent.y2 + math.sin(rad) * length,
        angle=angle,
        length=length,
        width=width,
        parent=parent_index
    )


def encode_children(symbol: str, parent: Branch, parent_index: int,
                    config: 'TreeConfig') -> List[Branch]:
    """
    Candidate children for one growth symbol.

    '.' grows left and straight, '-' straight and right, '|' all three.
    Anything else grows a single straight child.
    """
    offsets = CHILD_OFFSETS.get(symbol, DEFAULT_OFFSETS)
    return [
        derive_child(parent, parent_index, k * config.branch_angle, config)
        for k in offsets
    ]


def branch_depth(segments: Sequence[Branch], index: int) -> int:
    depth = 0
    current = segments[index]
    while current.parent is not None:
        depth += 1
        current = segments[current.parent]
    return depth
