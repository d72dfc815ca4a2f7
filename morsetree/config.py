"""
Configuration for the Morse tree growth automaton and its renderers.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Tuple
import json
import math

from .branch import Branch


@dataclass
class TreeConfig:
    # Branching: degrees between the straight child and each side child
    branch_angle: float = 40.0
    length_decay: float = 0.72
    width_decay: float = 0.8

    # Floors clamp shrinkage, growth continues at the floor
    min_length: float = 10.0
    min_width: float = 0.6

    # Extra gap required between non-parent branches, on top of half their widths
    clearance: float = 2.0

    # Root branch grows up from the bottom centre of the canvas
    canvas_width: float = 700.0
    canvas_height: float = 500.0
    root_length: float = 120.0
    root_width: float = 6.0
    root_angle: float = -90.0

    output_dir: str = 'outputs/morse_tree'

    def root_branch(self) -> Branch:
        x1 = self.canvas_width / 2
        y1 = self.canvas_height
        rad = math.radians(self.root_angle)
        return Branch(
            x1=x1,
            y1=y1,
            x2=x1 + math.cos(rad) * self.root_length,
            y2=y1 + math.sin(rad) * self.root_length,
            angle=self.root_angle,
            length=self.root_length,
            width=self.root_width,
            parent=None
        )

    def validate(self) -> 'TreeConfig':
        """
        Raise ValueError for values the growth formulas cannot work with.
        Values outside the recommended ranges only print a warning.
        """
        for name in ('length_decay', 'width_decay'):
            value = getattr(self, name)
            if not 0.0 < value < 1.0:
                raise ValueError(f"{name} must be in (0, 1), got {value}")
        for name in ('min_length', 'min_width', 'root_length', 'root_width'):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.clearance < 0:
            raise ValueError(f"clearance must be non-negative, got {self.clearance}")

        if not 5.0 <= self.branch_angle <= 80.0:
            print(f"Warning: branch_angle {self.branch_angle} outside recommended range 5-80")
        for name in ('length_decay', 'width_decay'):
            value = getattr(self, name)
            if not 0.5 <= value <= 0.95:
                print(f"Warning: {name} {value} outside recommended range 0.5-0.95")
        return self


@dataclass
class TreeRenderConfig:
    figsize: Tuple[float, float] = (7.0, 5.0)
    background_color: str = 'white'

    # Colour ramp from root to the deepest branch
    branch_color: Tuple[float, float, float, float] = (0.10, 0.10, 0.10, 1.0)
    branch_color_end: Tuple[float, float, float, float] = (0.10, 0.45, 0.25, 1.0)
    tip_color: Tuple[float, float, float, float] = (0.85, 0.30, 0.10, 1.0)
    width_scale: float = 1.0

    hud_fontsize: int = 10

    # Interactive window
    interval: int = 30  # ms per animation frame, one growth step per frame
    undo_repeat_interval: float = 0.08  # seconds between accepted held-key undos

    animation_fps: int = 30


def load_config(path: str = 'config/morse_tree.json', validate: bool = True) -> TreeConfig:
    """
    Load config from JSON file, with defaults for missing fields.
    Pass validate=False to apply further overrides before calling validate().
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path, 'r') as f:
            config = TreeConfig(**json.load(f))
    else:
        config = TreeConfig()

    return config.validate() if validate else config


def save_config(config: TreeConfig, path: str = 'config/morse_tree.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(asdict(config), f, indent=2)

    print(f"Saved config to {config_path}")
