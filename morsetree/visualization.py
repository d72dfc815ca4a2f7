"""
Visualization utilities for the Morse tree.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.animation import FuncAnimation
from typing import List, Optional, Sequence, Tuple
from pathlib import Path

from .automaton import GrowthAutomaton
from .branch import Branch
from .config import TreeConfig, TreeRenderConfig


def branch_depths(segments: Sequence[Branch]) -> List[int]:
    # Parents always precede children in the arena
    depths: List[int] = []
    for b in segments:
        depths.append(0 if b.parent is None else depths[b.parent] + 1)
    return depths


def branch_colors(segments: Sequence[Branch], render_config: TreeRenderConfig) -> np.ndarray:
    """Interpolate the branch colour ramp by depth."""
    depths = np.array(branch_depths(segments), dtype=np.float64)
    max_depth = depths.max() if len(depths) else 0.0
    t = depths / max_depth if max_depth > 0 else np.zeros_like(depths)
    start = np.array(render_config.branch_color)
    end = np.array(render_config.branch_color_end)
    return start[None, :] + (end - start)[None, :] * t[:, None]


def hud_text(automaton: GrowthAutomaton) -> str:
    config = automaton.config
    return (
        "Type letters/digits/spaces to grow. Backspace undoes, Esc resets.\n"
        f"Angle {config.branch_angle:g}°, decay {config.length_decay:.2f}/{config.width_decay:.2f}\n"
        f"Typed: {automaton.typed_text}"
    )


def setup_axes(ax, tree_config: TreeConfig, render_config: TreeRenderConfig):
    ax.set_facecolor(render_config.background_color)
    ax.set_xlim(0, tree_config.canvas_width)
    ax.set_ylim(tree_config.canvas_height, 0)
    ax.set_aspect('equal')
    ax.axis('off')


def draw_tree(ax, automaton: GrowthAutomaton, render_config: TreeRenderConfig,
              show_tips: bool = True) -> Tuple[LineCollection, LineCollection]:
    """Add branch and tip collections for the current state to ax."""
    segments = automaton.segments
    lc = LineCollection(
        [[b.start, b.end] for b in segments],
        colors=branch_colors(segments, render_config),
        linewidths=[b.width * render_config.width_scale for b in segments],
        capstyle='round'
    )
    ax.add_collection(lc)

    tips = automaton.tips if show_tips else ()
    tip_lc = LineCollection(
        [[b.start, b.end] for b in tips],
        colors=[render_config.tip_color],
        linewidths=[b.width * render_config.width_scale for b in tips] or [1.0],
        capstyle='round'
    )
    ax.add_collection(tip_lc)
    return lc, tip_lc


def update_tree(lc: LineCollection, tip_lc: LineCollection, automaton: GrowthAutomaton,
                render_config: TreeRenderConfig, show_tips: bool = True):
    segments = automaton.segments
    lc.set_segments([[b.start, b.end] for b in segments])
    lc.set_color(branch_colors(segments, render_config))
    lc.set_linewidths([b.width * render_config.width_scale for b in segments])

    tips = automaton.tips if show_tips else ()
    tip_lc.set_segments([[b.start, b.end] for b in tips])
    tip_lc.set_linewidths([b.width * render_config.width_scale for b in tips] or [1.0])


def visualize_tree(
    automaton: GrowthAutomaton,
    render_config: Optional[TreeRenderConfig] = None,
    show_tips: bool = True,
    show_hud: bool = True,
    save_path: Optional[str] = None,
    show: bool = True
):
    """Visualize the current state of the tree."""
    render_config = render_config or TreeRenderConfig()
    fig, ax = plt.subplots(figsize=render_config.figsize)
    fig.patch.set_facecolor(render_config.background_color)
    setup_axes(ax, automaton.config, render_config)

    draw_tree(ax, automaton, render_config, show_tips=show_tips)

    if show_hud:
        ax.text(12, 16, hud_text(automaton), fontsize=render_config.hud_fontsize,
                va='top', ha='left', family='monospace')

    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=render_config.background_color, edgecolor='none')
        print(f"Saved visualization to {save_path}")

    if show:
        plt.show()
    return fig, ax


def animate_text(
    config: TreeConfig,
    text: str,
    render_config: Optional[TreeRenderConfig] = None,
    save_path: Optional[str] = None,
    frame_skip: int = 1,
    show: bool = True
) -> FuncAnimation:
    """
    Animate the tree growing while text is typed one character at a time.

    frame_skip: Only record every Nth growth step. Higher = fewer frames.
    """
    render_config = render_config or TreeRenderConfig()
    automaton = GrowthAutomaton(config)

    frames_data = []

    def collect_frame():
        frames_data.append({
            'segments': automaton.segments,
            'tips': automaton.tips,
            'typed_text': automaton.typed_text
        })

    collect_frame()

    for ch in text:
        if not automaton.emit_character(ch):
            continue
        while not automaton.is_idle:
            automaton.advance()
            if automaton.step_count % frame_skip == 0:
                collect_frame()

    collect_frame()

    print(f"Collected {len(frames_data)} frames for animation")

    fig, ax = plt.subplots(figsize=render_config.figsize)
    fig.patch.set_facecolor(render_config.background_color)
    setup_axes(ax, config, render_config)

    branch_collection = LineCollection([], capstyle='round')
    tip_collection = LineCollection([], colors=[render_config.tip_color], capstyle='round')
    ax.add_collection(branch_collection)
    ax.add_collection(tip_collection)
    title = ax.text(12, 16, '', fontsize=render_config.hud_fontsize,
                    va='top', ha='left', family='monospace')

    def update(frame_idx):
        data = frames_data[frame_idx]
        segments = data['segments']
        branch_collection.set_segments([[b.start, b.end] for b in segments])
        branch_collection.set_color(branch_colors(segments, render_config))
        branch_collection.set_linewidths([b.width * render_config.width_scale for b in segments])

        tips = data['tips']
        tip_collection.set_segments([[b.start, b.end] for b in tips])
        tip_collection.set_linewidths([b.width * render_config.width_scale for b in tips] or [1.0])

        title.set_text(f"Typed: {data['typed_text']}")
        return [branch_collection, tip_collection, title]

    anim = FuncAnimation(
        fig, update,
        frames=len(frames_data),
        interval=1000 // max(1, render_config.animation_fps),
        blit=False,
        repeat=True
    )

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        print(f"Saving animation ({len(frames_data)} frames)...")
        anim.save(save_path, writer='pillow', fps=render_config.animation_fps)
        print(f"Saved animation to {save_path}")

    if show:
        plt.show()
    return anim


def depth_profile(automaton: GrowthAutomaton) -> Tuple[np.ndarray, np.ndarray]:
    """Per depth level: (live tips, branches that already grew or died)."""
    depths = np.array(branch_depths(automaton.segments), dtype=int)
    size = depths.max() + 1 if len(depths) else 0
    is_tip = np.zeros(len(depths), dtype=bool)
    is_tip[list(automaton.tip_indices)] = True
    live = np.bincount(depths[is_tip], minlength=size)
    inert = np.bincount(depths[~is_tip], minlength=size)
    return live, inert


def plot_growth_statistics(automaton: GrowthAutomaton, save_path: Optional[str] = None,
                           show: bool = True):
    """Tips and inert branches per depth, and tree size after each undoable character."""
    render_config = TreeRenderConfig()
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    live, inert = depth_profile(automaton)
    levels = np.arange(len(live))
    axes[0].bar(levels, inert, color=render_config.branch_color, label='grown or dead')
    axes[0].bar(levels, live, bottom=inert, color=render_config.tip_color, label='live tips')
    axes[0].set_xlabel('Tree Depth')
    axes[0].set_ylabel('Branch Count')
    axes[0].set_title('Branches per Depth Level')
    axes[0].legend()

    # Each snapshot is the tree just before a character was typed
    sizes = [len(s.segments) for s in automaton.history.snapshots] + [len(automaton.segments)]
    axes[1].plot(range(len(sizes)), sizes, marker='o', color='forestgreen')
    axes[1].set_xlabel('Characters Typed')
    axes[1].set_ylabel('Branches')
    axes[1].set_title(f"Growth of '{automaton.typed_text}'")

    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved statistics to {save_path}")

    if show:
        plt.show()
    return fig, axes
