"""
Interactive Morse tree window.
Letters, digits and spaces grow the tree, Backspace undoes, Escape resets.
One growth step runs per animation frame.
"""

import time

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from typing import Optional

from .automaton import GrowthAutomaton
from .config import TreeConfig, TreeRenderConfig
from .visualization import draw_tree, update_tree, hud_text, setup_axes


def disable_default_keymaps(fig):
    """Free every key for typing in this figure only; matplotlib binds s, f, g, l, k, ... by default."""
    manager = fig.canvas.manager
    handler_id = getattr(manager, 'key_press_handler_id', None)
    if handler_id is not None:
        fig.canvas.mpl_disconnect(handler_id)
        manager.key_press_handler_id = None


class InteractiveTree:

    def __init__(self, config: Optional[TreeConfig] = None,
                 render_config: Optional[TreeRenderConfig] = None):
        self.automaton = GrowthAutomaton(config)
        self.render_config = render_config or TreeRenderConfig()
        self._last_undo = float('-inf')
        self.anim = None

        self.setup_ui()

    def setup_ui(self):
        self.fig, self.ax = plt.subplots(figsize=self.render_config.figsize)
        self.fig.patch.set_facecolor(self.render_config.background_color)
        setup_axes(self.ax, self.automaton.config, self.render_config)
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title("Morse Tree")
        disable_default_keymaps(self.fig)

        self.branch_lc, self.tip_lc = draw_tree(self.ax, self.automaton, self.render_config)
        self.hud = self.ax.text(12, 16, hud_text(self.automaton),
                                fontsize=self.render_config.hud_fontsize,
                                va='top', ha='left', family='monospace')

        self.fig.canvas.mpl_connect('key_press_event', self.on_key)

    def on_key(self, event):
        key = event.key
        if key is None:
            return

        if key == 'backspace':
            self.request_undo()
        elif key == 'escape':
            self.automaton.reset()
        else:
            self.automaton.emit_character(key)

    def request_undo(self, now: Optional[float] = None) -> bool:
        """Undo, ignoring held-key repeats that arrive faster than undo_repeat_interval."""
        now = time.monotonic() if now is None else now
        if now - self._last_undo < self.render_config.undo_repeat_interval:
            return False
        self._last_undo = now
        return self.automaton.undo()

    def step(self, frame_idx=None):
        self.automaton.advance()
        update_tree(self.branch_lc, self.tip_lc, self.automaton, self.render_config)
        self.hud.set_text(hud_text(self.automaton))
        return [self.branch_lc, self.tip_lc, self.hud]

    def run(self):
        self.anim = FuncAnimation(
            self.fig, self.step,
            interval=self.render_config.interval,
            blit=False,
            cache_frame_data=False
        )
        plt.show()
