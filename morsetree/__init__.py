"""
Morse tree - a branching structure that grows from typed text.

Each character is encoded in Morse code; dots, dashes and separators become
growth symbols that fan the oldest tips of the tree out breadth-first, refusing
any growth that would bring the tree too close to itself.
"""

from .branch import Branch, derive_child, encode_children, branch_depth
from .automaton import GrowthAutomaton, StepResult
from .history import History, Snapshot
from .encoder import MORSE, encode_character, encode_text
from .geometry import segment_distance, segment_distances
from .config import TreeConfig, TreeRenderConfig, load_config, save_config
from .visualization import visualize_tree, animate_text, plot_growth_statistics

__all__ = [
    'Branch',
    'derive_child',
    'encode_children',
    'branch_depth',
    'GrowthAutomaton',
    'StepResult',
    'History',
    'Snapshot',
    'MORSE',
    'encode_character',
    'encode_text',
    'segment_distance',
    'segment_distances',
    'TreeConfig',
    'TreeRenderConfig',
    'load_config',
    'save_config',
    'visualize_tree',
    'animate_text',
    'plot_growth_statistics'
]
