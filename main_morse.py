"""
Main entry point for the Morse tree.

Types a string into the growth automaton and saves the resulting tree, or
opens an interactive window where every keystroke grows the tree.
"""

import argparse
from pathlib import Path

from morsetree import GrowthAutomaton, TreeRenderConfig, load_config, visualize_tree, animate_text
from morsetree.visualization import plot_growth_statistics


def file_stem(text: str) -> str:
    stem = ''.join(ch if ch.isalnum() else '_' for ch in text.strip())
    return stem or 'tree'


def main():
    parser = argparse.ArgumentParser(description="Grow a tree from Morse-encoded text.")
    parser.add_argument('--text', type=str, default='SOS', help='Text to type (default: SOS)')
    parser.add_argument('--config', type=str, default='config/morse_tree.json',
                        help='Path to a JSON config file (defaults used if missing)')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Override the configured output directory')
    parser.add_argument(
        '--mode',
        type=str,
        choices=['static', 'animate', 'interactive'],
        default='static',
        help='static: save tree and statistics, animate: save a growth GIF, '
             'interactive: type into a live window (default: static)'
    )
    args = parser.parse_args()

    config = load_config(args.config, validate=False)
    if args.output_dir is not None:
        config.output_dir = args.output_dir
    config.validate()
    render_config = TreeRenderConfig()

    if args.mode == 'interactive':
        from morsetree.interactive import InteractiveTree
        InteractiveTree(config, render_config).run()
        return

    output_dir = Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    name = file_stem(args.text)

    print(f"Growing Morse tree for: {args.text!r}")
    print(f"  Angle: {config.branch_angle}, decay: {config.length_decay}/{config.width_decay}")
    print(f"  Clearance: {config.clearance}")
    print()

    if args.mode == 'animate':
        animate_text(
            config,
            args.text,
            render_config=render_config,
            save_path=str(output_dir / f"{name}_growth.gif"),
            show=False
        )
        return

    automaton = GrowthAutomaton(config)
    accepted = automaton.type_text(args.text)
    if accepted < len(args.text):
        print(f"Warning: ignored {len(args.text) - accepted} characters without a Morse encoding")
    automaton.drain()

    visualize_tree(
        automaton,
        render_config=render_config,
        save_path=str(output_dir / f"{name}_tree.png"),
        show=False
    )
    plot_growth_statistics(
        automaton,
        save_path=str(output_dir / f"{name}_stats.png"),
        show=False
    )

    print(f"\nDone: {len(automaton.segments)} branches, {len(automaton.tips)} live tips")


if __name__ == '__main__':
    main()
