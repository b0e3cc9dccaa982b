#!/usr/bin/env python
"""
Command-line interface for DFA equivalence analysis and minimization.

Usage:
    dfamin minimize machine.json --output minimal.json --dot minimal.dot
    dfamin example --dot
    dfamin generate --sizes 5 10 --count 3 --redundancy 2
    dfamin benchmark --sizes 5 10 20 --count 3
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from .config import MinimizationConfig, MergeLabelStyle
from .core.dfa import DFA
from .core.equivalence import EquivalenceAnalyzer
from .core.errors import AutomatonError
from .core.minimizer import Minimizer
from .core.serializer import load_json, save_dot, save_json, to_dot
from .grammars.examples import build_suffix_dfa
from .benchmarks.runner import run_benchmark
from .validation.random_dfas import generate_dataset


def print_header(title: str):
    print("=" * 70)
    print(title)
    print("=" * 70)


def report(dfa: DFA, config: MinimizationConfig, show_table: bool = False) -> DFA:
    """Print completeness, equivalent pairs and sizes; return the minimized machine."""
    complete = dfa.is_complete()
    print(f"The machine is{'' if complete else ' not'} complete.")
    print(f"  States: {len(dfa)}, alphabet: {list(dfa.alphabet)}")

    table = EquivalenceAnalyzer(dfa, verbose=config.verbose).run()
    pairs = table.equivalent_pairs()
    if pairs:
        for q_i, q_j in pairs:
            print(f"  {q_i.label} and {q_j.label} are equivalent.")
    else:
        print("  No equivalent states.")

    if show_table:
        print("\nDistinguishability table (D):")
        print(table.to_dataframe().to_string())
        print("\nDependency table (S):")
        print(table.dependencies_to_dataframe().to_string())

    minimized = Minimizer(dfa, config=config).minimize(table)
    print(f"\nMinimized machine: {len(minimized)} states "
          f"({len(dfa) - len(minimized)} removed)")
    return minimized


def _config_from_args(args) -> MinimizationConfig:
    return MinimizationConfig(
        label_style=MergeLabelStyle(args.label_style),
        separator=args.separator,
        verbose=args.verbose,
    )


def cmd_minimize(args) -> int:
    dfa = load_json(args.input)
    print_header(f"Minimizing {args.input}")
    minimized = report(dfa, _config_from_args(args), show_table=args.show_table)

    if args.output:
        save_json(minimized, args.output)
        print(f"Saved minimized machine to {args.output}")
    if args.dot:
        save_dot(minimized, args.dot)
        print(f"Saved DOT graph to {args.dot}")
    return 0


def cmd_example(args) -> int:
    dfa = build_suffix_dfa()
    print_header("Reference example: six-state machine over {a, b}")
    minimized = report(dfa, _config_from_args(args), show_table=args.show_table)

    if args.dot:
        print("\nOriginal machine:")
        print(to_dot(dfa))
        print("\nMinimized machine:")
        print(to_dot(minimized))
    return 0


def cmd_generate(args) -> int:
    print_header("Generating Random DFAs")
    print(f"Alphabet size: {args.alphabet_size}")
    print(f"State counts: {args.sizes}")
    print(f"DFAs per size: {args.count}")
    print(f"Redundant states per DFA: {args.redundancy}")
    print(f"Output directory: {args.output_dir}")
    print("-" * 60)

    metadata = generate_dataset(
        Path(args.output_dir),
        sizes=args.sizes,
        count=args.count,
        alphabet_size=args.alphabet_size,
        accepting_ratio=args.accepting_ratio,
        seed=args.seed,
        redundancy=args.redundancy,
        render_png=args.png,
    )
    print(f"\nGenerated {len(metadata['dfas'])} DFAs")
    print(f"Metadata saved to {Path(args.output_dir) / 'metadata.json'}")
    return 0


def cmd_benchmark(args) -> int:
    print_header("DFA Minimization Benchmark")
    start_time = time.time()
    results = run_benchmark(
        sizes=args.sizes,
        count=args.count,
        alphabet_size=args.alphabet_size,
        seed=args.seed,
        redundancy=args.redundancy,
        accepting_ratio=args.accepting_ratio,
        include_tomita=not args.no_tomita,
        config=_config_from_args(args),
        verbose=args.verbose,
    )
    results.print_summary()

    if args.output:
        results.save_to_json(Path(args.output))
        print(f"Results saved to: {args.output}")
    print(f"\nTotal benchmark time: {time.time() - start_time:.2f} seconds")

    df = results.to_dataframe()
    return 0 if bool(df['language_preserved'].all()) else 1


def _add_minimization_options(parser: argparse.ArgumentParser):
    parser.add_argument(
        '--label-style',
        choices=[style.value for style in MergeLabelStyle],
        default=MergeLabelStyle.SORTED.value,
        help='Ordering of member labels in merged state labels (default: sorted)'
    )
    parser.add_argument(
        '--separator',
        type=str,
        default='_',
        help='Separator between member labels in merged states (default: _)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )


def _add_generation_options(parser: argparse.ArgumentParser, default_sizes: List[int]):
    parser.add_argument(
        '--sizes',
        type=int,
        nargs='+',
        default=default_sizes,
        help=f'DFA state counts (default: {" ".join(map(str, default_sizes))})'
    )
    parser.add_argument('--count', type=int, default=3,
                        help='Number of DFAs per size (default: 3)')
    parser.add_argument('--alphabet-size', type=int, default=2,
                        help='Size of the alphabet (default: 2)')
    parser.add_argument('--accepting-ratio', type=float, default=0.3,
                        help='Ratio of accepting states (default: 0.3)')
    parser.add_argument('--redundancy', type=int, default=2,
                        help='Redundant states added to each DFA (default: 2)')
    parser.add_argument('--seed', type=int, default=42,
                        help='Base random seed (default: 42)')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dfamin',
        description='Find equivalent states of complete DFAs and minimize them'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    minimize = subparsers.add_parser('minimize', help='Minimize a machine stored as JSON')
    minimize.add_argument('input', type=str, help='Serialized machine (JSON)')
    minimize.add_argument('--output', type=str, default=None,
                          help='Write the minimized machine as JSON')
    minimize.add_argument('--dot', type=str, default=None,
                          help='Write the minimized machine as a DOT graph')
    minimize.add_argument('--show-table', action='store_true',
                          help='Print the D and S tables after analysis')
    _add_minimization_options(minimize)
    minimize.set_defaults(func=cmd_minimize)

    example = subparsers.add_parser('example', help='Run the six-state reference example')
    example.add_argument('--dot', action='store_true',
                         help='Print DOT graphs of both machines')
    example.add_argument('--show-table', action='store_true',
                         help='Print the D and S tables after analysis')
    _add_minimization_options(example)
    example.set_defaults(func=cmd_example)

    generate = subparsers.add_parser('generate', help='Generate random complete DFAs')
    _add_generation_options(generate, [2, 5, 10, 20])
    generate.add_argument('--output-dir', type=str, default='random_dfas',
                          help='Output directory for generated DFAs')
    generate.add_argument('--png', action='store_true',
                          help='Render PNG images with graphviz')
    generate.set_defaults(func=cmd_generate)

    benchmark = subparsers.add_parser('benchmark', help='Minimize random and Tomita DFAs')
    _add_generation_options(benchmark, [5, 10, 20])
    benchmark.add_argument('--no-tomita', action='store_true',
                           help='Skip the Tomita grammar machines')
    benchmark.add_argument('--output', type=str, default=None,
                           help='Save raw results as JSON')
    _add_minimization_options(benchmark)
    benchmark.set_defaults(func=cmd_benchmark)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.func(args)
    except AutomatonError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
