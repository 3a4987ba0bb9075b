# mini_bsp/cli.py
"""
COMMAND LINE ENTRY POINT
========================

Reads a scene (points, triangles, segments) from a file or stdin, builds
one BSP tree, and prints one result line per segment to stdout.

EXAMPLE USAGE:
--------------
    python -m mini_bsp scene.txt
    python -m mini_bsp -v < scene.txt
    python -m mini_bsp scene.txt --plot artifacts/scene.html
"""

import argparse
import logging
import sys
from typing import List, Optional

from .bsp import build_bsp, count_nodes, tree_depth
from .config import RunConfig
from .errors import DegenerateTriangleError, InputFormatError, InvalidTriangleIndexError
from .io import format_diagnostics, format_results, read_input
from .logging_config import setup_logging
from .query import query_segments

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mini-bsp',
        description='Build a BSP tree over 3D triangles and report which triangles each segment hits',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input: "n t l", then n points (x y z), t triangles (a b c, 1-based),
l segments (xa ya za xb yb zb).
Output: per segment, the hit count followed by the ascending indices.
        """
    )
    parser.add_argument(
        'input',
        nargs='?',
        default=None,
        help='Scene file (default: read stdin)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Dump parsed points, triangles, segments and the tree shape to stderr'
    )
    parser.add_argument(
        '--tree-depth',
        type=int,
        default=0,
        help='Depth label of the root in the verbose tree dump (default: 0)'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Fail on zero-area triangles instead of treating them as never hit'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        help='Logging level (default: WARNING)'
    )
    parser.add_argument(
        '--log-file',
        default=None,
        help='Also write log records to this file'
    )
    parser.add_argument(
        '--plot',
        default=None,
        metavar='HTML',
        help='Write an interactive Plotly view of the scene to this HTML file'
    )
    return parser


def run(config: RunConfig, source: Optional[str]) -> int:
    """Execute one run; returns the process exit code."""
    try:
        if source is None:
            data = read_input(sys.stdin)
        else:
            with open(source, 'r', encoding='utf-8') as f:
                data = read_input(f)
        data.validate()
    except (InputFormatError, InvalidTriangleIndexError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    logger.info("Read %d points, %d triangles, %d segments",
                len(data.points), len(data.triangles), len(data.segments))

    # The build and the walk recurse once per tree level
    needed = len(data.triangles) + config.recursion_headroom
    if needed > sys.getrecursionlimit():
        sys.setrecursionlimit(needed)

    try:
        root = build_bsp(data.triangles, data.points, strict=config.strict)
    except DegenerateTriangleError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    logger.info("BSP tree: %d nodes, depth %d", count_nodes(root), tree_depth(root))
    if config.verbose:
        print(format_diagnostics(data, root, config.tree_start_depth), file=sys.stderr)

    results = query_segments(root, data)
    if results:
        print(format_results(results))

    if config.plot_path:
        from .viz import plot_scene
        plot_scene(data, results, outpath=config.plot_path, show=False)
        logger.info("Scene written to %s", config.plot_path)

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = RunConfig.from_args(args)
    setup_logging(config.log_level, config.log_file)
    return run(config, args.input)


if __name__ == '__main__':
    sys.exit(main())
