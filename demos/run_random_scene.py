"""
RANDOM SCENE DEMO: BSP Tree vs. Brute Force
===========================================

PURPOSE:
--------
Generate a random integer scene, answer every segment twice (BSP tree walk
and brute-force scan over all triangles), and report:
- tree size and depth
- timing of both approaches
- how many segment answers differ (expected: only where hit-point
  rounding lets a near-miss count as a hit)

Optionally writes the scene as an interactive Plotly HTML file.

EXAMPLE USAGE:
--------------
    python demos/run_random_scene.py --triangles 300 --segments 200 --seed 42
    python demos/run_random_scene.py --plot artifacts/random_scene.html
"""

import argparse
import sys
import time
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from mini_bsp.bsp import build_bsp, count_nodes, tree_depth
from mini_bsp.model import BSPData
from mini_bsp.query import brute_force_segments, query_segments
from mini_bsp.viz import plot_scene


def make_scene(n_triangles: int, n_segments: int, extent: int, size: int, seed: int) -> BSPData:
    """Small random triangles scattered in a cube, long random segments."""
    rng = np.random.default_rng(seed)
    centers = rng.integers(-extent, extent + 1, size=(n_triangles, 1, 3))
    offsets = rng.integers(-size, size + 1, size=(n_triangles, 3, 3))
    verts = (centers + offsets).reshape(-1, 3)

    points = [tuple(int(v) for v in row) for row in verts]
    triangles = [(3 * i + 1, 3 * i + 2, 3 * i + 3) for i in range(n_triangles)]
    segments = [
        tuple(int(v) for v in row)
        for row in rng.integers(-extent, extent + 1, size=(n_segments, 6))
    ]
    return BSPData(points=points, triangles=triangles, segments=segments)


def main():
    parser = argparse.ArgumentParser(
        description='Compare BSP segment queries against a brute-force scan'
    )
    parser.add_argument('--triangles', type=int, default=200,
                        help='Number of random triangles (default: 200)')
    parser.add_argument('--segments', type=int, default=100,
                        help='Number of random segments (default: 100)')
    parser.add_argument('--extent', type=int, default=100,
                        help='Half-width of the scene cube (default: 100)')
    parser.add_argument('--size', type=int, default=15,
                        help='Max vertex offset from a triangle center (default: 15)')
    parser.add_argument('--seed', type=int, default=42,
                        help='Random seed for reproducibility (default: 42)')
    parser.add_argument('--plot', default=None,
                        help='Write the scene to this HTML file')
    args = parser.parse_args()

    print("=" * 70)
    print("RANDOM SCENE: BSP TREE VS. BRUTE FORCE")
    print("=" * 70)

    data = make_scene(args.triangles, args.segments, args.extent, args.size, args.seed)
    sys.setrecursionlimit(max(sys.getrecursionlimit(), len(data.triangles) + 64))

    t0 = time.perf_counter()
    root = build_bsp(data.triangles, data.points)
    t_build = time.perf_counter() - t0

    t0 = time.perf_counter()
    tree_results = query_segments(root, data)
    t_tree = time.perf_counter() - t0

    t0 = time.perf_counter()
    brute_results = brute_force_segments(data)
    t_brute = time.perf_counter() - t0

    n_nodes = count_nodes(root)
    n_hits = sum(len(r) for r in tree_results)
    n_diff = sum(1 for a, b in zip(tree_results, brute_results) if a != b)

    print(f"Triangles:   {len(data.triangles)}")
    print(f"Tree nodes:  {n_nodes}  (duplication x{n_nodes / max(len(data.triangles), 1):.2f})")
    print(f"Tree depth:  {tree_depth(root)}")
    print(f"Segments:    {len(data.segments)}  ({n_hits} hits total)")
    print("-" * 70)
    print(f"Build:       {t_build * 1000:8.1f} ms")
    print(f"Tree walk:   {t_tree * 1000:8.1f} ms")
    print(f"Brute force: {t_brute * 1000:8.1f} ms")
    print(f"Differing answers: {n_diff}")

    if args.plot:
        plot_scene(data, tree_results, title="Random BSP scene", outpath=args.plot, show=False)
        print(f"Scene saved to: {args.plot}")


if __name__ == '__main__':
    main()
