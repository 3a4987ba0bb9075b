# mini_bsp/viz.py
"""
3D VISUALIZATION: Interactive Scene Viewer
==========================================

PURPOSE:
--------
Draw the input scene with Plotly so query results can be checked by eye:
- Triangles as a translucent mesh
- Triangles hit by at least one segment highlighted
- Query segments as lines

Rotation/zoom/pan come for free and the figure can be saved as a single
HTML file.
"""

import os
from typing import List, Optional

import numpy as np
import plotly.graph_objects as go

from .model import BSPData, segment_endpoints


def _mesh_trace(data: BSPData, triangle_ids: List[int], color: str, name: str, opacity: float) -> go.Mesh3d:
    pts = np.asarray(data.points, dtype=float)
    tris = np.asarray([data.triangles[i - 1] for i in triangle_ids], dtype=int) - 1
    return go.Mesh3d(
        x=pts[:, 0], y=pts[:, 1], z=pts[:, 2],
        i=tris[:, 0], j=tris[:, 1], k=tris[:, 2],
        color=color,
        opacity=opacity,
        name=name,
        hovertext=[f"Triangle {t}" for t in triangle_ids],
        hoverinfo='text',
        showlegend=True,
    )


def create_scene_figure(
    data: BSPData,
    results: Optional[List[List[int]]] = None,
    title: str = "BSP Scene",
) -> go.Figure:
    """
    Create a Plotly figure of triangles and segments.

    Parameters:
    -----------
    data : BSPData
        Scene to draw

    results : Optional[List[List[int]]]
        Per-segment hit lists (as returned by process_segments). Hit
        triangles are drawn in a separate highlighted trace.

    title : str
        Plot title

    Returns:
    --------
    go.Figure
    """
    fig = go.Figure()

    hit_set = {t for hits in (results or []) for t in hits}
    hit_ids = sorted(hit_set)
    other_ids = [t for t in range(1, len(data.triangles) + 1) if t not in hit_set]

    if other_ids:
        fig.add_trace(_mesh_trace(data, other_ids, 'lightsteelblue', 'Triangles', 0.5))
    if hit_ids:
        fig.add_trace(_mesh_trace(data, hit_ids, 'orangered', 'Hit triangles', 0.8))

    # Segments as one line trace, None breaks between segments
    seg_x, seg_y, seg_z = [], [], []
    for segment in data.segments:
        a, b = segment_endpoints(segment)
        seg_x.extend([a[0], b[0], None])
        seg_y.extend([a[1], b[1], None])
        seg_z.extend([a[2], b[2], None])

    if data.segments:
        fig.add_trace(go.Scatter3d(
            x=seg_x, y=seg_y, z=seg_z,
            mode='lines+markers',
            line=dict(color='black', width=4),
            marker=dict(size=3, color='black'),
            name='Segments',
            hoverinfo='skip',
        ))

    fig.update_layout(
        title=dict(text=title, font=dict(size=16)),
        scene=dict(
            xaxis=dict(title='X'),
            yaxis=dict(title='Y'),
            zaxis=dict(title='Z'),
            aspectmode='data',
            camera=dict(eye=dict(x=1.5, y=1.5, z=1.0)),
        ),
        showlegend=True,
        legend=dict(x=0.02, y=0.98),
        margin=dict(l=0, r=0, t=40, b=0),
    )
    return fig


def plot_scene(
    data: BSPData,
    results: Optional[List[List[int]]] = None,
    title: str = "BSP Scene",
    outpath: Optional[str] = None,
    show: bool = True,
) -> go.Figure:
    """
    Create and optionally display/save the scene figure.

    Example:
    --------
    >>> fig = plot_scene(data, process_segments(data),
    ...                  outpath="artifacts/scene.html", show=False)
    """
    fig = create_scene_figure(data, results, title)

    if outpath:
        os.makedirs(os.path.dirname(outpath) or '.', exist_ok=True)
        fig.write_html(outpath)

    if show:
        fig.show()

    return fig
