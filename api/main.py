# api/main.py
"""
FastAPI backend for mini-bsp - exposes the BSP segment query engine as REST API.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List
import sys
from pathlib import Path

# Add project root to path to import mini_bsp
sys.path.insert(0, str(Path(__file__).parent.parent))

from mini_bsp.model import BSPData
from mini_bsp.bsp import build_bsp, count_nodes, tree_depth
from mini_bsp.errors import InvalidTriangleIndexError, DegenerateTriangleError
from mini_bsp.io import format_result_line
from mini_bsp.query import query_segments


app = FastAPI(
    title="mini-bsp API",
    description="BSP tree segment/triangle intersection queries",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class QueryRequest(BaseModel):
    """Scene plus query segments."""
    points: List[List[int]] = Field(..., description="Vertex coordinates [x, y, z]")
    triangles: List[List[int]] = Field(..., description="1-based vertex indices [a, b, c]")
    segments: List[List[int]] = Field(..., description="Segments [xa, ya, za, xb, yb, zb]")
    strict: bool = Field(False, description="Reject zero-area triangles")


class QueryResult(BaseModel):
    """Per-segment hit lists plus tree statistics."""
    results: List[List[int]]
    lines: List[str]
    n_nodes: int
    depth: int


def _to_data(req: QueryRequest) -> BSPData:
    """Check row widths and convert the request to BSPData."""
    for name, rows, width in (("points", req.points, 3),
                              ("triangles", req.triangles, 3),
                              ("segments", req.segments, 6)):
        for i, row in enumerate(rows):
            if len(row) != width:
                raise HTTPException(
                    status_code=422,
                    detail=f"{name}[{i}] has {len(row)} values, expected {width}"
                )
    return BSPData(
        points=[tuple(p) for p in req.points],
        triangles=[tuple(t) for t in req.triangles],
        segments=[tuple(s) for s in req.segments],
    )


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "mini-bsp API"}


@app.post("/api/query", response_model=QueryResult)
async def query(req: QueryRequest):
    """Build a BSP tree over the triangles and answer every segment."""
    data = _to_data(req)
    try:
        data.validate()
        root_node = build_bsp(data.triangles, data.points, strict=req.strict)
    except (InvalidTriangleIndexError, DegenerateTriangleError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    results = query_segments(root_node, data)
    return QueryResult(
        results=results,
        lines=[format_result_line(hits) for hits in results],
        n_nodes=count_nodes(root_node),
        depth=tree_depth(root_node),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
