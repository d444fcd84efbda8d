# domain/graphs/graphs_generators.py
import numpy as np

from path_engine.domain.entities.geography import Point
from path_engine.domain.graphs.graphs_explicit import ExplicitGraph
from path_engine.domain.graphs.graphs_grid import GridGraph


def _as_rng(rng) -> np.random.Generator:
    return rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)


def random_geometric_graph(
    rng,
    n: int,
    *,
    width: float = 800.0,
    height: float = 600.0,
    radius: float = 250.0,
    max_weight: float = 0.0,
) -> ExplicitGraph:
    """
    Scatter ``n`` nodes uniformly over a width x height canvas and connect every pair
    closer than ``radius``. Node ids are the integers 0..n-1.
    """
    g = _as_rng(rng)
    xy = g.uniform((0.0, 0.0), (width, height), size=(n, 2))
    w = g.uniform(0.0, max_weight, size=n) if max_weight > 0 else np.zeros(n)
    positions = {i: Point(float(x), float(y)) for i, (x, y) in enumerate(xy)}

    # pairwise distances, upper triangle only
    d = np.hypot(xy[:, None, 0] - xy[None, :, 0], xy[:, None, 1] - xy[None, :, 1])
    iu, ju = np.triu_indices(n, k=1)
    keep = d[iu, ju] < radius
    edges = [(int(i), int(j)) for i, j in zip(iu[keep], ju[keep])]

    return ExplicitGraph.from_edges(
        positions, edges, weights={i: float(w[i]) for i in range(n)}
    )


def random_grid(rng, rows: int, cols: int, *, p_blocked: float = 0.2, keep=()) -> GridGraph:
    """Grid with each cell blocked with probability ``p_blocked``; cells in ``keep`` stay open."""
    mask = _as_rng(rng).random((rows, cols)) < p_blocked
    for c in keep:
        mask[c.row, c.col] = False
    return GridGraph.from_mask(mask)
