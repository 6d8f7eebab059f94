"""
Connectivity of a generated lattice.

Nodes and strut end points are merged into a graph so the number of
disconnected lattice pieces can be reported before any Boolean work.
"""

from typing import Sequence, Dict, Any, TYPE_CHECKING
import logging

from ..core.primitives import Primitive, NodePrimitive, StrutPrimitive

if TYPE_CHECKING:
    import networkx as nx

logger = logging.getLogger(__name__)


def _key(point, decimals: int):
    return tuple(round(float(c), decimals) for c in point)


def build_lattice_graph(primitives: Sequence[Primitive], decimals: int = 6) -> "nx.Graph":
    """
    Graph with one vertex per distinct anchor point and one edge per strut.

    Vertices carry the point as ``pos``; edges carry ``radius`` and ``role``.
    """
    import networkx as nx

    G = nx.Graph()
    for prim in primitives:
        if isinstance(prim, NodePrimitive):
            G.add_node(_key(prim.center, decimals), pos=prim.center, radius=prim.radius)
        elif isinstance(prim, StrutPrimitive):
            a = _key(prim.start, decimals)
            b = _key(prim.end, decimals)
            G.add_node(a, pos=prim.start)
            G.add_node(b, pos=prim.end)
            G.add_edge(a, b, radius=prim.radius, role=prim.role)
    return G


def lattice_topology(primitives: Sequence[Primitive]) -> Dict[str, Any]:
    """
    Summarize lattice connectivity.

    Returns
    -------
    dict
        ``vertices``, ``edges``, ``components``, ``largest_component``,
        ``isolated_vertices``
    """
    import networkx as nx

    G = build_lattice_graph(primitives)
    if G.number_of_nodes() == 0:
        return {
            "vertices": 0,
            "edges": 0,
            "components": 0,
            "largest_component": 0,
            "isolated_vertices": 0,
        }

    components = list(nx.connected_components(G))
    summary = {
        "vertices": G.number_of_nodes(),
        "edges": G.number_of_edges(),
        "components": len(components),
        "largest_component": max(len(c) for c in components),
        "isolated_vertices": nx.number_of_isolates(G),
    }
    logger.debug(f"Lattice topology: {summary}")
    return summary


__all__ = [
    "build_lattice_graph",
    "lattice_topology",
]
