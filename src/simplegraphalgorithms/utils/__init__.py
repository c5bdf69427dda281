from .graphs import (
    as_simple_graph,
    vertex_list,
    edge_list,
    adjacency_array,
    laplacian_array,
    delete_edge,
    delete_vertex,
    contract_edge,
    induced,
    is_complete,
    incident_edges,
)

__all__ = [
    "as_simple_graph",
    "vertex_list",
    "edge_list",
    "adjacency_array",
    "laplacian_array",
    "delete_edge",
    "delete_vertex",
    "contract_edge",
    "induced",
    "is_complete",
    "incident_edges",
]
