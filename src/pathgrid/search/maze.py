# search/maze.py
import numpy as np

from pathgrid.domain.entities.node import connect
from pathgrid.domain.graph import Graph


def carve_maze(source: Graph, output: Graph, rng: np.random.Generator) -> Graph:
    """
    Randomized iterative DFS over ``source`` starting at node 0. Every tree
    edge taken is added to ``output``, which ends up holding a spanning tree
    of the part of ``source`` reachable from node 0. Unreachable nodes are
    copied over without edges.
    """
    if not len(source):
        raise ValueError("cannot carve a maze from an empty graph")
    if len(output):
        raise ValueError("maze output graph must be empty")

    for n in source:
        output.add_node(n.id, n.x, n.y)
    for n in source:
        n.visited = False

    root = source.get_node(0)
    root.visited = True
    stack = [root]
    while stack:
        n = stack[-1]
        for k in rng.permutation(n.degree):
            edge = n.edges[int(k)]
            neigh = source.get_node(edge.target)
            if not neigh.visited:
                connect(output.get_node(n.id), output.get_node(neigh.id), edge.cost)
                neigh.visited = True
                stack.append(neigh)
                break
        else:
            stack.pop()

    reachable = sum(1 for n in source if n.visited)
    output.hooks.maze_carved(nodes=len(output), edges=output.edge_count(), reachable=reachable)
    output.hooks.graph_built(topology="maze", nodes=len(output), edges=output.edge_count())

    output.set_start_node(output.get_node(0))
    output.set_end_node(output.get_node(len(output) - 1))
    output.find_path()
    return output
