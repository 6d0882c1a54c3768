# search/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def graph_built(self, *, topology, nodes, edges): ...
    def path_found(self, *, start, end, cost, length, expanded): ...
    def path_missing(self, *, start, end, expanded): ...
    def maze_carved(self, *, nodes, edges, reachable): ...
    def selection(self, *, node, x, y): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def graph_built(self, **_):
        pass

    def path_found(self, **_):
        pass

    def path_missing(self, **_):
        pass

    def maze_carved(self, **_):
        pass

    def selection(self, **_):
        pass

    def error(self, **_):
        pass
