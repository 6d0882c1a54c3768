# io/graph_logging.py
import json
import logging
import sys

from pathgrid.domain.graph import Graph
from pathgrid.search.hooks import NoopHooks


def _default_json_logger(name="pathgrid", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class GraphLogging(NoopHooks):
    """
    Structured logs for graph construction, path queries and selection.
    Selection fires every frame, so it is only logged in debug mode.
    """

    def __init__(
        self,
        run: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run, self.debug = run, debug
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"run": self.run, **extra}})

    def graph_built(self, *, topology, nodes, edges):
        self._emit("INFO", "graph_built", topology=topology, nodes=nodes, edges=edges)

    def path_found(self, *, start, end, cost, length, expanded):
        self._emit(
            "INFO", "path_found", start=start, end=end, cost=cost, length=length, expanded=expanded
        )

    def path_missing(self, *, start, end, expanded):
        self._emit("WARNING", "path_missing", start=start, end=end, expanded=expanded)

    def maze_carved(self, *, nodes, edges, reachable):
        self._emit("INFO", "maze_carved", nodes=nodes, edges=edges, reachable=reachable)
        if reachable < nodes:
            self._emit("WARNING", "maze_disconnected", unreachable=nodes - reachable)

    def selection(self, *, node, x, y):
        if self.debug:
            self._emit("DEBUG", "selection", node=node, x=x, y=y)

    def error(self, *, reason: str, **extra):
        self._emit("ERROR", "graph_error", reason=reason, **extra)

    def graph_dump(self, graph: Graph):
        for row in graph.describe():
            self._emit("DEBUG", "node", **row)
