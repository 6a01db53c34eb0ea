import logging
import time
from typing import Callable, List, Optional

from .extractor import extract, measure
from .heuristics import GeometryPolicy
from .node import VisualNode
from .primitives import ElementMetadata

logger = logging.getLogger(__name__)

DEFAULT_MAX_NODES = 200
DEFAULT_MAX_TIME_MS = 50
DEFAULT_MAX_DEPTH = 10


class ScanBudget:
    """
    Shared traversal budget. The limits are global across the whole scan,
    not per subtree. The time limit is only checked before a node is visited.
    """

    def __init__(
        self,
        max_nodes: int = DEFAULT_MAX_NODES,
        max_time_ms: float = DEFAULT_MAX_TIME_MS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_nodes = max_nodes
        self.max_time_ms = max_time_ms
        self.clock = clock
        self.node_count = 0
        self.start_time = clock()

    def restart(self) -> None:
        self.node_count = 0
        self.start_time = self.clock()

    def elapsed_ms(self) -> float:
        return (self.clock() - self.start_time) * 1000.0

    def out_of_time(self) -> bool:
        return self.elapsed_ms() >= self.max_time_ms

    def out_of_nodes(self) -> bool:
        return self.node_count >= self.max_nodes


def _visit(
    node: VisualNode,
    budget: ScanBudget,
    depth: int,
    max_depth: int,
    policy: Optional[GeometryPolicy],
) -> Optional[ElementMetadata]:
    if budget.out_of_time():
        logger.debug("Scan stopped: %sms time limit reached", budget.max_time_ms)
        return None
    if budget.out_of_nodes():
        logger.debug("Scan stopped: %s node limit reached", budget.max_nodes)
        return None
    if depth > max_depth:
        return None

    box = measure(node, budget.node_count, policy)
    if box.is_empty():
        return None

    budget.node_count += 1
    metadata = extract(node, budget.node_count - 1, policy, box=box)

    try:
        child_nodes = list(node.element_children())
    except Exception as exc:
        logger.warning("Failed to enumerate children of <%s>: %s", metadata.kind, exc)
        child_nodes = []

    for child in child_nodes:
        if budget.out_of_nodes() or budget.out_of_time():
            break
        child_meta = _visit(child, budget, depth + 1, max_depth, policy)
        if child_meta is not None:
            metadata.children.append(child_meta)

    return metadata


def scan(
    root: VisualNode,
    max_depth: int = DEFAULT_MAX_DEPTH,
    budget: Optional[ScanBudget] = None,
    policy: Optional[GeometryPolicy] = None,
) -> List[ElementMetadata]:
    """
    Depth-first scan of `root` under node, time and depth budgets.

    Returns [root_metadata], or [] when the root itself was skipped
    (zero-area box or exhausted budget). Zero-area descendants are dropped
    along with their subtrees and do not count against the node budget.
    """
    budget = budget or ScanBudget()
    budget.restart()
    result = _visit(root, budget, 0, max_depth, policy)
    logger.debug("Scan finished: %s nodes in %.1fms", budget.node_count, budget.elapsed_ms())
    return [result] if result is not None else []
