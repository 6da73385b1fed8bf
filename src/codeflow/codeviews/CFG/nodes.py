from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from loguru import logger


class NodeKind(Enum):
    START = "start"
    STOP = "stop"
    DEFINITION = "definition"
    DECISION = "decision"
    TRUE_BRANCH_ENTRY = "true_branch_entry"
    FALSE_BRANCH_ENTRY = "false_branch_entry"
    STATEMENT = "statement"


@dataclass(frozen=True, eq=False)
class Node:
    """
    A single CFG node.

    Identity is the integer id alone: two nodes with the same id are equal no
    matter what label or kind they carry. Predecessors are stored as ids of
    nodes created earlier, never as references to other Node objects.
    An empty label marks a hidden node (branch entries have no source text).
    """

    id: int
    label: str
    kind: NodeKind
    predecessors: frozenset = field(default_factory=frozenset)
    line: Optional[int] = None

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    @property
    def hidden(self):
        return self.label == ""

    @property
    def edge_label(self):
        """Label carried by edges leaving this node."""
        if self.kind is NodeKind.TRUE_BRANCH_ENTRY:
            return "True"
        if self.kind is NodeKind.FALSE_BRANCH_ENTRY:
            return "False"
        return None


class NodeStore:
    """Append-only arena of CFG nodes indexed by their dense integer id."""

    def __init__(self):
        self._nodes = []

    def create(self, label, kind, predecessors, line=None):
        node_id = len(self._nodes)
        predecessors = frozenset(predecessors)
        if any(pred >= node_id for pred in predecessors):
            raise ValueError(f"Node {node_id} cannot point forward to {sorted(predecessors)}")
        node = Node(node_id, label, kind, predecessors, line)
        self._nodes.append(node)
        logger.debug(f"Created {kind.name} node {node_id} <- {sorted(predecessors)}: {label!r}")
        return node

    def __getitem__(self, node_id):
        return self._nodes[node_id]

    def __len__(self):
        return len(self._nodes)

    def __iter__(self):
        return iter(self._nodes)

    @property
    def start(self):
        return self._nodes[0] if self._nodes else None

    @property
    def stop(self):
        if self._nodes and self._nodes[-1].kind is NodeKind.STOP:
            return self._nodes[-1]
        return None


class PredecessorStack:
    """
    Stack of open predecessor sets, one frame per active lexical scope.

    The stack starts with a single frame holding the empty set. Frames are
    stored as frozensets so a frame handed out by peek() or pop() can be used
    as a node's predecessor snapshot without copying.
    """

    def __init__(self):
        self._frames = [frozenset()]

    def push(self, frame):
        self._frames.append(frozenset(frame))
        logger.debug(f"Push frame {sorted(frame)} (depth {len(self._frames)})")

    def pop(self):
        if len(self._frames) == 1:
            raise IndexError("Cannot pop the outermost predecessor frame")
        frame = self._frames.pop()
        logger.debug(f"Pop frame {sorted(frame)} (depth {len(self._frames)})")
        return frame

    def replace_top(self, frame):
        self._frames[-1] = frozenset(frame)

    def peek(self):
        return self._frames[-1]

    @property
    def depth(self):
        return len(self._frames)
