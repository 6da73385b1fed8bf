from enum import Enum

import networkx as nx
from loguru import logger

from .nodes import NodeKind, NodeStore, PredecessorStack
from ...exceptions import UnimplementedHookError


class Construct(Enum):
    """Closed set of construct categories the traversal knows how to wire."""

    SEQUENTIAL = "sequential"
    BRANCH = "branch"
    DEFINITION = "definition"
    BLOCK = "block"
    UNSUPPORTED = "unsupported"
    IGNORED = "ignored"


class CFGGraph:
    """
    Single-pass AST to CFG builder.

    The traversal threads a stack of open predecessor sets through the tree:
    every node is created with the current top frame as its predecessors and
    then becomes the only member of that frame. Branches push one frame per
    arm and leave the union of both arm exits behind. Definitions push an
    empty frame for their body and throw its exit away, so the enclosing flow
    only ever sees the Definition node itself.

    Language subclasses wire three hooks: `classify`, `branch_parts` and
    `definition_parts`. All traversal state belongs to the instance and lives
    exactly as long as one build.
    """

    def __init__(self, src_language, src_code, root_node, parser):
        self.src_language = src_language
        self.src_code = src_code
        self.root_node = root_node
        self.parser = parser

        self.node_store = NodeStore()
        self.stack = PredecessorStack()

    def classify(self, node):
        raise UnimplementedHookError(f"{type(self).__name__} does not classify '{node.type}' nodes")

    def branch_parts(self, node):
        """Return (decision label, consequence node, alternative node or None)."""
        raise UnimplementedHookError(f"{type(self).__name__} cannot split branch '{node.type}'")

    def definition_parts(self, node):
        """Return (definition label, body node)."""
        raise UnimplementedHookError(f"{type(self).__name__} cannot split definition '{node.type}'")

    def block_children(self, node):
        body = node.child_by_field_name("body")
        if body is not None:
            return [body]
        return node.named_children

    def build(self):
        start = self.node_store.create("Start", NodeKind.START, self.stack.peek())
        self.stack.replace_top({start.id})

        self.visit_block(self.root_node)

        self.node_store.create("Stop", NodeKind.STOP, self.stack.peek())
        logger.info(f"{self.src_language} CFG built with {len(self.node_store)} nodes")
        return self.node_store

    def visit(self, node):
        construct = self.classify(node)

        if construct is Construct.SEQUENTIAL:
            self.add_statement(node)
        elif construct is Construct.BRANCH:
            self.visit_branch(node)
        elif construct is Construct.DEFINITION:
            self.visit_definition(node)
        elif construct is Construct.BLOCK:
            self.visit_block(node)
        elif construct is Construct.UNSUPPORTED:
            logger.warning(
                f"{node.type} on line {node.start_point[0] + 1} is not expanded, "
                f"rendering it as a single statement"
            )
            self.add_statement(node)
        elif construct is Construct.IGNORED:
            pass
        else:
            raise ValueError(f"Unknown construct category {construct!r} for '{node.type}'")

    def visit_block(self, node):
        for child in self.block_children(node):
            self.visit(child)

    def add_statement(self, node, kind=NodeKind.STATEMENT, label=None):
        if label is None:
            label = self.parser.source_text(node).strip()
        new_node = self.node_store.create(
            label, kind, self.stack.peek(), line=node.start_point[0] + 1
        )
        self.stack.replace_top({new_node.id})
        return new_node

    def visit_branch(self, node):
        """
        Wire an if/else, walking `else if` chains iteratively.

        Each link of the chain opens its false arm as a new frame and the next
        Decision is created inside it, exactly as a nested visit would, so long
        chains do not grow the Python call stack.
        """
        exits = set()
        open_false_arms = 0

        while node is not None:
            label, consequence, alternative = self.branch_parts(node)
            decision = self.add_statement(node, NodeKind.DECISION, label)

            self.open_arm(decision, NodeKind.TRUE_BRANCH_ENTRY)
            if consequence is not None:
                self.visit(consequence)
            exits |= self.stack.pop()

            self.open_arm(decision, NodeKind.FALSE_BRANCH_ENTRY)
            open_false_arms += 1
            node = self.chained_branch(alternative)
            if node is None and alternative is not None:
                self.visit(alternative)

        # Only the innermost false arm reaches the end of the chain; the
        # outer ones were continued by the next Decision
        exits |= self.stack.pop()
        for _ in range(open_false_arms - 1):
            self.stack.pop()

        # No merge node: the next node simply inherits every arm exit
        self.stack.replace_top(exits)

    def open_arm(self, decision, entry_kind):
        self.stack.push({decision.id})
        entry = self.node_store.create("", entry_kind, self.stack.peek())
        self.stack.replace_top({entry.id})

    def chained_branch(self, alternative):
        """Return the branch an `else` arm consists of, or None when it holds anything else."""
        if alternative is None:
            return None
        construct = self.classify(alternative)
        if construct is Construct.BRANCH:
            return alternative
        if construct is not Construct.BLOCK:
            return None
        items = [
            child for child in self.block_children(alternative)
            if self.classify(child) is not Construct.IGNORED
        ]
        if len(items) == 1 and self.classify(items[0]) is Construct.BRANCH:
            return items[0]
        return None

    def visit_definition(self, node):
        label, body = self.definition_parts(node)
        definition = self.add_statement(node, NodeKind.DEFINITION, label)

        self.stack.push(set())
        self.visit(body)
        body_exit = self.stack.pop()
        logger.debug(f"Discarded exit {sorted(body_exit)} of definition {definition.id}")

    def to_networkx(self):
        graph = nx.DiGraph()
        for node in self.node_store:
            graph.add_node(node.id, label=node.label, kind=node.kind.value, line=node.line)
        for node in self.node_store:
            for pred in sorted(node.predecessors):
                edge_label = self.node_store[pred].edge_label
                if edge_label is None:
                    graph.add_edge(pred, node.id)
                else:
                    graph.add_edge(pred, node.id, label=edge_label)
        return graph
