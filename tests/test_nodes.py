import pytest

from codeflow.codeviews.CFG.nodes import Node, NodeKind, NodeStore, PredecessorStack


def test_ids_are_dense_and_increasing():
    store = NodeStore()
    first = store.create("Start", NodeKind.START, set())
    second = store.create("a();", NodeKind.STATEMENT, {first.id})
    third = store.create("b();", NodeKind.STATEMENT, {second.id})

    assert [node.id for node in store] == [0, 1, 2]
    assert len(store) == 3
    assert store[1] is second
    assert third.predecessors == frozenset({1})


def test_equality_is_by_id_only():
    assert Node(3, "x", NodeKind.STATEMENT) == Node(3, "y", NodeKind.DECISION)
    assert Node(3, "x", NodeKind.STATEMENT) != Node(4, "x", NodeKind.STATEMENT)
    assert len({Node(1, "a", NodeKind.STATEMENT), Node(1, "b", NodeKind.STOP)}) == 1


def test_nodes_are_immutable():
    node = Node(0, "Start", NodeKind.START)
    with pytest.raises(AttributeError):
        node.label = "other"


def test_forward_references_are_rejected():
    store = NodeStore()
    store.create("Start", NodeKind.START, set())
    with pytest.raises(ValueError):
        store.create("a();", NodeKind.STATEMENT, {1})


def test_hidden_nodes_and_edge_labels():
    store = NodeStore()
    store.create("Start", NodeKind.START, set())
    true_entry = store.create("", NodeKind.TRUE_BRANCH_ENTRY, {0})
    false_entry = store.create("", NodeKind.FALSE_BRANCH_ENTRY, {0})

    assert true_entry.hidden and false_entry.hidden
    assert not store.start.hidden
    assert true_entry.edge_label == "True"
    assert false_entry.edge_label == "False"
    assert store.start.edge_label is None


def test_start_stop_accessors():
    store = NodeStore()
    assert store.start is None
    store.create("Start", NodeKind.START, set())
    assert store.stop is None
    store.create("Stop", NodeKind.STOP, {0})
    assert store.start.kind is NodeKind.START
    assert store.stop.id == 1


def test_stack_starts_with_one_empty_frame():
    stack = PredecessorStack()
    assert stack.depth == 1
    assert stack.peek() == frozenset()


def test_stack_push_pop_replace():
    stack = PredecessorStack()
    stack.replace_top({0})
    stack.push({1})
    stack.replace_top({2, 3})
    assert stack.peek() == frozenset({2, 3})
    assert stack.depth == 2

    assert stack.pop() == frozenset({2, 3})
    assert stack.peek() == frozenset({0})


def test_stack_frames_are_snapshots():
    stack = PredecessorStack()
    frame = {5}
    stack.push(frame)
    frame.add(6)
    assert stack.peek() == frozenset({5})


def test_outermost_frame_cannot_be_popped():
    with pytest.raises(IndexError):
        PredecessorStack().pop()
