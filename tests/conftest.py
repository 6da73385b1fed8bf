import pytest

from codeflow.codeviews.CFG.CFG_driver import CFGDriver


@pytest.fixture
def build_cfg():
    def _build(src_code, src_language="c"):
        return CFGDriver(src_language, src_code)

    return _build


def labels(node_store):
    return [node.label for node in node_store]


def kinds(node_store):
    return [node.kind for node in node_store]


def predecessors(node_store, node_id):
    return set(node_store[node_id].predecessors)
