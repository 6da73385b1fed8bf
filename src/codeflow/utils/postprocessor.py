import json

from networkx.readwrite import json_graph

from ..codeviews.CFG.nodes import NodeKind

FLOWCHART_HEADER = "flowchart TD"

# Opening/closing brackets per node kind; anything not listed is a plain box
NODE_SHAPES = {
    NodeKind.START: ("([", "])"),
    NodeKind.STOP: ("([", "])"),
    NodeKind.DEFINITION: ("([", "])"),
    NodeKind.DECISION: ("{", "}"),
}
DEFAULT_SHAPE = ("[", "]")


def node_identifier(node_id):
    return f"n{node_id}"


def escape_label(label):
    """Escape quotes for a Mermaid string label and fold it onto a single line."""
    return " ".join(label.split()).replace('"', "#quot;")


def to_flowchart(node_store):
    """
    Render a node store as Mermaid flowchart text.

    Nodes are declared in id order, then every node's incoming edges are listed
    in the same order, predecessors ascending. Hidden nodes are kept. The
    result depends on nothing but the store, so rendering twice gives the same
    bytes.
    """
    lines = [FLOWCHART_HEADER]
    for node in node_store:
        opening, closing = NODE_SHAPES.get(node.kind, DEFAULT_SHAPE)
        # Hidden nodes are drawn as a blank box, never dropped
        label = " " if node.hidden else escape_label(node.label)
        lines.append(f'    {node_identifier(node.id)}{opening}"{label}"{closing}')

    for node in node_store:
        for pred in sorted(node.predecessors):
            edge_label = node_store[pred].edge_label
            arrow = "-->" if edge_label is None else f"-->|{edge_label}|"
            lines.append(f"    {node_identifier(pred)} {arrow} {node_identifier(node.id)}")

    return "\n".join(lines) + "\n"


def write_flowchart(flowchart, filename):
    with open(filename, "w", encoding="utf-8") as f:
        f.write(flowchart)


def networkx_to_json(graph):
    """Convert a networkx graph to a json object"""
    graph_json = json_graph.node_link_data(graph, edges="edges")
    return graph_json


def write_networkx_to_json(graph, filename):
    """Write a networkx graph to `filename` as node-link json"""
    graph_json = networkx_to_json(graph)
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(graph_json, f, indent=2)
    return graph_json
