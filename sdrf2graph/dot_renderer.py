from __future__ import annotations

from typing import Dict, List, Optional

from . import sdrf
from .graph_model import GraphModel


def _quote(text: str) -> str:
    # backslashes are escaped except in the line breaks put into labels
    pieces = [p.replace("\\", "\\\\").replace('"', '\\"') for p in text.split(sdrf.LINE_BREAK)]
    return '"' + sdrf.LINE_BREAK.join(pieces) + '"'


def _first_line(name: str) -> str:
    return name.split(sdrf.LINE_BREAK)[0]


def _node_line(identifier: str, shape: str, url: Optional[str], label: Optional[str]) -> str:
    styles = [f"shape = {shape}"]
    if url is not None:
        styles.append(f"URL={_quote(url)}")
    if label is not None:
        styles.append(f"label={_quote(label)}")
    return f"  {_quote(identifier)} [{', '.join(styles)}] ;"


def protocol_node_id(label: str, name1: str, name2: str) -> str:
    """Identifier of the label node standing between name1 and name2."""
    return (
        f"{label}{sdrf.LINE_BREAK}(from:{_first_line(name1)})"
        f"{sdrf.LINE_BREAK}(to:{_first_line(name2)})"
    )


def render_dot(graph: GraphModel, layout: str = sdrf.DEFAULT_LAYOUT, edge_label: bool = True) -> str:
    """Serialize graph to Graphviz DOT text.

    Args:
        graph: Accumulated GraphModel, read only.
        layout: "top-to-down" (default) or "left-to-right"; anything other
            than top-to-down emits ``rankdir = LR``.
        edge_label: If True, each protocol chain becomes a plain label node
            between its two nodes. If False, nodes are joined directly and
            protocol metadata is left out.

    Returns:
        str: DOT text. The same graph always renders to the same text.
    """
    node_names: List[str] = []
    # protocol node id -> edge label
    protocol_nodes: Dict[str, str] = {}
    edges: List[str] = []

    for name1, name2, label in graph.edges():
        node_names.append(name1)
        node_names.append(name2)
        if not edge_label or not label.strip():
            edges.append(f"  {_quote(name1)} -> {_quote(name2)} ;")
            continue
        pid = protocol_node_id(label, name1, name2)
        protocol_nodes.setdefault(pid, label)
        edges.append(f"  {_quote(name1)} -> {_quote(pid)} [arrowhead = none] ;")
        edges.append(f"  {_quote(pid)} -> {_quote(name2)} ;")

    out = [f"digraph {sdrf.GRAPH_NAME} {{"]
    if sdrf.normalize_layout(layout) != sdrf.LAYOUT_TOP_TO_DOWN:
        out.append("graph [rankdir = LR];")
    for name in dict.fromkeys(node_names):
        out.append(_node_line(name, "box", graph.urls.get(name), graph.labels.get(name)))
    for pid, label in protocol_nodes.items():
        out.append(_node_line(pid, "none", graph.urls.get(label), label))
    out.extend(dict.fromkeys(edges))
    out.append("}")
    return "\n".join(out) + "\n"
