from __future__ import annotations

from sdrf2graph.dot_renderer import protocol_node_id, render_dot
from sdrf2graph.graph_model import GraphModel, build_graph
from sdrf2graph.types import SheetGrid

PSEUDO = "Extraction\\n(duration:45min)\\n(from:Sample|S1)\\n(to:Extract|E1)"


def test_scenario_a_with_edge_labels(scenario_a_sheet: SheetGrid) -> None:
    dot = render_dot(build_graph([scenario_a_sheet]))
    assert dot == "\n".join([
        "digraph sample {",
        '  "Sample|S1" [shape = box] ;',
        '  "Extract|E1" [shape = box] ;',
        f'  "{PSEUDO}" [shape = none, label="Extraction\\n(duration:45min)"] ;',
        f'  "Sample|S1" -> "{PSEUDO}" [arrowhead = none] ;',
        f'  "{PSEUDO}" -> "Extract|E1" ;',
        "}",
    ]) + "\n"


def test_scenario_c_without_edge_labels(scenario_a_sheet: SheetGrid) -> None:
    dot = render_dot(build_graph([scenario_a_sheet]), edge_label=False)
    assert '  "Sample|S1" -> "Extract|E1" ;' in dot
    assert "shape = none" not in dot
    assert "Extraction" not in dot


def test_left_to_right_layout(scenario_a_sheet: SheetGrid) -> None:
    graph = build_graph([scenario_a_sheet])
    assert "graph [rankdir = LR];" in render_dot(graph, layout="left-to-right")
    assert "rankdir" not in render_dot(graph, layout="top-to-down")


def test_rendering_is_idempotent(scenario_a_sheet: SheetGrid) -> None:
    graph = build_graph([scenario_a_sheet])
    assert render_dot(graph) == render_dot(graph)
    assert graph.urls == {}


def test_empty_chain_gives_direct_edge() -> None:
    graph = build_graph([SheetGrid("sdrf", ["Sample Name", "Extract Name"], [["S1", "E1"]])])
    dot = render_dot(graph)
    assert '  "Sample|S1" -> "Extract|E1" ;' in dot
    assert "arrowhead" not in dot


def test_node_and_edge_attributes() -> None:
    sheet = SheetGrid(
        "sdrf",
        ["Sample Name", "Comment [URI]", "Characteristics [organism]", "Protocol REF", "Comment [URL]", "Extract Name"],
        [["S1", "http://example.org/S1", "Mus musculus", "Extraction", "http://example.org/p", "E1"]],
    )
    dot = render_dot(build_graph([sheet]))
    assert '  "Sample|S1" [shape = box, URL="http://example.org/S1", label="Sample|S1\\n(organism:Mus musculus)"] ;' in dot
    pid = protocol_node_id("Extraction", "Sample|S1", "Extract|E1")
    assert f'  "{pid}" [shape = none, URL="http://example.org/p", label="Extraction"] ;' in dot


def test_same_protocol_between_different_pairs() -> None:
    sheet = SheetGrid(
        "sdrf",
        ["Sample Name", "Protocol REF", "Extract Name"],
        [["S1", "Extraction", "E1"], ["S2", "Extraction", "E2"], ["S1", "Extraction", "E1"]],
    )
    dot = render_dot(build_graph([sheet]))
    assert dot.count("[shape = none") == 2
    assert dot.count("[shape = box]") == 4
    assert dot.count("[arrowhead = none]") == 2


def test_quotes_are_escaped() -> None:
    graph = GraphModel()
    graph.add_edge('Sample|5" disc', "Extract|E1", "")
    assert '"Sample|5\\" disc" [shape = box] ;' in render_dot(graph)


def test_backslashes_are_escaped() -> None:
    sheet = SheetGrid(
        "sdrf",
        ["Sample Name", "Characteristics [path]", "Array Data File"],
        [["S1", "D:\\tmp", "C:\\data\\"]],
    )
    dot = render_dot(build_graph([sheet]))
    assert '  "Sample|S1" [shape = box, label="Sample|S1\\n(path:D:\\\\tmp)"] ;' in dot
    assert '  "File|C:\\\\data\\\\" [shape = box] ;' in dot
    assert '  "Sample|S1" -> "File|C:\\\\data\\\\" ;' in dot
