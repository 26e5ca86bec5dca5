from __future__ import annotations

from sdrf2graph.graph_model import GraphModel, build_graph
from sdrf2graph.types import SheetGrid


def test_scenario_a_last_row_wins(scenario_a_sheet: SheetGrid) -> None:
    graph = build_graph([scenario_a_sheet])
    assert graph.node_names() == ["Sample|S1", "Extract|E1"]
    assert graph.adjacency == {"Sample|S1": {"Extract|E1": "Extraction\\n(duration:45min)"}}
    assert graph.rows == 2
    assert graph.sheets == ["sdrf"]


def test_scenario_b_single_node_has_no_edge() -> None:
    sheet = SheetGrid("sdrf", ["Hybridization Name", "Array Design REF"], [["H1", "ArrayX"]])
    graph = build_graph([sheet])
    assert graph.adjacency == {}
    assert "(Array:ArrayX)" in graph.labels["Hybridization|H1"]


def test_scenario_d_link_attaches_to_node() -> None:
    sheet = SheetGrid(
        "sdrf",
        ["Sample Name", "Comment [URI]", "Extract Name"],
        [["S1", "http://example.org/S1", "E1"]],
    )
    graph = build_graph([sheet])
    assert graph.urls == {"Sample|S1": "http://example.org/S1"}


def test_nodes_are_shared_across_sheets() -> None:
    first = SheetGrid("sdrf-kd", ["Sample Name", "Extract Name"], [["S1", "E1"]])
    second = SheetGrid("sdrf-seq", ["Extract Name", "Protocol REF", "Array Data File"], [["E1", "Sequencing", "run1.fastq"]])
    graph = build_graph([first, second])
    assert graph.node_names() == ["Sample|S1", "Extract|E1", "File|run1.fastq"]
    assert graph.edge_count() == 2
    assert graph.sheets == ["sdrf-kd", "sdrf-seq"]


def test_dangling_chains_are_counted() -> None:
    sheet = SheetGrid(
        "sdrf",
        ["Sample Name", "Protocol REF", "Extract Name", "Protocol REF"],
        [["S1", "Extraction", "E1", "Labeling"], ["S2", "Extraction", "E2", ""]],
    )
    graph = build_graph([sheet])
    assert graph.dangling_chains == 1
    assert graph.edge_count() == 2


def test_each_build_starts_empty(scenario_a_sheet: SheetGrid) -> None:
    build_graph([scenario_a_sheet])
    assert build_graph([]).adjacency == {}


def test_characteristic_key_kept_once_per_node() -> None:
    graph = GraphModel()
    graph.add_characteristic("Sample|S1", "age", "3 weeks")
    graph.add_characteristic("Sample|S1", "age", "5 weeks")
    graph.add_characteristic("Sample|S1", "sex", "female")
    assert graph.labels["Sample|S1"] == "Sample|S1\\n(age:3 weeks)\\n(sex:female)"
