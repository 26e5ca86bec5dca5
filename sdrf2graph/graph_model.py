from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Tuple

from . import sdrf
from .column_classifier import classify_headers
from .row_walker import walk_row
from .types import SheetGrid


class GraphModel:
    """Accumulated investigation design graph of one conversion.

    All maps start empty, only ever grow while rows are walked, and are read
    once by the renderer. Identifiers are shared across sheets, so the same
    sample appearing in two linked sheets is one node.
    """

    def __init__(self) -> None:
        # name1 -> name2 -> joined protocol chain
        self.adjacency: Dict[str, Dict[str, str]] = {}
        # node id or edge label -> display label
        self.labels: Dict[str, str] = {}
        # node id or edge label -> URL
        self.urls: Dict[str, str] = {}
        self.sheets: List[str] = []
        self.rows = 0
        self.dangling_chains = 0

    def add_edge(self, name1: str, name2: str, label: str) -> None:
        # a later row wins for a repeated pair
        self.adjacency.setdefault(name1, {})[name2] = label

    def set_url(self, key: str, url: str) -> None:
        self.urls[key] = url

    def _label(self, identifier: str) -> str:
        return self.labels.setdefault(identifier, identifier)

    def add_characteristic(self, identifier: str, key: str, value: str) -> None:
        """Append ``(key:value)`` to the label, keeping the first value per key."""
        label = self._label(identifier)
        if f"{sdrf.LINE_BREAK}({key}:" in label:
            return
        self.labels[identifier] = f"{label}{sdrf.LINE_BREAK}({key}:{value})"

    def add_array_design(self, identifier: str, value: str) -> None:
        label = self._label(identifier)
        fragment = f"{sdrf.LINE_BREAK}({sdrf.ARRAY_KEY}:{value})"
        if fragment in label:
            return
        self.labels[identifier] = label + fragment

    def edges(self) -> Iterator[Tuple[str, str, str]]:
        for name1, targets in self.adjacency.items():
            for name2, label in targets.items():
                yield name1, name2, label

    def node_names(self) -> List[str]:
        names: Dict[str, None] = {}
        for name1, name2, _ in self.edges():
            names.setdefault(name1)
            names.setdefault(name2)
        return list(names)

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.adjacency.values())


def add_sheet(graph: GraphModel, sheet: SheetGrid) -> GraphModel:
    columns = classify_headers(sheet.header)
    for row in sheet.rows:
        state = walk_row(columns, row, graph)
        if state.protocol_chain:
            # protocol columns with no node column after them
            graph.dangling_chains += 1
        graph.rows += 1
    graph.sheets.append(sheet.name)
    return graph


def build_graph(sheets: Iterable[SheetGrid]) -> GraphModel:
    """Walk every row of every sheet, in order, into one fresh GraphModel."""
    graph = GraphModel()
    for sheet in sheets:
        add_sheet(graph, sheet)
    return graph
