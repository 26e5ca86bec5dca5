from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, List, Sequence

from . import sdrf
from .types import Column, ColumnTag, RowState

if TYPE_CHECKING:
    from .graph_model import GraphModel


def _is_blank(value: str | None) -> bool:
    return value is None or str(value).strip() == ""


def _on_array_design(state: RowState, column: Column, value: str, graph: GraphModel) -> RowState:
    if state.current_node is not None:
        graph.add_array_design(state.current_node, value)
    return state


def _on_node(state: RowState, column: Column, value: str, graph: GraphModel) -> RowState:
    node = column.node_id(value)
    previous = state.current_node
    if previous is not None and not previous.rstrip().endswith(sdrf.KIND_SEPARATOR):
        label = state.chain_label()
        graph.add_edge(previous, node, label)
        if state.pending_edge_url is not None:
            graph.set_url(label, state.pending_edge_url)
    return RowState(current_node=node)


def _on_characteristic(state: RowState, column: Column, value: str, graph: GraphModel) -> RowState:
    if state.current_node is not None:
        graph.add_characteristic(state.current_node, column.key, value)
    return state


def _on_edge(state: RowState, column: Column, value: str, graph: GraphModel) -> RowState:
    return replace(state, protocol_chain=state.protocol_chain + [value])


def _on_parameter(state: RowState, column: Column, value: str, graph: GraphModel) -> RowState:
    if not state.protocol_chain:
        return state
    chain = list(state.protocol_chain)
    chain[-1] = f"{chain[-1]}{sdrf.LINE_BREAK}({column.key}:{value})"
    state = replace(state, protocol_chain=chain)
    if state.pending_edge_url is not None:
        graph.set_url(state.chain_label(), state.pending_edge_url)
    return state


def _on_link(state: RowState, column: Column, value: str, graph: GraphModel) -> RowState:
    if not state.protocol_chain and state.current_node is not None:
        graph.set_url(state.current_node, value)
        return replace(state, pending_edge_url=None)
    state = replace(state, pending_edge_url=value)
    if state.protocol_chain:
        graph.set_url(state.chain_label(), value)
    return state


def _on_ignore(state: RowState, column: Column, value: str, graph: GraphModel) -> RowState:
    return state


_TRANSITIONS = {
    ColumnTag.ARRAY_DESIGN: _on_array_design,
    ColumnTag.NODE: _on_node,
    ColumnTag.CHARACTERISTIC: _on_characteristic,
    ColumnTag.EDGE: _on_edge,
    ColumnTag.PARAMETER: _on_parameter,
    ColumnTag.LINK: _on_link,
    ColumnTag.IGNORE: _on_ignore,
}


def step(state: RowState, column: Column, value: str, graph: GraphModel) -> RowState:
    """Apply one non-empty cell to the row state, recording edges and annotations in graph."""
    return _TRANSITIONS[column.tag](state, column, value, graph)


def walk_row(columns: List[Column], values: Sequence[str], graph: GraphModel) -> RowState:
    """Fold one row, left to right, into graph.

    Returns the final state; a non-empty ``protocol_chain`` there means the
    row ended on protocol columns without a following node column, and that
    chain was not recorded.
    """
    state = RowState()
    for column, value in zip(columns, values):
        if _is_blank(value):
            continue
        state = step(state, column, value, graph)
    return state
