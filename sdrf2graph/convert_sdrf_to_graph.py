from __future__ import annotations

import warnings
from pathlib import Path

from . import sdrf
from .dot_renderer import render_dot
from .graph_model import build_graph
from .graphviz_renderer import render_graph
from .spreadsheet_reader import read_sdrf_sheets


def get_default_output_path(input_path: str, output_format: str) -> str:
    return f"{input_path}.{output_format}"


def sdrf_to_dot(input_path: str, *, sheet_name: str = sdrf.DEFAULT_SHEET_NAME, layout: str = sdrf.DEFAULT_LAYOUT, edge_label: bool = True) -> tuple[str, dict]:
    """Build the investigation design graph of an SDRF file and render it as DOT.

    Returns:
        tuple: (DOT text, statistics dict without 'created_files')
    """
    all_warnings = []
    with warnings.catch_warnings(record=True) as w:
        warnings.simplefilter("always")
        sheets = read_sdrf_sheets(input_path, sheet_name)
        for warning in w:
            all_warnings.append(str(warning.message))

    if not sheets:
        all_warnings.append(f"No sheet matched '{sheet_name}'")
    graph = build_graph(sheets)
    dot_text = render_dot(graph, layout=layout, edge_label=edge_label)

    all_warnings.append(f"Found {len(graph.sheets)} sheets")
    all_warnings.append(f"Found {len(graph.node_names())} nodes")
    all_warnings.append(f"Found {graph.edge_count()} edges")
    if graph.dangling_chains:
        all_warnings.append(f"Dropped {graph.dangling_chains} protocol chains with no following node column")

    protocols = sum(1 for _, _, label in graph.edges() if label.strip()) if edge_label else 0
    stats = {
        'sheets': len(graph.sheets),
        'nodes': len(graph.node_names()),
        'edges': graph.edge_count(),
        'protocols': protocols,
        'dangling_chains': graph.dangling_chains,
        'warnings': all_warnings,
    }
    return dot_text, stats


def convert_sdrf_to_graph(input_path: str, output_path: str = None, *, output_format: str = sdrf.DEFAULT_FORMAT, sheet_name: str = sdrf.DEFAULT_SHEET_NAME, layout: str = sdrf.DEFAULT_LAYOUT, edge_label: bool = True, print_messages: bool = True) -> dict:
    """
    Convert an SDRF spreadsheet into a graph file (DOT text or a Graphviz-rendered image).

    Args:
        input_path: Path to input XLSX workbook or tab-delimited SDRF file
        output_path: Path to output file (default: input path plus '.<format>')
        output_format: "dot" (default) or any output format supported by Graphviz, e.g. "png", "svg"
        sheet_name: Pattern selecting sheets by name (default 'sdrf'); empty selects all sheets
        layout: "top-to-down" (default) or "left-to-right"
        edge_label: Whether protocols are drawn as label nodes on the edges
        print_messages: Whether to print messages to console (set False for app use)

    Returns:
        dict: Statistics including 'sheets', 'nodes', 'edges', 'protocols', 'dangling_chains' counts,
              'warnings' list and 'created_files' list
    """
    if output_path is None:
        output_path = get_default_output_path(input_path, output_format)

    dot_text, stats = sdrf_to_dot(input_path, sheet_name=sheet_name, layout=layout, edge_label=edge_label)
    if print_messages:
        for msg in stats['warnings']:
            print(msg)

    if output_format == sdrf.FORMAT_DOT:
        Path(output_path).write_text(dot_text, encoding="utf-8")
    else:
        Path(output_path).write_bytes(render_graph(dot_text, output_format))

    stats['created_files'] = [output_path]
    return stats
