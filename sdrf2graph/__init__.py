__all__ = [
    "convert_sdrf_to_graph",
    "sdrf_to_dot",
    "build_graph",
    "render_dot",
    "render_graph",
    "read_sdrf_sheets",
    "GraphModel",
    "sdrf",
    "types",
]

from .sdrf import VERSION
from .convert_sdrf_to_graph import convert_sdrf_to_graph, sdrf_to_dot
from .dot_renderer import render_dot
from .graph_model import GraphModel, build_graph
from .graphviz_renderer import render_graph
from .spreadsheet_reader import read_sdrf_sheets

__version__ = VERSION
