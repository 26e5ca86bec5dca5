from __future__ import annotations
# version
VERSION = "1.0.0"

# header keywords (matched case-sensitively as substrings)
KEY_NAME = "Name"
KEY_FILE = "File"
KEY_DATA = "Data"
KEY_PROTOCOL = "Protocol"
KEY_CHARACTERISTIC = "Characteristic"
KEY_PARAMETER = "Parameter"
LINK_KEYS = ["URI", "URL", "FTP"]
NODE_KEYS = [KEY_NAME, KEY_FILE, KEY_DATA]

# regular expressions
ARRAY_DESIGN_PATTERN = r"Array\s*Design\s*(File|REF)"
NAME_PATTERN = r"\s*Name\s*"
BRACKET_KEY_PATTERN = r"\[(.*)\]"

# node identifier parts
FILE_KIND = "File"
KIND_SEPARATOR = "|"
ARRAY_KEY = "Array"

# DOT line break escape, written literally into labels
LINE_BREAK = "\\n"

# graph output
GRAPH_NAME = "sample"
LAYOUT_TOP_TO_DOWN = "top-to-down"
LAYOUT_LEFT_TO_RIGHT = "left-to-right"
LAYOUTS = [LAYOUT_TOP_TO_DOWN, LAYOUT_LEFT_TO_RIGHT]
FORMAT_DOT = "dot"

# defaults
DEFAULT_SHEET_NAME = "sdrf"
DEFAULT_FORMAT = FORMAT_DOT
DEFAULT_LAYOUT = LAYOUT_TOP_TO_DOWN
ALL_SHEETS = ["", "FALSE"]

# service defaults
SERVER_FORMAT = "svg"
SERVER_LAYOUT = LAYOUT_LEFT_TO_RIGHT
SERVER_PORT = 10080
SERVER_BIND_ADDRESS = "127.0.0.1"

# input files
XLSX_SUFFIXES = [".xlsx", ".xlsm"]
TEXT_SUFFIXES = {".txt": "\t", ".tsv": "\t", ".sdrf": "\t", ".csv": ","}

# response content types per output format
CONTENT_TYPES = {
    "svg": "image/svg+xml",
    "png": "image/png",
    "pdf": "application/pdf",
    "dot": "text/plain",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def selects_all_sheets(sheet_name: str | None) -> bool:
    if sheet_name is None:
        return True
    return sheet_name.strip() in ALL_SHEETS


def normalize_layout(input_layout: str) -> str | None:
    if not input_layout:
        return None
    return {layout.lower(): layout for layout in LAYOUTS}.get(input_layout.strip().lower())


def content_type_for(output_format: str) -> str:
    return CONTENT_TYPES.get(output_format.lower(), DEFAULT_CONTENT_TYPE)
