from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from . import sdrf


class ColumnTag(Enum):
    NODE = "Node"
    EDGE = "Edge"
    CHARACTERISTIC = "Characteristic"
    PARAMETER = "Parameter"
    ARRAY_DESIGN = "ArrayDesign"
    LINK = "Link"
    IGNORE = "Ignore"


@dataclass(frozen=True)
class Column:
    header: str
    tag: ColumnTag
    # bracketed key of Characteristics [..] / Parameter Value [..]
    key: Optional[str] = None
    # entity kind of node columns, None for bare Data columns
    kind: Optional[str] = None

    def node_id(self, value: str) -> str:
        if self.kind is None:
            return value
        return f"{self.kind}{sdrf.KIND_SEPARATOR}{value}"


@dataclass
class SheetGrid:
    name: str
    header: List[str]
    # data rows only, each padded to the header length
    rows: List[List[str]] = field(default_factory=list)


@dataclass
class RowState:
    current_node: Optional[str] = None
    protocol_chain: List[str] = field(default_factory=list)
    pending_edge_url: Optional[str] = None

    def chain_label(self) -> str:
        return sdrf.LINE_BREAK.join(self.protocol_chain)
