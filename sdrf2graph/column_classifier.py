from __future__ import annotations

import re
from typing import List, Optional

from . import sdrf
from .types import Column, ColumnTag

_ARRAY_DESIGN_RE = re.compile(sdrf.ARRAY_DESIGN_PATTERN)
_NAME_RE = re.compile(sdrf.NAME_PATTERN)
_BRACKET_KEY_RE = re.compile(sdrf.BRACKET_KEY_PATTERN)


def _bracket_key(header: str) -> str:
    """Return K of a `... [K]` header, or the whole header when it has no brackets."""
    m = _BRACKET_KEY_RE.search(header)
    if m:
        return m.group(1)
    return header


def _node_kind(header: str) -> Optional[str]:
    if sdrf.KEY_NAME in header:
        return _NAME_RE.sub("", header)
    if sdrf.KEY_FILE in header:
        return sdrf.FILE_KIND
    return None


def classify_header(header: str) -> Column:
    """Map one SDRF column header to its semantic tag.

    Rules are checked in order and the first match wins:

    1. ``Array Design File`` / ``Array Design REF`` -> ARRAY_DESIGN
    2. no ``Protocol`` and one of ``Name``/``File``/``Data`` -> NODE
    3. ``Characteristic`` -> CHARACTERISTIC
    4. ``Protocol`` -> EDGE
    5. ``Parameter`` -> PARAMETER
    6. ``URI``/``URL``/``FTP`` -> LINK
    7. anything else -> IGNORE
    """
    header = header or ""
    if _ARRAY_DESIGN_RE.search(header):
        return Column(header, ColumnTag.ARRAY_DESIGN)
    if sdrf.KEY_PROTOCOL not in header and any(k in header for k in sdrf.NODE_KEYS):
        return Column(header, ColumnTag.NODE, kind=_node_kind(header))
    if sdrf.KEY_CHARACTERISTIC in header:
        return Column(header, ColumnTag.CHARACTERISTIC, key=_bracket_key(header))
    if sdrf.KEY_PROTOCOL in header:
        return Column(header, ColumnTag.EDGE)
    if sdrf.KEY_PARAMETER in header:
        return Column(header, ColumnTag.PARAMETER, key=_bracket_key(header))
    if any(k in header for k in sdrf.LINK_KEYS):
        return Column(header, ColumnTag.LINK)
    return Column(header, ColumnTag.IGNORE)


def classify_headers(headers: List[str]) -> List[Column]:
    # computed once per sheet, reused for every row
    return [classify_header(h) for h in headers]
