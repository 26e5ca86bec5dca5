from __future__ import annotations

import logging

import graphviz

from . import sdrf

logger = logging.getLogger(__name__)


def supported_formats() -> list[str]:
    return sorted(set(graphviz.FORMATS) | {sdrf.FORMAT_DOT})


def render_graph(dot_text: str, output_format: str) -> bytes:
    """Pipe DOT text through the Graphviz ``dot`` executable.

    A non-zero exit of Graphviz gives empty output; a missing executable
    raises ``graphviz.ExecutableNotFound``.
    """
    if output_format == sdrf.FORMAT_DOT:
        return dot_text.encode("utf-8")
    source = graphviz.Source(dot_text, engine="dot")
    try:
        return source.pipe(format=output_format)
    except graphviz.CalledProcessError as e:
        logger.warning("Graphviz exited with status %s while rendering %s", e.returncode, output_format)
        return b""
