from __future__ import annotations

import graphviz

from sdrf2graph.graphviz_renderer import render_graph, supported_formats

DOT = 'digraph sample {\n  "Sample|S1" -> "Extract|E1" ;\n}\n'


def test_dot_format_is_passed_through() -> None:
    assert render_graph(DOT, "dot") == DOT.encode("utf-8")


def test_pipes_through_graphviz(monkeypatch) -> None:
    seen = {}

    def fake_pipe(self, format=None, **kwargs):
        seen["source"] = self.source
        seen["format"] = format
        return b"PNG"

    monkeypatch.setattr(graphviz.Source, "pipe", fake_pipe)
    assert render_graph(DOT, "png") == b"PNG"
    assert seen == {"source": DOT, "format": "png"}


def test_graphviz_failure_gives_empty_output(monkeypatch) -> None:
    def failing_pipe(self, format=None, **kwargs):
        raise graphviz.CalledProcessError(1, ["dot", f"-T{format}"])

    monkeypatch.setattr(graphviz.Source, "pipe", failing_pipe)
    assert render_graph(DOT, "svg") == b""


def test_supported_formats() -> None:
    formats = supported_formats()
    assert "dot" in formats
    assert "svg" in formats
    assert "png" in formats
