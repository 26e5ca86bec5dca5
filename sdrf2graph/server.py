import json
import logging
import os
import shutil
import tempfile
from pathlib import Path

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import FileResponse, PlainTextResponse, Response

from . import sdrf
from .convert_sdrf_to_graph import sdrf_to_dot
from .graphviz_renderer import render_graph

logger = logging.getLogger(__name__)

app = FastAPI(title="sdrf2graph API", version=sdrf.VERSION)

TEMP_PREFIX = "sdrf2graph_"
EXAMPLE_SDRF = Path(__file__).parent / "data" / "example.sdrf.txt"


def _stats_headers(stats: dict) -> dict:
    return {
        "X-Stats-Sheets": str(stats['sheets']),
        "X-Stats-Nodes": str(stats['nodes']),
        "X-Stats-Edges": str(stats['edges']),
        "X-Stats-Dangling-Chains": str(stats['dangling_chains']),
        "X-Warnings": json.dumps(stats['warnings']),
    }


@app.post("/sdrf")
def api_draw(
    filename: UploadFile = File(...),  # field name kept from the HTML form
    output_format: str = Form(sdrf.SERVER_FORMAT, alias="format"),
    sheet_name: str = Form(sdrf.DEFAULT_SHEET_NAME),
    edge_label: bool = Form(True),
    layout: str = Form(sdrf.SERVER_LAYOUT),
):
    suffix = Path(filename.filename or "").suffix or sdrf.XLSX_SUFFIXES[0]
    buffer = tempfile.NamedTemporaryFile(prefix=TEMP_PREFIX, suffix=suffix, delete=False)
    temp_in = buffer.name

    try:
        with buffer:
            shutil.copyfileobj(filename.file, buffer)
        dot_text, stats = sdrf_to_dot(temp_in, sheet_name=sheet_name, layout=layout, edge_label=edge_label)
        headers = _stats_headers(stats)
        if output_format == sdrf.FORMAT_DOT:
            return PlainTextResponse(dot_text, headers=headers)
        body = render_graph(dot_text, output_format)
        return Response(body, media_type=sdrf.content_type_for(output_format), headers=headers)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Drawing %s failed", filename.filename)
        raise HTTPException(status_code=500, detail=str(e))
    finally:
        if os.path.exists(temp_in):
            os.remove(temp_in)


@app.get("/")
async def root():
    return {"message": "sdrf2graph API is running. POST an SDRF workbook to /sdrf, get a sample from /example.sdrf.txt, or go to /docs for the interactive UI."}


@app.get("/example.sdrf.txt")
async def example_sdrf():
    return FileResponse(EXAMPLE_SDRF, media_type="text/tab-separated-values", filename=EXAMPLE_SDRF.name)
