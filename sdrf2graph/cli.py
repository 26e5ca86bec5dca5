from __future__ import annotations

import click

from . import sdrf
from .convert_sdrf_to_graph import convert_sdrf_to_graph, get_default_output_path
from .graphviz_renderer import supported_formats


@click.group()
@click.version_option(sdrf.VERSION)
def main():
    pass


@click.command(name="draw")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_path", type=click.Path(dir_okay=False), required=False)
@click.option("--format", "-f", "output_format", type=click.Choice(supported_formats()), default=sdrf.DEFAULT_FORMAT, show_default=True, help="Output format: DOT text or any image format supported by Graphviz (URLs only work in SVG)")
@click.option("--sheet-name", "-s", "sheet_name", default=sdrf.DEFAULT_SHEET_NAME, show_default=True, help="Use sheets whose name contains this pattern; '|' separates alternatives, empty uses all sheets")
@click.option("--layout", "-l", type=click.Choice(sdrf.LAYOUTS), default=sdrf.DEFAULT_LAYOUT, show_default=True)
@click.option("--edge-label/--no-edge-label", "-e/-E", default=True, show_default=True, help="Draw protocols and parameters as labels on the edges")
def draw_entry(input_path: str, output_path: str | None, output_format: str, sheet_name: str, layout: str, edge_label: bool):
    """Draw the investigation design graph of an SDRF spreadsheet.

    INPUT_PATH: XLSX workbook or tab-delimited SDRF file

    OUTPUT_PATH: Output file (optional, defaults to INPUT_PATH.<format>)
    """
    if output_path is None:
        output_path = get_default_output_path(input_path, output_format)
    try:
        convert_sdrf_to_graph(
            input_path,
            output_path,
            output_format=output_format,
            sheet_name=sheet_name,
            layout=layout,
            edge_label=edge_label,
        )
    except ValueError as e:
        raise click.ClickException(str(e))
    click.echo(f"Wrote graph to {output_path}")


@click.command(name="serve")
@click.option("--port", type=int, default=sdrf.SERVER_PORT, show_default=True)
@click.option("--bind-address", "bind_address", default=sdrf.SERVER_BIND_ADDRESS, show_default=True, help="IP address or hostname of the web server")
def serve_entry(port: int, bind_address: str):
    """Run the drawing service as a web application."""
    import uvicorn

    uvicorn.run("sdrf2graph.server:app", host=bind_address, port=port, reload=False, log_level="info")


# Add the commands to the main group
main.add_command(draw_entry)
main.add_command(serve_entry)


if __name__ == "__main__":
    main()
