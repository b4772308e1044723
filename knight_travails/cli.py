"""
CLI interface for knight path finding.

Squares are given in algebraic notation ('a1') or as 'file,rank' pairs ('0,0').
Pairs are not range-checked here so that off-board squares reach the path
finder and are reported as having no path.
"""

import click

from knight_travails.config import OUTPUT_FORMATS, settings
from knight_travails.formats import KnightPath
from knight_travails.squares import Square


def parse_square_arg(ctx: click.Context, param: click.Parameter, value: str) -> Square:
    text = value.strip()
    if "," in text:
        parts = text.split(",")
        try:
            file, rank = (int(p) for p in parts)
        except ValueError as e:
            raise click.BadParameter(f"expected 'file,rank' integers, got {value!r}") from e
        return Square(file, rank)

    try:
        return Square.parse(text)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.command()
@click.argument("start", callback=parse_square_arg)
@click.argument("end", callback=parse_square_arg)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=settings.DEFAULT_OUTPUT_FORMAT,
    show_default=True,
    help="Output format",
)
def main(start: Square, end: Square, output_format: str):
    """Find a shortest knight path between two squares.

    START: Starting square, e.g. 'a1' or '0,0'
    END: Destination square, e.g. 'h8' or '7,7'
    """
    knight_path = KnightPath.solve(start, end)

    if knight_path is None:
        click.echo(f"No path between {start} and {end}: squares must be within a1-h8 (0-7, 0-7)", err=True)
        raise SystemExit(1)

    output_format = output_format.lower()
    if output_format == "json":
        click.echo(knight_path.model_dump_json(indent=2))
    elif output_format == "uci":
        click.echo(" ".join(knight_path.uci_moves))
    else:
        click.echo(knight_path.format_as_text())


if __name__ == "__main__":
    main()
