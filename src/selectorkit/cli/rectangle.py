"""CLI command: selectorkit rectangle -- show a rectangle's area."""

from __future__ import annotations

import click

from selectorkit.config import SelectorkitConfig
from selectorkit.model.rectangle import Rectangle
from selectorkit.serialization import get_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print as a JSON object")
@click.pass_obj
def rectangle(
    config: SelectorkitConfig | None, width: float, height: float, as_json: bool
) -> None:
    """Print WIDTH, HEIGHT and the area of the rectangle they describe."""
    rect = Rectangle(_number(width), _number(height))
    if as_json:
        payload = {"width": rect.width, "height": rect.height, "area": rect.area()}
        click.echo(get_json(payload, config))
        return
    click.echo(f"Width:  {rect.width}")
    click.echo(f"Height: {rect.height}")
    click.echo(f"Area:   {rect.area()}")


def _number(value: float) -> int | float:
    """Drop the fractional part of whole numbers so 10.0 prints as 10."""
    return int(value) if value.is_integer() else value
