"""CLI interface for hexworld."""

import logging
import random
from collections import Counter
from typing import Optional

import click

from hexworld import config
from hexworld.generators import expected_frequencies
from hexworld.hex_coords import coords_to_key, hexes_in_radius, key_to_coords
from hexworld.rng import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN
from hexworld.schemas import CubeCoord, HexCoord, Shape
from hexworld.storage import HexMap

logger = logging.getLogger(__name__)

INT32 = click.IntRange(INT32_MIN, INT32_MAX)
INT64 = click.IntRange(INT64_MIN, INT64_MAX)

seed_option = click.option(
    "--seed", default=config.WORLD_SEED, type=INT64, help="World seed"
)


@click.group()
@click.option("--log-level", default=config.LOG_LEVEL, help="Logging level")
def cli(log_level: str):
    """Hexworld Location Generator"""
    logging.basicConfig(level=log_level.upper(), format=config.LOG_FORMAT)


@cli.command()
@click.option("--seed", default=None, type=INT64, help="World seed")
@click.option("--host", default=None, help="Bind address")
@click.option("--port", default=None, type=int, help="Bind port")
@click.option("--ui", default=None, help="HTML file served at /")
@click.option("--config", "config_path", default=None, help="TOML config file")
def serve(
    seed: Optional[int],
    host: Optional[str],
    port: Optional[int],
    ui: Optional[str],
    config_path: Optional[str],
):
    """Run the HTTP server."""
    import uvicorn

    from hexworld.api import create_app

    try:
        server_config = config.load_server_config(config_path)
    except (OSError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint="--config")

    seed = server_config.seed if seed is None else seed
    host = server_config.host if host is None else host
    port = server_config.port if port is None else port
    ui_path = server_config.ui_path if ui is None else ui

    try:
        hex_map = HexMap(seed, cache=server_config.cache)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="seed")
    app = create_app(hex_map, ui_path=ui_path)

    logger.info(f"Serving world seed {seed} on {host}:{port}")
    uvicorn.run(app, host=host, port=port)


@cli.command()
@click.argument("q", type=INT32)
@click.argument("r", type=INT32)
@seed_option
def locate(q: int, r: int, seed: int):
    """Show the shape at axial coordinate Q R."""
    loc = HexMap(seed).get(HexCoord(q=q, r=r))
    click.echo(f"{coords_to_key(loc.coord)} {loc.shape.name}")


@cli.command()
@click.argument("x", type=INT32)
@click.argument("y", type=INT32)
@click.argument("z", type=INT32)
@seed_option
def cube(x: int, y: int, z: int, seed: int):
    """Show the derived seed at cubic coordinate X Y Z."""
    if x + y + z != 0:
        raise click.BadParameter(f"x + y + z must be 0, got {x + y + z}")
    loc = HexMap.cubic(seed).get(CubeCoord(x=x, y=y, z=z))
    click.echo(f"{x},{y},{z} {loc.seed}")


@cli.command()
@seed_option
@click.option("--radius", default=5, type=click.IntRange(min=0), help="Radius in hexes")
@click.option("--center", default="0,0", help="Center hex as q,r")
def region(seed: int, radius: int, center: str):
    """List the shapes within a radius of a hex."""
    hex_map = HexMap(seed)
    locations = hex_map.get_many(hexes_in_radius(key_to_coords(center), radius))

    for loc in locations:
        if loc.shape != Shape.EMPTY:
            click.echo(f"{coords_to_key(loc.coord)} {loc.shape.name}")

    totals = Counter(loc.shape for loc in locations)
    click.echo(f"Hexes: {len(locations)}")
    for shape in Shape:
        click.echo(f"  {shape.name}: {totals[shape]}")


@cli.command()
@seed_option
@click.option("--count", default=100_000, type=click.IntRange(min=1), help="Coordinates to sample")
@click.option("--rng-seed", default=1, type=int, help="Seed for picking coordinates")
def sample(seed: int, count: int, rng_seed: int):
    """Compare sampled shape frequencies with the designed rates."""
    rng = random.Random(rng_seed)
    hex_map = HexMap(seed, cache=False)

    totals: Counter = Counter()
    for _ in range(count):
        coord = HexCoord(
            q=rng.randint(INT32_MIN, INT32_MAX),
            r=rng.randint(INT32_MIN, INT32_MAX),
        )
        totals[hex_map.get(coord).shape] += 1

    expected = expected_frequencies()
    click.echo(f"Sampled {count} hexes (world seed {seed}):")
    for shape in Shape:
        click.echo(
            f"  {shape.name}: {totals[shape] / count:.5f} "
            f"(expected {expected[shape]:.5f})"
        )


@cli.command()
@click.argument("coords", nargs=-1, required=True)
@click.option("--url", default=None, help="Server base URL")
def fetch(coords: tuple[str, ...], url: Optional[str]):
    """Fetch shapes for COORDS (each q,r) from a running server."""
    from hexworld.client import LocationClient

    try:
        hex_coords = [key_to_coords(key) for key in coords]
    except ValueError as e:
        raise click.BadParameter(f"Coordinates must look like q,r: {e}")

    with LocationClient(base_url=url) as client:
        locations = client.get_locations(hex_coords)

    for loc in locations:
        click.echo(f"{coords_to_key(loc.coord)} {loc.shape.name}")


if __name__ == "__main__":
    cli()
