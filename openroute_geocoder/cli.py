"""Command line entry point: `openroute-geocoder geocode|reverse`."""

from __future__ import annotations

from typing import Optional

import typer

from .config import get_config
from .container import create_geocoder
from .domain.errors import GeocoderError
from .domain.models import Address, AddressCollection
from .observability import configure_logging

app = typer.Typer(no_args_is_help=True, help="Geocode addresses with openrouteservice.")


def format_address(address: Address) -> str:
    """Render one address as a single printable line."""
    street = " ".join(
        part for part in (address.street_number, address.street_name) if part
    )
    town = " ".join(part for part in (address.postal_code, address.locality) if part)
    country = address.country.name if address.country else None
    label = ", ".join(part for part in (street, town, country) if part) or "-"

    line = f"{address.coordinates.latitude:.6f},{address.coordinates.longitude:.6f}  {label}"
    if address.country and address.country.code:
        line += f" [{address.country.code}]"
    return line


def _print_collection(addresses: AddressCollection) -> None:
    if addresses.is_empty:
        typer.echo("No results.")
        return
    for address in addresses:
        typer.echo(format_address(address))


@app.callback()
def main(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(
        None, "--api-key", help="API key (defaults to ORS_GEO_API_KEY)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    configure_logging(get_config().observability, level="DEBUG" if verbose else None)
    ctx.obj = {"api_key": api_key}


@app.command()
def geocode(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Free-text address."),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1),
    locale: Optional[str] = typer.Option(None, "--locale", help="Result language, e.g. 'de'."),
    country: Optional[str] = typer.Option(None, "--country", help="Restrict to a country code."),
) -> None:
    """Resolve an address to coordinates."""
    try:
        geocoder = create_geocoder(api_key=ctx.obj["api_key"])
        addresses = geocoder.geocode(text, limit=limit, locale=locale, country=country)
    except GeocoderError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _print_collection(addresses)


@app.command()
def reverse(
    ctx: typer.Context,
    lat: float = typer.Option(..., "--lat", min=-90, max=90),
    lon: float = typer.Option(..., "--lon", min=-180, max=180),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1),
    locale: Optional[str] = typer.Option(None, "--locale"),
) -> None:
    """Resolve coordinates to addresses."""
    try:
        geocoder = create_geocoder(api_key=ctx.obj["api_key"])
        addresses = geocoder.reverse_geocode(lat, lon, limit=limit, locale=locale)
    except GeocoderError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _print_collection(addresses)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
