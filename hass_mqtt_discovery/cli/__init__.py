"""Home Assistant MQTT discovery CLI application."""

from rich import print as console
from typer import Typer

from hass_mqtt_discovery.__about__ import __version__
from hass_mqtt_discovery.cli.payload import group as payload_group

app = Typer(help="Home Assistant MQTT Discovery CLI Application")
app.add_typer(payload_group)


@app.command()
def version() -> None:
    """Output the current version."""
    console(f"Version: [bold]{__version__}[/bold]")
