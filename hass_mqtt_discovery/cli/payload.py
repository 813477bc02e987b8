"""CLI commands for discovery payloads"""

from rich import print as console
from rich import print_json
from rich.markup import escape
from typer import Exit, FileBinaryRead, Typer, echo

from hass_mqtt_discovery.entity import COMPONENTS
from hass_mqtt_discovery.lib.render import RenderError, load_config, render_payloads

group = Typer(name="payload", help="Commands for discovery payloads")


@group.command()
def components() -> None:
    """List the supported components."""
    for name in sorted(COMPONENTS):
        console(name)


@group.command()
def render(config_file: FileBinaryRead, pretty: bool = False) -> None:  # noqa:FBT001,FBT002
    """Render the discovery payload of every entity in the configuration file."""
    try:
        payloads = render_payloads(load_config(config_file))
    except RenderError as e:
        console(f":x: [logging.level.error]{escape(str(e))}")
        raise Exit(code=1) from e
    for payload in payloads:
        if pretty:
            print_json(payload)
        else:
            echo(payload)
