import click
import json
from rich.console import Console
from rich.json import JSON
from rich.markup import escape
from rich.table import Table

from podclaim.core.manifests import load_manifests
from podclaim.resource.pods import resolve_pod_devices
from .utils import handle_resource_errors

console = Console()

manifest_argument = click.argument(
    'manifests', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False)
)


@click.command(name='resolve')
@manifest_argument
@click.option('--json', 'json_output', is_flag=True, help='Output in JSON format.')
@handle_resource_errors
def resolve(manifests, json_output: bool) -> None:
    """Resolves the resource claims of every pod in MANIFESTS to devices."""
    manager, pods = load_manifests(manifests)
    result = {pod.name: resolve_pod_devices(manager, pod) for pod in pods}

    if json_output:
        console.print(JSON(json.dumps(result)))
        return

    if not result:
        console.print("[yellow]No pods found[/yellow]")
        return
    for pod_name, containers in result.items():
        console.print(f"[bold blue]Pod {escape(pod_name)}[/bold blue]")
        for container_name, devices in containers.items():
            listed = ", ".join(devices) if devices else "(none)"
            console.print(f"- [cyan]{escape(container_name)}[/cyan]: {escape(listed)}")


@click.command(name='state')
@manifest_argument
@handle_resource_errors
def state(manifests) -> None:
    """Shows the claim templates and parameters registered from MANIFESTS."""
    manager, _ = load_manifests(manifests)
    manager.log_state()

    table = Table(title="Registered Resources")
    table.add_column("Kind", style="cyan")
    table.add_column("API Version")
    table.add_column("Name", style="green", no_wrap=True)
    for kind, api_version, name in manager.state():
        table.add_row(kind, api_version, name)
    console.print(table)
