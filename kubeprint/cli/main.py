"""Main CLI interface using Typer."""

import typer
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..core import UpgradeablePrinter
from ..k8s import DEFAULT_KUBECONFIG_PATH, K8sClient, resolve_kubeconfig_path
from ..utils.logger import get_logger, set_verbose

# Create CLI app
app = typer.Typer(
    name="kubeprint",
    help="Inspect kubeadm cluster configuration ahead of an upgrade",
    add_completion=True,
)
config_app = typer.Typer(help="Manage configuration for a kubeadm cluster")
print_app = typer.Typer(help="Print configuration")

app.add_typer(config_app, name="config")
config_app.add_typer(print_app, name="print")

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Inspect kubeadm cluster configuration ahead of an upgrade."""
    set_verbose(verbose)


@config_app.callback()
def config(
    ctx: typer.Context,
    kubeconfig: str = typer.Option(
        DEFAULT_KUBECONFIG_PATH,
        "--kubeconfig",
        help="The kubeconfig file to use when talking to the cluster. "
        "If the flag is not set, the KUBECONFIG environment variable is searched.",
    ),
):
    """Manage configuration for a kubeadm cluster."""
    ctx.obj = resolve_kubeconfig_path(kubeconfig)
    logger.debug(f"Using kubeconfig {ctx.obj}")


@print_app.callback()
def print_config():
    """Print configuration."""


@print_app.command()
def upgradeable(ctx: typer.Context):
    """Print component configs that need manual upgrading."""
    kubeconfig_path = ctx.obj
    try:
        client = K8sClient.from_kubeconfig(kubeconfig_path)
        UpgradeablePrinter().print(client, typer.get_binary_stream("stdout"))
    except Exception as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]kubeprint[/bold] version {__version__}")
    console.print("Prints kubeadm component configs that need manual upgrading")


if __name__ == "__main__":
    app()
