import functools
import sys

from rich.console import Console
from rich.markup import escape

from podclaim.resource.errors import ResourceClaimError

console = Console()


def handle_resource_errors(func):
    """Decorator to render resource claim failures and exit non-zero."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            console.print("\n[yellow]Operation cancelled by user[/yellow]")
            sys.exit(1)
        except ResourceClaimError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            sys.exit(1)
    return wrapper
