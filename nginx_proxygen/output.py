"""
Rich-powered console output for the generator

Provides the welcome banner and status lines. The generated configuration is
never routed through this console.
"""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .utils import Colors

# file is left unset so the console always writes to the current sys.stdout
console = Console(force_terminal=None, legacy_windows=True, highlight=False)


def disable_color():
    """Turn off styling for both the rich console and plain ANSI output"""
    console.no_color = True
    Colors.disable()


def print_success(message: str):
    """Print a success message"""
    console.print(Text(message, style="green"))


def banner_panel(version: str) -> Panel:
    """Create the welcome banner"""
    content = Text.assemble(
        Text("Welcome to NGINX reverse proxy configuration generator", style="bold"),
        "\n",
        Text("Written by @nepgeargo", style="dim"),
        "\n",
        Text(f"nginx-proxygen {version}", style="dim"),
    )
    return Panel(content, border_style="cyan", expand=False)


def print_banner(version: str):
    """Print the welcome banner"""
    console.print(banner_panel(version))
    console.print()
