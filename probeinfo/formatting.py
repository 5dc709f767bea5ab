"""Rich-based console formatting utilities"""

from typing import Mapping

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .ffprobe.parser import ProbeResult

console = Console()

def print_error(message: str) -> None:
    """Print an error message in bold red."""
    text = Text("✗ ", style="bold red") + Text(message, style="bold")
    console.print(text)

def print_header(title: str, width: int = 80) -> None:
    """Print a decorative header."""
    separator = Text("=" * width, style="bold blue")
    padding = (width - len(title)) // 2
    title_line = " " * padding + title
    console.print(separator)
    console.print(title_line, style="bold blue")
    console.print(separator)

def options_table(title: str, options: Mapping[str, str]) -> Table:
    """Build a two-column table of option names and raw values."""
    table = Table(title=title, title_justify="left", show_header=True, header_style="bold")
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Value")
    for option, value in options.items():
        table.add_row(option, value)
    return table

def print_result(result: ProbeResult) -> None:
    """Print the format block and every stream as tables."""
    console.print(options_table("Format", result.format))
    for index, stream in enumerate(result.streams):
        console.print(options_table(f"Stream {index}", stream))
