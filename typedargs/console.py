# typedargs — typed command-line argument engine — MIT Licensed
"""Global console instance for typedargs rendering."""
from rich.console import Console

console = Console()
