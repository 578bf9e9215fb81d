"""
Centralized UI constants for the rich tree view.
"""

SYMBOLS = {
    "leaf": "🍃 ",
    "composite": "🌿 ",
    "success": "[bold green]✓[/bold green] ",
    "error": "[bold red]![/bold red] ",
}

STYLE = {
    "header": "bold cyan",
    "leaf": "cyan",
    "composite": "magenta",
    "dim": "dim",
    "error": "red",
    "success": "green",
}
