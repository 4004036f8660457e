"""
Utility functions for baller.

Includes:
- Console output helpers and header panel
- Layout summary tree
"""

from pathlib import Path
from rich.console import Console
from rich.panel import Panel
from rich.tree import Tree

# Global console instance
console = Console()

def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{title}[/bold blue]\n[italic]{subtitle}[/italic]", expand=False))

def print_ball_tree(root: Path, max_children: int = 10):
    """
    Print the top level of a ball, expanding `files/` and `hooks/` one level.

    Args:
        root: Ball root directory.
        max_children: Entries shown per expanded directory before eliding.
    """
    tree = Tree(f"[bold green]{root.name}/[/bold green]")
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.is_dir() and not entry.is_symlink():
            branch = tree.add(f"[blue]{entry.name}/[/blue]")
            if entry.name in ("files", "hooks"):
                children = sorted(entry.iterdir(), key=lambda p: p.name)
                for child in children[:max_children]:
                    branch.add(child.name)
                if len(children) > max_children:
                    branch.add(f"[italic]... and {len(children) - max_children} more[/italic]")
        else:
            tree.add(entry.name)
    console.print(tree)

def print_info(msg: str):
    console.print(f"[dim]\\[INFO][/dim] {msg}")

def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {msg}")

def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {msg}")

def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {msg}")
