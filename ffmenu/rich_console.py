"""
Rich console output and interactive prompts
"""

from typing import List, Optional, Sequence
from pathlib import Path
from rich.console import Console
from rich.prompt import Confirm, IntPrompt
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from rich import box

from .file_utils import list_directory, is_hidden

# Global console instance
console = Console()

# Picker entry that moves to the parent directory
PARENT_DIR_LABEL = '..'

class RichOutput:
    """Rich console output and prompt manager"""

    def __init__(self):
        self.console = console

    def clear(self):
        self.console.clear()

    def print_processing_start(self, output_name: str):
        """Print processing start message"""
        self.console.print(f"\n[bold green]Creating:[/bold green] {output_name}")

    def print_command(self, cmd: str):
        self.console.print(Panel(
            cmd,
            title="[bold yellow]FFmpeg Command[/bold yellow]",
            border_style="yellow"
        ))

    def print_error(self, message: str, details: Optional[str] = None):
        """Print error message"""
        self.console.print(f"[bold red]✗ {message}[/bold red]")
        if details:
            self.console.print(f"[red]Details: {details}[/red]")

    def print_info(self, message: str):
        """Print info message"""
        self.console.print(f"[bold cyan]ℹ {message}[/bold cyan]")

    def _print_choices(self, title: str, labels: Sequence[str]):
        table = Table(show_header=False, box=box.SIMPLE, title=f"[bold blue]{escape(title)}[/bold blue]",
                      title_justify="left")
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Choice", style="white")
        for i, label in enumerate(labels, 1):
            table.add_row(str(i), label)
        self.console.print(table)

    def select(self, title: str, labels: Sequence[str], clear: bool = True) -> int:
        """Show a numbered list and return the zero-based index of the choice"""
        if clear:
            self.clear()
        self._print_choices(title, labels)
        choice = IntPrompt.ask(
            "[bold]Select[/bold]",
            choices=[str(i) for i in range(1, len(labels) + 1)],
            show_choices=False,
            console=self.console
        )
        return choice - 1

    def confirm(self, message: str, default: bool = True) -> bool:
        return Confirm.ask(message, default=default, console=self.console)

    def ask_int(self, message: str) -> int:
        self.clear()
        return IntPrompt.ask(message, console=self.console)

    def pick_entry(self, root: Path) -> Path:
        """Choose one entry of root; '..' selects the parent directory"""
        self.clear()
        entries = list_directory(root)
        paths: List[Path] = [root.parent] + entries

        labels = [PARENT_DIR_LABEL]
        for p in entries:
            name = escape(p.name) + ('/' if p.is_dir() else '')
            labels.append(f"[grey50]{name}[/grey50]" if is_hidden(p) else name)

        self._print_choices(f"Choose file ({root})", labels)
        choice = IntPrompt.ask(
            "[bold]Select[/bold]",
            choices=[str(i) for i in range(1, len(labels) + 1)],
            show_choices=False,
            console=self.console
        )
        return paths[choice - 1]

# Global rich output instance
rich_output = RichOutput()
