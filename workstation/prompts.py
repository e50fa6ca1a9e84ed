"""
Terminal prompts

Interactive password entry, reset confirmation and the action menu.
"""

import click
from rich.console import Console
from rich.table import Table

from workstation.lifecycle import MenuAction


class Prompter:
    """click/rich backed prompts used by the workstation manager"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def ask_password(self) -> str:
        """Hidden password prompt; an empty answer is allowed."""
        return click.prompt(
            "Type a password for VNC and sudo",
            default="",
            show_default=False,
            hide_input=True,
        )

    def confirm_reset(self) -> bool:
        return click.confirm("Do you want to continue? This action is PERMANENT!", default=False)

    def choose_action(self) -> str:
        """Show the menu and return the raw token the user picked."""
        table = Table(title="Workstation", show_header=True, header_style="bold cyan")
        table.add_column("Option", style="cyan")
        table.add_column("Action", style="white")
        for action in MenuAction:
            table.add_row(action.value, action.label)

        self.console.print()
        self.console.print(table)
        return click.prompt(
            "Pick a subsection",
            type=click.Choice([action.value for action in MenuAction]),
        )
