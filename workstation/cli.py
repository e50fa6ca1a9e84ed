"""
Command-line interface for the workstation tool
"""

import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from workstation import __version__

console = Console()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("args", nargs=-1, metavar="[ACTION]")
@click.option(
    "--password",
    envvar="WORKSTATION_PASSWORD",
    default=None,
    help="Password for VNC and sudo when (re)creating the container (default: prompt)",
)
@click.option("--yes", "-y", is_flag=True, help="Do not ask before a reset")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.version_option(version=__version__)
def main(args: tuple[str, ...], password: str | None, yes: bool, verbose: bool) -> None:
    """Provision and control the personal remote desktop workstation.

    ACTION is one of: up, down, reset. Without it an interactive menu is
    shown. If the container does not exist yet it is created and fully
    provisioned regardless of ACTION.
    """
    from workstation.container.runtime import DockerRuntime
    from workstation.core.config import get_settings
    from workstation.core.exceptions import WorkstationError
    from workstation.lifecycle import WorkstationManager
    from workstation.preflight import check_docker_service, container_exists
    from workstation.prompts import Prompter

    configure_logging(verbose)

    try:
        settings = get_settings()
        check_docker_service(settings)

        runtime = DockerRuntime(settings)
        manager = WorkstationManager(
            settings,
            runtime,
            Prompter(console),
            console=console,
            password=password,
            assume_yes=yes,
        )

        if not container_exists(runtime):
            console.print(
                Panel.fit(
                    f"[bold cyan]Workstation[/bold cyan]\n"
                    f"Container '{settings.container_name}' not found, provisioning a new one",
                    border_style="cyan",
                )
            )
            manager.install()
            raise SystemExit(0)

        if len(args) == 1:
            manager.non_interactive(args[0])
        else:
            manager.interactive()
    except WorkstationError as e:
        console.print(f"[bold red]{escape(str(e))}[/bold red]")
        raise SystemExit(e.exit_code) from e


if __name__ == "__main__":
    main()
