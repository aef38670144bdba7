"""Config Typer app factory."""

import typer

from goagent.api.config.cmd_init import cmd_init
from goagent.api.config.cmd_show import cmd_show
from goagent.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration file operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Config operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument("", help="Section to show (service, install, log); all when omitted"),
    ) -> None:
        """Show the effective configuration."""
        _handle_stage_result(cmd_show)(section=section)

    @app.command(name="init")
    def init_cmd(
        force: bool = typer.Option(False, "--force", help="Overwrite an existing configuration file"),
    ) -> None:
        """Write a default configuration file."""
        _handle_stage_result(cmd_init)(force=force)

    return app
