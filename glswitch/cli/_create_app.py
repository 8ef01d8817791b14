"""Create the main Typer CLI app."""

import typer

from glswitch.api.switch.cmd_set_link import cmd_set_link

from ._handle_stage_result import _handle_stage_result


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Switch the active GLX/OpenGL driver links",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    @app.command(name="set-link")
    def set_link_cmd(
        driver_name: str = typer.Argument(..., help="Driver to activate (e.g. nvidia)"),
        staged: bool = typer.Option(
            False,
            "--staged",
            help="Resolve every vendor library before changing any system link",
        ),
    ) -> None:
        """Point the system GL links at a vendor driver's libraries."""
        _handle_stage_result(cmd_set_link)(driver_name=driver_name, staged=staged)

    return app
