"""CLI - main entry point."""

import sys

PROG = "gl-driver-switch"
USAGE = f"Usage: {PROG} set-link [name]"
COMMANDS = ("set-link",)

# Global options that consume the following argument
_VALUE_OPTIONS = ("--display", "-d")


def _positional_args(argv: list[str]) -> list[str]:
    positional = []
    skip_next = False
    for arg in argv:
        if skip_next:
            skip_next = False
        elif arg in _VALUE_OPTIONS:
            skip_next = True
        elif not arg.startswith("-"):
            positional.append(arg)
    return positional


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from glswitch.api.switch.require_root import require_root
    from glswitch.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from glswitch.utils.get_package_version import get_package_version

        print(f"{PROG} {get_package_version()}")
        return 0

    if "-h" not in argv and "--help" not in argv:
        positional = _positional_args(argv)
        if len(positional) < 2:
            typer.echo(USAGE, err=True)
            return 1
        try:
            require_root()
        except PermissionError as e:
            typer.echo(str(e), err=True)
            return 1
        if positional[0] not in COMMANDS:
            typer.echo(f"Unknown command: {positional[0]}", err=True)
            return 1

    app = _create_app()
    try:
        rv = app(argv, prog_name=PROG, standalone_mode=False)
        return rv if isinstance(rv, int) else 0
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except click.exceptions.Abort:
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
