"""Create the main Typer CLI app."""

import typer

from xortool.cli.xor import xor_command


def _create_app() -> typer.Typer:
    """Create and configure the xortool Typer app."""
    app = typer.Typer(
        name="xortool",
        help="Apply a reversible repeating-key XOR to a file or a directory tree.",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )
    app.command()(xor_command)
    return app
