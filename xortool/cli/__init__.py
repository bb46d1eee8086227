"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Runs the app in standalone mode so typer reports usage errors itself,
    and turns the resulting ``SystemExit`` into a return code.
    """
    from xortool.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        app(args=argv, prog_name="xortool")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
