"""The xortool command."""

import time
from pathlib import Path
from typing import Annotated

import typer

from xortool.api.config.get_home_dir import get_home_dir
from xortool.api.config.get_package_version import get_package_version
from xortool.api.config.XorConfig import XorConfig
from xortool.api.key.KeyParseError import KeyParseError
from xortool.api.key.parse_hex_key import parse_hex_key
from xortool.api.run.run_xor import run_xor
from xortool.api.XorToolError import XorToolError
from xortool.cli.display.CLIDisplay import CLIDisplay
from xortool.utils.logger import configure_logging, get_logger

logger = get_logger("cli")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"xortool {get_package_version()}")
        raise typer.Exit()


def xor_command(
    input_path: Annotated[Path, typer.Argument(metavar="INPUT", help="Input file or directory path")],
    key: Annotated[str, typer.Option("--key", "-k", help="Key in hex format (e.g., 1a2b3c4d or 0xFF)")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Process subdirectories recursively")
    ] = False,
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit"),
    ] = False,
) -> None:
    """XOR every byte of INPUT with KEY and write the result under a reserved output directory.

    A file F in directory D is written to D/xor/F. Running the command again on
    the output with the same key restores the original bytes.
    """
    display = CLIDisplay()

    try:
        config = XorConfig.load()
    except ValueError as e:
        display.error(str(e))
        raise typer.Exit(1) from None

    configure_logging(get_home_dir(), config.log_level)

    try:
        parsed_key = parse_hex_key(key)
    except KeyParseError as e:
        logger.error(str(e))
        display.error(str(e))
        raise typer.Exit(1) from None

    start = time.monotonic()
    target = display.render_target()
    exit_code = 0
    try:
        summary = run_xor(input_path, parsed_key, recursive, config, target, display=display)
        logger.info(f"Transformed {len(summary.files)} file(s), {summary.total_bytes} bytes from {summary.input_path}")
    except XorToolError as e:
        target.close()
        logger.error(str(e))
        display.error(str(e))
        exit_code = 1
    except KeyboardInterrupt:
        target.close()
        logger.error("Interrupted")
        display.error("Interrupted")
        exit_code = 130

    display.info("")
    display.info(f"Total processing time: {time.monotonic() - start:.1f}s")
    if exit_code:
        raise typer.Exit(exit_code)
