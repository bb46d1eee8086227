"""Integration tests for the xortool command line."""

import json

import pytest
from typer.testing import CliRunner

from xortool.api.config.get_package_version import get_package_version
from xortool.cli import main
from xortool.cli._create_app import _create_app
from xortool.cli.display.CLIDisplay import CLIDisplay

pytestmark = pytest.mark.timeout(60)

runner = CliRunner()


@pytest.fixture
def app():
    return _create_app()


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "f.bin").write_bytes(bytes([0x00, 0x01, 0xFF]))
    (tmp_path / "child").mkdir()
    (tmp_path / "child" / "g.bin").write_bytes(b"\x10\x20")
    return tmp_path.resolve()


def test_single_file_round_trip(app, data_dir):
    result = runner.invoke(app, [str(data_dir / "f.bin"), "--key", "ff"])

    assert result.exit_code == 0, result.output
    output = data_dir / "xor" / "f.bin"
    assert output.read_bytes() == bytes([0xFF, 0xFE, 0x00])
    assert "Completed" in result.output
    assert "Total processing time:" in result.output

    again = runner.invoke(app, [str(output), "-k", "0xFF"])

    assert again.exit_code == 0, again.output
    assert (data_dir / "xor" / "xor" / "f.bin").read_bytes() == bytes([0x00, 0x01, 0xFF])


def test_directory_non_recursive(app, data_dir):
    result = runner.invoke(app, [str(data_dir), "-k", "01"])

    assert result.exit_code == 0, result.output
    assert (data_dir / "xor" / "f.bin").exists()
    assert not (data_dir / "child" / "xor").exists()
    assert result.output.count("Completed") == 1


def test_directory_recursive(app, data_dir):
    result = runner.invoke(app, [str(data_dir), "-k", "01", "--recursive"])

    assert result.exit_code == 0, result.output
    assert (data_dir / "child" / "xor" / "g.bin").read_bytes() == b"\x11\x21"
    assert result.output.count("Completed") == 2


def test_rerun_skips_previous_output(app, data_dir):
    runner.invoke(app, [str(data_dir), "-k", "01", "-r"])
    result = runner.invoke(app, [str(data_dir), "-k", "01", "-r"])

    assert result.exit_code == 0, result.output
    assert result.output.count("Completed") == 3
    assert not (data_dir / "xor" / "xor").exists()
    assert (data_dir / "child" / "xor" / "xor" / "g.bin").read_bytes() == b"\x10\x20"


@pytest.mark.parametrize("key", ["xyz", "0xgh", "abc"])
def test_bad_key_fails_before_touching_files(app, data_dir, key):
    result = runner.invoke(app, [str(data_dir), "-k", key])

    assert result.exit_code == 1
    assert "Invalid hex key" in result.output
    assert "Total processing time" not in result.output
    assert not (data_dir / "xor").exists()


def test_missing_input_fails(app, tmp_path):
    result = runner.invoke(app, [str(tmp_path / "nope.bin"), "-k", "ff"])

    assert result.exit_code == 1
    assert "nope.bin" in result.output
    assert "Total processing time:" in result.output


def test_io_failure_fails(app, data_dir):
    (data_dir / "xor").write_bytes(b"")

    result = runner.invoke(app, [str(data_dir / "f.bin"), "-k", "ff"])

    assert result.exit_code == 1
    assert "Failed to create directory" in result.output
    assert "Total processing time:" in result.output


def test_missing_key_is_usage_error(app, data_dir):
    result = runner.invoke(app, [str(data_dir)])

    assert result.exit_code == 2


def test_invalid_config_fails(app, data_dir, xortool_home):
    (xortool_home / "config.json").write_text(json.dumps({"chunk_size": 0}))

    result = runner.invoke(app, [str(data_dir), "-k", "ff"])

    assert result.exit_code == 1
    assert "chunk_size" in result.output


def test_config_output_dir_name(app, data_dir, xortool_home):
    (xortool_home / "config.json").write_text(json.dumps({"output_dir_name": "enc"}))

    result = runner.invoke(app, [str(data_dir / "f.bin"), "-k", "ff"])

    assert result.exit_code == 0, result.output
    assert (data_dir / "enc" / "f.bin").exists()


def test_version(app):
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == f"xortool {get_package_version()}"


def test_main_returns_exit_codes(data_dir, capsys):
    assert main([str(data_dir / "f.bin"), "-k", "ff"]) == 0
    assert main([str(data_dir / "f.bin"), "-k", "f"]) == 1
    assert main(["--version"]) == 0
    assert "xortool" in capsys.readouterr().out


def test_main_missing_key_returns_usage_code(data_dir, capsys):
    assert main([str(data_dir / "f.bin")]) == 2
    assert "--key" in capsys.readouterr().err
    assert not (data_dir / "xor").exists()


@pytest.fixture
def interrupted_run(monkeypatch, inline_target):
    """Make the run stop with Ctrl-C and hand the CLI a recording progress target."""

    def interrupt(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr("xortool.cli.xor.run_xor", interrupt)
    monkeypatch.setattr(CLIDisplay, "render_target", lambda self: inline_target)
    return inline_target


def test_interrupt_exits_130(app, data_dir, interrupted_run):
    result = runner.invoke(app, [str(data_dir / "f.bin"), "-k", "ff"])

    assert result.exit_code == 130
    assert interrupted_run.closed
    assert "Interrupted" in result.output
    assert "Total processing time:" in result.output


def test_main_interrupt_returns_130(data_dir, interrupted_run):
    assert main([str(data_dir / "f.bin"), "-k", "ff"]) == 130
    assert interrupted_run.closed
