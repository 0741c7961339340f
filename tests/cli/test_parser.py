"""
Tests for CLI argument parser and commands.
"""

import json
from pathlib import Path

import pytest
import yaml

from ccresolve.cli.parser import CLI

BUILD = "x86_64-unknown-linux-gnu"


@pytest.fixture
def config_file(tmp_path) -> Path:
    """Configuration with explicit compilers so output is environment-independent."""
    path = tmp_path / "ccresolve.yaml"
    path.write_text(
        f"""
version: 1
build: {BUILD}
targets: [x86_64-pc-windows-msvc]
target:
  {BUILD}:
    cc: /opt/tc/bin/x86_64-linux-gnu-gcc
    cxx: /opt/tc/bin/x86_64-linux-gnu-g++
  x86_64-pc-windows-msvc:
    cc: cl.exe
"""
    )
    return path


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_creation(self):
        """Test CLI can be created."""
        cli = CLI()
        assert cli is not None
        assert cli.parser is not None

    def test_no_command_shows_help(self, capsys):
        """Test that running without command shows help."""
        cli = CLI()
        result = cli.run([])

        assert result == 1
        captured = capsys.readouterr()
        assert "usage:" in captured.out.lower() or "usage:" in captured.err.lower()

    def test_version_flag(self, capsys):
        """Test --version flag."""
        cli = CLI()

        with pytest.raises(SystemExit) as exc_info:
            cli.run(["--version"])

        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "ccresolve" in captured.out


class TestArgumentParsing:
    """Test subcommand parsing."""

    def test_resolve_defaults(self):
        args = CLI().parse_args(["resolve"])

        assert args.command == "resolve"
        assert args.format == "text"
        assert args.jobs == 1
        assert args.targets == []
        assert args.hosts == []

    def test_repeatable_triples(self):
        args = CLI().parse_args(
            [
                "--build",
                BUILD,
                "targets",
                "--target",
                "a-b-c",
                "--target",
                "d-e-f",
                "--host",
                "g-h-i",
            ]
        )

        assert args.build == BUILD
        assert args.targets == ["a-b-c", "d-e-f"]
        assert args.hosts == ["g-h-i"]

    def test_invalid_format(self):
        with pytest.raises(SystemExit):
            CLI().parse_args(["resolve", "--format", "xml"])


class TestResolveCommand:
    """Test the resolve command end to end."""

    def test_json_output(self, config_file, capsys, monkeypatch):
        monkeypatch.setenv("AR", "/env/ar")

        result = CLI().run(
            ["--config", str(config_file), "resolve", "--format", "json"]
        )

        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["cc"][BUILD]["path"] == "/opt/tc/bin/x86_64-linux-gnu-gcc"
        assert data["cc"][BUILD]["args"] == ["-O0"]
        assert data["cxx"][BUILD]["path"] == "/opt/tc/bin/x86_64-linux-gnu-g++"
        assert data["cc"]["x86_64-pc-windows-msvc"]["path"] == "cl.exe"
        assert "x86_64-pc-windows-msvc" not in data["cxx"]
        assert data["ar"] == {BUILD: "/env/ar", "x86_64-pc-windows-msvc": "/env/ar"}

    def test_yaml_output(self, config_file, capsys, monkeypatch):
        monkeypatch.delenv("AR", raising=False)

        result = CLI().run(
            ["--config", str(config_file), "resolve", "--format", "yaml"]
        )

        assert result == 0
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["ar"][BUILD] == "/opt/tc/bin/x86_64-linux-gnu-ar"
        assert data["ar"]["x86_64-pc-windows-msvc"] is None

    def test_text_output(self, config_file, capsys, monkeypatch):
        monkeypatch.delenv("AR", raising=False)

        result = CLI().run(["--config", str(config_file), "resolve"])

        assert result == 0
        out = capsys.readouterr().out
        assert "CC   /opt/tc/bin/x86_64-linux-gnu-gcc" in out
        assert "AR   (none)" in out

    def test_missing_required_config(self, tmp_path, capsys):
        result = CLI().run(["--config", str(tmp_path / "nope.yaml"), "resolve"])

        assert result == 1

    def test_invalid_config(self, tmp_path):
        bad = tmp_path / "ccresolve.yaml"
        bad.write_text("version: 3\n")

        assert CLI().run(["--config", str(bad), "resolve"]) == 1


class TestTargetsCommand:
    """Test the targets command."""

    def test_lists_sets(self, config_file, capsys):
        result = CLI().run(
            [
                "--config",
                str(config_file),
                "targets",
                "--host",
                "aarch64-unknown-linux-gnu",
            ]
        )

        assert result == 0
        out = capsys.readouterr().out
        c_section, cxx_section = out.split("C++ targets:")
        assert "x86_64-pc-windows-msvc" in c_section
        assert "aarch64-unknown-linux-gnu" in c_section
        assert "x86_64-pc-windows-msvc" not in cxx_section
        assert "aarch64-unknown-linux-gnu" in cxx_section
        assert BUILD in cxx_section


class TestEnvCommand:
    """Test the env command."""

    def test_exports_for_one_triple(self, config_file, capsys, monkeypatch):
        monkeypatch.delenv("AR", raising=False)

        result = CLI().run(
            ["--config", str(config_file), "env", "--only", BUILD]
        )

        assert result == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "export CC_x86_64_unknown_linux_gnu=/opt/tc/bin/x86_64-linux-gnu-gcc",
            "export CXX_x86_64_unknown_linux_gnu=/opt/tc/bin/x86_64-linux-gnu-g++",
            "export AR_x86_64_unknown_linux_gnu=/opt/tc/bin/x86_64-linux-gnu-ar",
        ]

    def test_unknown_triple(self, config_file):
        result = CLI().run(
            ["--config", str(config_file), "env", "--only", "sparc-unknown-linux-gnu"]
        )

        assert result == 1
