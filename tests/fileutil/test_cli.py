"""Tests for the dfget-fileutil command line."""

import json

import pytest

from dfget.fileutil import cli

HELLO_MD5 = "5d41402abc4b2a76b9719d911017c592"


@pytest.fixture(autouse=True)
def _cli_environment(isolated_config, restore_root_logger):
    """Run every CLI test with isolated config and logging."""
    yield


@pytest.fixture
def hello_file(tmp_path):
    path = tmp_path / "a.txt"
    path.write_bytes(b"hello")
    return path


class TestParser:
    """Tests for argument parsing."""

    def test_app_name(self):
        """Test that the application name is derived from the package."""
        assert cli.APP_NAME == "dfget-fileutil"

    def test_command_required(self):
        """Test that a subcommand must be given."""
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])

    def test_every_command_registered(self):
        """Test that each subcommand has a handler."""
        parser = cli.build_parser()
        for name in cli.COMMANDS:
            args = parser.parse_args([name] + ["x"] * (2 if name in ("cp", "mv", "ln") else 1))
            assert args.command == name

    def test_log_level_case_insensitive(self):
        """Test that --log-level accepts lowercase names."""
        args = cli.build_parser().parse_args(["--log-level", "debug", "stat", "x"])
        assert args.log_level == "DEBUG"


class TestCommands:
    """Tests for subcommand behavior and exit codes."""

    def test_md5(self, hello_file, capsys):
        """Test md5sum-style output."""
        assert cli.main(["md5", str(hello_file)]) == 0

        out = capsys.readouterr().out
        assert out == f"{HELLO_MD5}  {hello_file}\n"

    def test_md5_missing_file(self, hello_file, tmp_path, capsys):
        """Test that an unreadable path fails the run but others still print."""
        missing = tmp_path / "missing"

        assert cli.main(["md5", str(missing), str(hello_file)]) == 1

        captured = capsys.readouterr()
        assert HELLO_MD5 in captured.out
        assert str(missing) in captured.err

    def test_mkdir(self, tmp_path):
        target = tmp_path / "a" / "b"

        assert cli.main(["mkdir", str(target)]) == 0
        assert target.is_dir()

    def test_mkdir_on_file(self, hello_file, capsys):
        """Test that errors map to exit code 1 and are logged."""
        assert cli.main(["mkdir", str(hello_file)]) == 1
        assert "not a directory" in capsys.readouterr().err

    def test_rm_best_effort(self, hello_file, tmp_path):
        """Test that rm succeeds even when some paths are missing."""
        assert cli.main(["rm", str(hello_file), str(tmp_path / "missing")]) == 0
        assert not hello_file.exists()

    def test_cp(self, hello_file, tmp_path):
        dst = tmp_path / "copy.txt"

        assert cli.main(["cp", str(hello_file), str(dst)]) == 0
        assert dst.read_bytes() == b"hello"

    def test_cp_existing_destination(self, hello_file, tmp_path):
        dst = tmp_path / "copy.txt"
        dst.write_bytes(b"keep")

        assert cli.main(["cp", str(hello_file), str(dst)]) == 1
        assert dst.read_bytes() == b"keep"

    def test_mv(self, hello_file, tmp_path):
        dst = tmp_path / "moved.txt"

        assert cli.main(["mv", str(hello_file), str(dst)]) == 0
        assert dst.read_bytes() == b"hello"
        assert not hello_file.exists()

    def test_mv_with_md5(self, hello_file, tmp_path):
        """Test that the digest option is accepted in either case."""
        dst = tmp_path / "moved.txt"

        assert cli.main(["mv", str(hello_file), str(dst), "--md5", HELLO_MD5.upper()]) == 0
        assert dst.exists()

    def test_mv_with_wrong_md5(self, hello_file, tmp_path):
        dst = tmp_path / "moved.txt"

        assert cli.main(["mv", str(hello_file), str(dst), "--md5", "0" * 32]) == 1
        assert hello_file.exists()
        assert not dst.exists()

    def test_mv_with_empty_md5(self, hello_file, tmp_path):
        """Test that an empty digest is still checked and refuses the move."""
        dst = tmp_path / "moved.txt"

        assert cli.main(["mv", str(hello_file), str(dst), "--md5", ""]) == 1
        assert hello_file.read_bytes() == b"hello"
        assert not dst.exists()

    def test_ln(self, hello_file, tmp_path):
        link_name = tmp_path / "linked.txt"

        assert cli.main(["ln", str(hello_file), str(link_name)]) == 0
        assert link_name.read_bytes() == b"hello"

    def test_stat(self, hello_file, capsys):
        assert cli.main(["stat", str(hello_file)]) == 0
        assert capsys.readouterr().out.strip() == "exists=True dir=False regular=True"

    def test_stat_missing(self, tmp_path, capsys):
        assert cli.main(["stat", str(tmp_path / "missing")]) == 0
        assert capsys.readouterr().out.strip() == "exists=False dir=False regular=False"


class TestConfiguration:
    """Tests for config file and environment handling in the CLI."""

    def test_buffer_size_from_config_file(self, hello_file, tmp_path, monkeypatch):
        """Test that transfer.buffer_size from --config reaches copy_file."""
        config_file = tmp_path / "defaults.toml"
        config_file.write_text("[transfer]\nbuffer_size = 2\n", encoding='utf-8')
        seen = {}

        def fake_copy(src, dst, buffer_size):
            seen["buffer_size"] = buffer_size

        monkeypatch.setattr(cli, "copy_file", fake_copy)

        assert cli.main(["--config", str(config_file), "cp", str(hello_file), str(tmp_path / "c")]) == 0
        assert seen["buffer_size"] == 2

    def test_buffer_size_from_environment(self, hello_file, tmp_path, monkeypatch):
        """Test that DFGET_FILEUTIL_TRANSFER__BUFFER_SIZE overrides defaults."""
        monkeypatch.setenv("DFGET_FILEUTIL_TRANSFER__BUFFER_SIZE", "4")
        seen = {}

        def fake_copy(src, dst, buffer_size):
            seen["buffer_size"] = buffer_size

        monkeypatch.setattr(cli, "copy_file", fake_copy)

        assert cli.main(["cp", str(hello_file), str(tmp_path / "c")]) == 0
        assert seen["buffer_size"] == 4

    def test_log_file_written(self, hello_file, tmp_path):
        """Test that the configured log file receives JSON records."""
        log_file = tmp_path / "logs" / "fileutil.log"
        config_file = tmp_path / "defaults.toml"
        config_file.write_text(
            f"[logging]\nfile = '{log_file.as_posix()}'\n", encoding='utf-8'
        )

        target = tmp_path / "made"

        assert cli.main(["--config", str(config_file), "mkdir", str(target)]) == 0

        records = [json.loads(line) for line in log_file.read_text(encoding='utf-8').splitlines()]
        assert any(
            r["message"] == f"Directory ready: {target}" and r["command"] == "mkdir"
            for r in records
        )
