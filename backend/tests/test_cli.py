"""
Bills Demo Backend: Bill Formatter CLI Tests
============================================

What:  The end-to-end formatter flow with simulated stdin.
How:   Input comes from io.StringIO, output is captured with capsys, and the
       working directory is a tmp_path so bill.txt lands there.
"""

import io
import os

import pytest

from app import cli
from app.models.bill import new_bill
from app.services.file_service import BillFileService


class TestGetInput:

    def test_prints_prompt_and_strips(self, capsys):
        value = cli.get_input("Enter new name: ", io.StringIO("  Carol  \n"))
        assert value == "Carol"
        assert capsys.readouterr().out == "Enter new name: "

    def test_eof_gives_empty_string(self, capsys):
        assert cli.get_input("> ", io.StringIO("")) == ""


class TestMain:

    def test_writes_second_rendering_to_bill_txt(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        exit_code = cli.main(stdin=io.StringIO("Carol\n"))

        assert exit_code == 0
        written = (tmp_path / "bill.txt").read_text(encoding="utf-8")
        assert written == new_bill("Carol").format()

    def test_stdout_shows_both_renderings(self, tmp_path, capsys):
        cli.main(stdin=io.StringIO("Carol\n"), writer=BillFileService(tmp_path / "out.txt"))

        out = capsys.readouterr().out
        first = "bill: " + new_bill("old name").format() + "\n"
        second = "bill: " + new_bill("Carol").format() + "\n"
        assert out == first + "Enter new name: " + second

    def test_unwritable_target_reports_and_exits_zero(self, tmp_path, capsys):
        # A directory cannot be opened as a file
        exit_code = cli.main(stdin=io.StringIO("Carol\n"), writer=BillFileService(tmp_path))

        assert exit_code == 0
        last_line = capsys.readouterr().out.rstrip("\n").split("\n")[-1]
        assert last_line.startswith("Error writing file:")

    def test_overwrites_previous_bill(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "bill.txt").write_text("stale content that is longer", encoding="utf-8")

        cli.main(stdin=io.StringIO("Dave\n"))

        assert (tmp_path / "bill.txt").read_text(encoding="utf-8") == new_bill("Dave").format()

    @pytest.mark.skipif(
        hasattr(os, "geteuid") and os.geteuid() == 0,
        reason="root ignores directory write permissions",
    )
    def test_read_only_working_directory_reports_and_exits_zero(self, tmp_path, monkeypatch, capsys):
        read_only = tmp_path / "locked"
        read_only.mkdir()
        read_only.chmod(0o555)
        monkeypatch.chdir(read_only)
        try:
            exit_code = cli.main(stdin=io.StringIO("Carol\n"))
        finally:
            read_only.chmod(0o755)

        assert exit_code == 0
        assert not (read_only / "bill.txt").exists()
        last_line = capsys.readouterr().out.rstrip("\n").split("\n")[-1]
        assert last_line.startswith("Error writing file:")

    def test_default_writer_is_shared_file_service(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        calls = []
        monkeypatch.setattr(cli.file_service, "write_rendering", calls.append)

        cli.main(stdin=io.StringIO("Erin\n"))

        assert calls == [new_bill("Erin").format()]
