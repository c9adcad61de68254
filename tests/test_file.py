# SPDX-License-Identifier: MIT

from pathlib import Path

from ganttfmt.service.file import read_text, write_text_atomic


class TestFile:
    def test_read_keeps_line_endings(self, tmp_path: Path) -> None:
        path = tmp_path / "chart.mmd"
        path.write_bytes(b"gantt\r\nsection A\r\n")
        assert read_text(path) == "gantt\r\nsection A\r\n"

    def test_write_creates_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out.mmd"
        write_text_atomic(path, "gantt\n")
        assert path.read_text() == "gantt\n"
        assert [p.name for p in tmp_path.iterdir() if p.is_file()] == ["out.mmd"]

    def test_write_replaces_and_keeps_mode(self, tmp_path: Path) -> None:
        path = tmp_path / "chart.mmd"
        path.write_text("old\n")
        path.chmod(0o600)
        write_text_atomic(path, "new\n")
        assert path.read_text() == "new\n"
        assert path.stat().st_mode & 0o777 == 0o600
