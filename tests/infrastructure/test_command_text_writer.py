from __future__ import annotations

from pathlib import Path

from infrastructure.output.text_writer import CommandTextWriter, format_commands


def test_output_path_replaces_extension(tmp_path: Path) -> None:
    writer = CommandTextWriter(tmp_path / "generated")

    assert writer.output_path(Path("karate/users.feature")) == tmp_path / "generated" / "users.txt"


def test_write_separates_commands_with_blank_lines(tmp_path: Path) -> None:
    writer = CommandTextWriter(tmp_path / "nested" / "generated", suffix=".curl")

    target = writer.write(Path("users.feature"), ["curl -X GET 'a'", "curl -X GET 'b'"])

    assert target.name == "users.curl"
    assert target.read_text(encoding="utf-8") == "curl -X GET 'a'\n\ncurl -X GET 'b'\n\n"


def test_format_commands_empty() -> None:
    assert format_commands([]) == ""
