from __future__ import annotations

from pathlib import Path

from application.services.conversion_service import FeatureConversionService
from infrastructure.feature.file_source import FeatureFileSource
from infrastructure.output.text_writer import CommandTextWriter


class FakeLogger:
    def __init__(self, bound: dict[str, object] | None = None, events: list[dict[str, object]] | None = None) -> None:
        self.bound = bound or {}
        self.events = [] if events is None else events

    def bind(self, **fields: object) -> "FakeLogger":
        merged = dict(self.bound)
        merged.update(fields)
        return FakeLogger(bound=merged, events=self.events)

    def info(self, event: str, **fields: object) -> None:
        self._record("info", event, fields)

    def debug(self, event: str, **fields: object) -> None:
        self._record("debug", event, fields)

    def warning(self, event: str, **fields: object) -> None:
        self._record("warning", event, fields)

    def error(self, event: str, **fields: object) -> None:
        self._record("error", event, fields)

    def _record(self, level: str, event: str, fields: dict[str, object]) -> None:
        payload = dict(self.bound)
        payload.update(fields)
        payload["type"] = event
        payload["level"] = level
        self.events.append(payload)


def _service(features: Path, out: Path, logger: FakeLogger) -> FeatureConversionService:
    return FeatureConversionService(
        source=FeatureFileSource(features),
        sink=CommandTextWriter(out),
        logger=logger,
    )


def test_converts_each_feature_file(tmp_path: Path) -> None:
    # Arrange
    features = tmp_path / "karate"
    features.mkdir()
    (features / "widgets.feature").write_text(
        "Scenario: a\n* url 'http://api.test'\n* method GET\n"
        "Scenario: b\n* url 'http://api.test'\n* method DELETE\n",
        encoding="utf-8",
    )
    (features / "notes.md").write_text("* url 'http://ignored'\n* method GET\n", encoding="utf-8")
    out = tmp_path / "generated"
    logger = FakeLogger()

    # Act
    report = _service(features, out, logger).convert_all()

    # Assert
    assert report.ok
    assert report.command_count == 2
    written = (out / "widgets.txt").read_text(encoding="utf-8")
    assert written == (
        "curl -X GET -H 'Accept: application/json' 'http://api.test'\n\n"
        "curl -X DELETE -H 'Accept: application/json' 'http://api.test'\n\n"
    )
    assert not (out / "notes.txt").exists()
    types = [e["type"] for e in logger.events]
    assert types[0] == "conversion.start"
    assert types[-1] == "conversion.done"
    assert "conversion.file_written" in types


def test_failed_file_does_not_stop_the_run(tmp_path: Path) -> None:
    # Arrange
    features = tmp_path / "karate"
    features.mkdir()
    (features / "a_broken.feature").write_text("* url 'http://api.test'\n* method\n", encoding="utf-8")
    (features / "b_good.feature").write_text("* url 'http://api.test'\n* method GET\n", encoding="utf-8")
    out = tmp_path / "generated"
    logger = FakeLogger()

    # Act
    report = _service(features, out, logger).convert_all()

    # Assert
    assert not report.ok
    assert [o.source.name for o in report.failed] == ["a_broken.feature"]
    assert "line 2" in (report.failed[0].error_message or "")
    assert not (out / "a_broken.txt").exists()
    assert (out / "b_good.txt").exists()
    failures = [e for e in logger.events if e["type"] == "conversion.file_failed"]
    assert failures[0]["file"] == str(features / "a_broken.feature")
    assert failures[0]["error_type"] == "MalformedStatementError"


def test_empty_result_still_writes_file(tmp_path: Path) -> None:
    features = tmp_path / "karate"
    features.mkdir()
    (features / "empty.feature").write_text("Feature: nothing here\n", encoding="utf-8")

    logger = FakeLogger()

    report = _service(features, tmp_path / "out", logger).convert_all()

    assert report.outcomes[0].command_count == 0
    assert any(e["type"] == "conversion.no_commands" and e["level"] == "warning" for e in logger.events)
    assert (tmp_path / "out" / "empty.txt").read_text(encoding="utf-8") == ""


def test_missing_features_dir_is_reported(tmp_path: Path) -> None:
    logger = FakeLogger()

    report = _service(tmp_path / "missing", tmp_path / "out", logger).convert_all()

    assert report.outcomes == []
    assert any(e["type"] == "conversion.missing_dir" and e["level"] == "error" for e in logger.events)
