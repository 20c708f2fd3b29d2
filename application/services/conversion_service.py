# application/services/conversion_service.py
from __future__ import annotations

from pathlib import Path
from typing import List

from application.outcome import ConversionReport, FileOutcome
from application.ports.command_sink import CommandSinkPort
from application.ports.feature_source import FeatureSourcePort
from application.ports.logger import LoggerPort
from application.services.feature_parser import FeatureCurlParser


class FeatureConversionService:
    """
    Convert every feature file of a source into a companion command file.

    A failing file is logged and reported; the remaining files are still
    converted.
    """

    def __init__(
        self,
        source: FeatureSourcePort,
        sink: CommandSinkPort,
        logger: LoggerPort,
    ) -> None:
        self._source = source
        self._sink = sink
        self._logger = logger

    def convert_all(self) -> ConversionReport:
        self._logger.info("conversion.start")

        if not self._source.exists():
            self._logger.error("conversion.missing_dir", source=str(self._source))
            return ConversionReport()

        outcomes: List[FileOutcome] = []
        for path in self._source.list_files():
            outcomes.append(self.convert_file(path))

        report = ConversionReport(outcomes=outcomes)
        self._logger.info(
            "conversion.done",
            files=len(outcomes),
            failed=len(report.failed),
            commands=report.command_count,
        )
        return report

    def convert_file(self, path: Path) -> FileOutcome:
        log = self._logger.bind(file=str(path))
        log.info("conversion.file_start")
        try:
            content = self._source.read(path)
            # fresh parser state per file
            commands = FeatureCurlParser(logger=log).parse(content)
            output = self._sink.write(path, commands)
        except Exception as e:
            log.error("conversion.file_failed", error=str(e), error_type=type(e).__name__)
            return FileOutcome(source=path, ok=False, error_message=str(e))

        if not commands:
            log.warning("conversion.no_commands")
        log.info("conversion.file_written", output=str(output), commands=len(commands))
        return FileOutcome(source=path, ok=True, output=output, command_count=len(commands))
