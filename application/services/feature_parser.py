# application/services/feature_parser.py
"""
Walk a feature script line by line and collect the requests it issues.

Request state builds up across lines (url, path, headers, params, method,
request body) and a request is emitted as soon as it has both a method and
a base URL. Scenario headers and tags reset everything but the base URL and
the variables.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from application.ports.logger import LoggerPort
from application.services.curl_renderer import CurlRenderer
from application.services.line_classifier import LineClassifier, first_token
from application.services.literal_extractor import extract_multiline
from application.services.variable_table import VariableTable
from domain.exceptions import MalformedStatementError
from domain.request import CurlRequest, RequestAccumulator
from domain.script import ScriptLine, split_script
from domain.statements import (
    CONTINUATION_LEADER,
    HeaderStatement,
    MethodStatement,
    ParamStatement,
    PathStatement,
    RequestBodyStatement,
    ScenarioBoundary,
    UrlStatement,
    VariableDefinition,
    opens_multiline_literal,
    strip_quotes,
)


@dataclass
class _ScanState:
    lines: List[ScriptLine]
    variables: VariableTable = field(default_factory=VariableTable)
    request: RequestAccumulator = field(default_factory=RequestAccumulator)
    emitted: List[CurlRequest] = field(default_factory=list)
    cursor: int = 0


class FeatureCurlParser:
    def __init__(
        self,
        classifier: Optional[LineClassifier] = None,
        renderer: Optional[CurlRenderer] = None,
        logger: Optional[LoggerPort] = None,
    ) -> None:
        self._classifier = classifier or LineClassifier()
        self._renderer = renderer or CurlRenderer()
        self._logger = logger

    def parse(self, content: str) -> List[str]:
        return [self._renderer.render(req) for req in self.parse_requests(content)]

    def parse_requests(self, content: str) -> List[CurlRequest]:
        """
        Raises:
            MalformedStatementError: a statement lacks a required token.
        """
        state = _ScanState(lines=split_script(content))
        while state.cursor < len(state.lines):
            line = state.lines[state.cursor]
            try:
                self._process_line(state, line)
            except MalformedStatementError as exc:
                if exc.line_no is not None:
                    raise
                raise MalformedStatementError(str(exc), line.line_no, line.text) from exc
            state.cursor += 1
        return state.emitted

    def _process_line(self, state: _ScanState, line: ScriptLine) -> None:
        text = state.variables.substitute(line.text)
        req = state.request

        stmt = self._classifier.classify(text, original=line.text)
        if isinstance(stmt, ScenarioBoundary):
            req.start_scenario()
            return

        if req.fresh_scenario and first_token(text) == CONTINUATION_LEADER and req.method:
            req.reset()

        if isinstance(stmt, VariableDefinition):
            self._define(state, stmt)
        elif isinstance(stmt, UrlStatement):
            req.set_base_url(stmt.url)
        elif isinstance(stmt, PathStatement):
            req.path = stmt.path
        elif isinstance(stmt, HeaderStatement):
            req.headers[stmt.name] = stmt.value
        elif isinstance(stmt, MethodStatement):
            req.set_method(stmt.method)
        elif isinstance(stmt, ParamStatement):
            req.params[stmt.name] = stmt.value
        elif isinstance(stmt, RequestBodyStatement):
            body = state.variables.get(stmt.variable)
            if body is not None:
                req.body = body

        if req.is_complete:
            self._emit(state)

    def _define(self, state: _ScanState, stmt: VariableDefinition) -> None:
        value = stmt.value
        if not value:
            # value continues on the next line
            state.cursor += 1
            if state.cursor >= len(state.lines):
                raise MalformedStatementError(f"no value for variable {stmt.name!r}")
            value = state.lines[state.cursor].text
        if opens_multiline_literal(value):
            value, state.cursor = extract_multiline(state.lines, state.cursor)
        state.variables.define(stmt.name, strip_quotes(value))

    def _emit(self, state: _ScanState) -> None:
        request = state.request.snapshot()
        state.emitted.append(request)
        state.request.reset()
        if self._logger is not None:
            self._logger.debug(
                "parser.command_emitted",
                method=request.method,
                target=request.target,
                index=len(state.emitted) - 1,
            )


def parse_feature_to_curl(content: str) -> List[str]:
    return FeatureCurlParser().parse(content)
