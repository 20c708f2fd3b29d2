# application/services/line_classifier.py
"""
Turn one feature script line into a typed statement.

A statement line reads `<leader> <keyword> ...`, for example
`* header Authorization = token` or `When method post`. `When` is
only accepted in front of `method`.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple, Union

from application.services.literal_extractor import extract_quoted
from domain.exceptions import MalformedStatementError
from domain.statements import (
    METHOD_LEADERS,
    SCENARIO_PREFIXES,
    STATEMENT_LEADERS,
    HeaderStatement,
    MethodStatement,
    ParamStatement,
    PathStatement,
    RequestBodyStatement,
    ScenarioBoundary,
    Statement,
    UrlStatement,
    VariableDefinition,
    remove_quotes,
)

Classified = Union[Statement, ScenarioBoundary]


def first_token(text: str) -> str:
    parts = text.split(maxsplit=1)
    return parts[0] if parts else ""


class LineClassifier:
    def __init__(self) -> None:
        self._matchers: Dict[str, Callable[[str, str, Optional[str]], Statement]] = {
            "def": self._match_def,
            "url": self._match_url,
            "path": self._match_path,
            "header": self._match_header,
            "method": self._match_method,
            "param": self._match_param,
            "request": self._match_request,
        }

    def classify(self, text: str, original: Optional[str] = None) -> Optional[Classified]:
        """
        Return the statement for `text` or None when the line is not one we
        recognize.

        `original` is the line before variable substitution; the `request`
        statement reads its variable name from it.

        Raises:
            MalformedStatementError: a keyword is present but a required
                token is missing.
        """
        if text.startswith(SCENARIO_PREFIXES):
            return ScenarioBoundary(text=text)

        tokens = text.split()
        if len(tokens) < 2:
            return None

        matcher = self._matchers.get(tokens[1])
        if matcher is None or tokens[0] not in self._leaders_for(tokens[1]):
            return None
        return matcher(tokens[0], text, original)

    def _leaders_for(self, keyword: str) -> Tuple[str, ...]:
        return METHOD_LEADERS if keyword == "method" else STATEMENT_LEADERS

    def _match_def(self, leader: str, text: str, _original: Optional[str]) -> Statement:
        name, value = self._assignment(text, require_value=False)
        return VariableDefinition(leader=leader, name=name, value=value.strip())

    def _match_url(self, leader: str, text: str, _original: Optional[str]) -> Statement:
        return UrlStatement(leader=leader, url=extract_quoted(text))

    def _match_path(self, leader: str, text: str, _original: Optional[str]) -> Statement:
        return PathStatement(leader=leader, path=extract_quoted(text))

    def _match_header(self, leader: str, text: str, _original: Optional[str]) -> Statement:
        name, value = self._assignment(text, require_value=True)
        return HeaderStatement(leader=leader, name=name, value=remove_quotes(value))

    def _match_param(self, leader: str, text: str, _original: Optional[str]) -> Statement:
        name, value = self._assignment(text, require_value=True)
        return ParamStatement(leader=leader, name=name, value=remove_quotes(value))

    def _match_method(self, leader: str, text: str, _original: Optional[str]) -> Statement:
        return MethodStatement(leader=leader, method=self._third_token(text).upper())

    def _match_request(self, leader: str, text: str, original: Optional[str]) -> Statement:
        source = text if original is None else original
        return RequestBodyStatement(leader=leader, variable=self._third_token(source))

    def _assignment(self, text: str, require_value: bool) -> Tuple[str, str]:
        lhs, sep, rhs = text.partition("=")
        if require_value and not sep:
            raise MalformedStatementError("missing '=' in assignment")
        return self._third_token(lhs), rhs

    def _third_token(self, text: str) -> str:
        tokens: List[str] = text.split()
        if len(tokens) < 3:
            raise MalformedStatementError("missing operand")
        return tokens[2]
