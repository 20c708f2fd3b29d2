# domain/statements.py
"""
Typed statements recognized in a feature script line
"""
from __future__ import annotations

from dataclasses import dataclass

STATEMENT_LEADERS = ("*", "And")
# `When` only introduces `method`
METHOD_LEADERS = STATEMENT_LEADERS + ("When",)
CONTINUATION_LEADER = "And"
SCENARIO_PREFIXES = ("Scenario:", "@")
TRIPLE_QUOTES = ('"""', "'''")


@dataclass(frozen=True)
class Statement:
    leader: str


@dataclass(frozen=True)
class ScenarioBoundary:
    text: str


@dataclass(frozen=True)
class VariableDefinition(Statement):
    name: str
    value: str  # "" when the value continues on the next line


@dataclass(frozen=True)
class UrlStatement(Statement):
    url: str


@dataclass(frozen=True)
class PathStatement(Statement):
    path: str


@dataclass(frozen=True)
class HeaderStatement(Statement):
    name: str
    value: str


@dataclass(frozen=True)
class MethodStatement(Statement):
    method: str


@dataclass(frozen=True)
class ParamStatement(Statement):
    name: str
    value: str


@dataclass(frozen=True)
class RequestBodyStatement(Statement):
    variable: str


def strip_quotes(value: str) -> str:
    return value.strip().strip("'\"")


def remove_quotes(value: str) -> str:
    return value.strip().replace("'", "").replace('"', "")


def opens_multiline_literal(value: str) -> bool:
    return value.startswith(TRIPLE_QUOTES)


def closes_multiline_literal(line: str) -> bool:
    return line.endswith(TRIPLE_QUOTES)
