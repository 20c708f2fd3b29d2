# domain/request.py
"""
Request accumulator and the snapshot emitted once a request is complete
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})
JSON_MEDIA_TYPE = "application/json"


@dataclass(frozen=True)
class CurlRequest:
    method: str
    base_url: str
    path: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    @property
    def query_string(self) -> str:
        return "&".join(f"{k}={v}" for k, v in self.params.items())

    @property
    def target(self) -> str:
        url = self.base_url + self.path
        if self.params:
            url += "?" + self.query_string
        return url

    @property
    def sends_body(self) -> bool:
        return bool(self.body) and self.method in BODY_METHODS


@dataclass
class RequestAccumulator:
    """
    In-progress request built up line by line.

    base_url survives reset() so several requests can share it until the
    next url statement.
    """
    base_url: str = ""
    path: str = ""
    method: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)
    body: str = ""
    fresh_scenario: bool = False

    @property
    def is_complete(self) -> bool:
        return bool(self.method) and bool(self.base_url)

    def reset(self) -> None:
        self.method = ""
        self.headers = {}
        self.body = ""
        self.path = ""
        self.params = {}

    def start_scenario(self) -> None:
        self.fresh_scenario = True
        self.reset()

    def set_base_url(self, url: str) -> None:
        self.base_url = url
        self.fresh_scenario = False

    def set_method(self, method: str) -> None:
        self.method = method.upper()
        self.headers.setdefault("Accept", JSON_MEDIA_TYPE)
        if self.method in BODY_METHODS:
            self.headers.setdefault("Content-Type", JSON_MEDIA_TYPE)

    def snapshot(self) -> CurlRequest:
        return CurlRequest(
            method=self.method,
            base_url=self.base_url,
            path=self.path,
            headers=dict(self.headers),
            params=dict(self.params),
            body=self.body,
        )
