# application/services/curl_renderer.py
from __future__ import annotations

from typing import List

from domain.request import CurlRequest


def _escape_body(body: str) -> str:
    return body.replace("\n", "").replace("'", "\\'")


class CurlRenderer:
    """
    Render a completed request as a single-line curl command:

        curl -X POST -H 'Accept: application/json' 'http://h/p?a=1' -d '{...}'
    """

    def render(self, request: CurlRequest) -> str:
        parts: List[str] = [f"curl -X {request.method}"]
        for name, value in request.headers.items():
            parts.append(f"-H '{name}: {value}'")
        parts.append(f"'{request.target}'")
        if request.sends_body:
            parts.append(f"-d '{_escape_body(request.body)}'")
        return " ".join(parts)
