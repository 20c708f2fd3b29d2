# application/services/literal_extractor.py
from __future__ import annotations

from typing import List, Tuple

from domain.script import ScriptLine
from domain.statements import closes_multiline_literal


def extract_quoted(line: str) -> str:
    """
    Return the text between the first quote and the last occurrence of the
    same quote character. Single quotes win over double quotes.

    "* url 'http://api.test'" -> "http://api.test"
    """
    quote = "'" if "'" in line else '"'
    start = line.find(quote)
    end = line.rfind(quote)
    if start < 0 or end <= start:
        return ""
    return line[start + 1 : end]


def extract_multiline(lines: List[ScriptLine], open_index: int) -> Tuple[str, int]:
    """
    Collect the lines after the opening triple quote up to the closing one.

    Returns (value, closing_index). An unterminated literal runs to the end
    of the script and closing_index is the last line.
    """
    collected: List[str] = []
    for i in range(open_index + 1, len(lines)):
        text = lines[i].text
        if closes_multiline_literal(text):
            return "\n".join(collected).strip(), i
        collected.append(text)
    return "\n".join(collected).strip(), len(lines) - 1
