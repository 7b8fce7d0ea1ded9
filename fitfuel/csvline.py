"""Small CSV and string splitting helpers."""

from __future__ import annotations

import re
from typing import IO, Iterator

MAX_LINE_LENGTH = 1024
MAX_FIELDS = 300

_QUOTE = '"'


def _check_separator(separator: str) -> None:
    if len(separator) != 1:
        raise ValueError("separator must be a single character")


def parse_csv_line(line: str, separator: str = ",") -> list[str]:
    """Split one CSV line into fields.

    A field may be enclosed in double quotes, in which case it may contain the
    separator. A separator directly following a field's separator is skipped,
    and a trailing quote on a field is dropped. At most MAX_FIELDS - 1 fields
    are returned.
    """
    _check_separator(separator)
    text = line.split("\n", 1)[0]
    end = len(text)
    fields: list[str] = []
    pos = 0
    while pos < end and len(fields) < MAX_FIELDS - 1:
        if text[pos] == _QUOTE:
            start = pos + 1
            close = text.find(_QUOTE + separator, start)
            if close == -1:
                field = text[start:]
                pos = end
            else:
                field = text[start:close]
                pos = close + 2
        else:
            stop = text.find(separator, pos)
            if stop == -1:
                field = text[pos:]
                pos = end
            else:
                field = text[pos:stop]
                pos = stop + 1
                if text.startswith(separator, pos):
                    pos += 1
        if field.endswith(_QUOTE):
            field = field[:-1]
        fields.append(field)
    return fields


def _bounded_lines(stream: IO[str]) -> Iterator[str]:
    limit = MAX_LINE_LENGTH - 1
    for line in stream:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        if line:
            yield line


def read_csv(stream: IO[str], separator: str = ",") -> Iterator[list[str]]:
    """Yield the fields of each line of a text stream.

    Lines longer than MAX_LINE_LENGTH - 1 characters are read in pieces.
    """
    _check_separator(separator)
    for line in _bounded_lines(stream):
        yield parse_csv_line(line, separator)


def split_string(text: str, delim: str) -> list[str]:
    """Split on any of the delimiter characters, trimming spaces from tokens.

    Runs of delimiters count as one, so no empty tokens come from them.
    """
    if not delim:
        tokens = [text] if text else []
    else:
        pattern = "[" + re.escape(delim) + "]+"
        tokens = [token for token in re.split(pattern, text) if token]
    return [token.strip(" ") for token in tokens]