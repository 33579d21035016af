from __future__ import annotations
import re
from typing import Iterator, List, NamedTuple, TextIO

COMMENT = "//"
BOM = "\ufeff"
WORD_RE = re.compile(r"\S+")

class Word(NamedTuple):
    text: str
    col: int    # 1-based column in the physical line

class SourceLine(NamedTuple):
    lineno: int
    text: str
    words: List[Word]

def strip_comment(line: str) -> str:
    """Remove a '//' comment and surrounding whitespace."""
    return line.split(COMMENT, 1)[0].strip()

def split_words(line: str) -> List[Word]:
    """Whitespace-delimited words of a line (comment removed) with their columns."""
    code = line.split(COMMENT, 1)[0]
    return [Word(m.group(0), m.start() + 1) for m in WORD_RE.finditer(code)]

def read_lines(stream: TextIO) -> Iterator[SourceLine]:
    """Yield every logical line of the stream.

    Blank and comment-only lines are skipped, so a yielded line always has at
    least one word. A leading byte-order mark is dropped.
    """
    for lineno, raw in enumerate(stream, start=1):
        raw = raw.rstrip("\r\n")
        if lineno == 1:
            raw = raw.lstrip(BOM)
        text = strip_comment(raw)
        if not text:
            continue
        words = split_words(raw)
        if not words:
            continue
        yield SourceLine(lineno, text, words)
