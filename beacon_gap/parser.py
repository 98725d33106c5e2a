"""Parser for sensor reports.

Each non-blank line reads::

    Sensor at x=2, y=18: closest beacon is at x=-2, y=15
"""

from typing import List, Optional, Tuple

from .coverage import Coverage
from .lexer import Token, tokenize_line
from .types import Point


class Cursor:
    def __init__(self, tokens: List[Token], line_no: int):
        self.toks = tokens
        self.i = 0
        self.line_no = line_no

    def peek(self) -> Optional[Token]:
        return self.toks[self.i] if self.i < len(self.toks) else None

    def expect(self, *types: str) -> Token:
        t = self.peek()
        if t and t[0] in types:
            self.i += 1
            return t
        want = '|'.join(types)
        if t:
            raise SyntaxError(f'[line {t[2]}, col {t[3]}] expected {want}, got {t[0]}')
        raise SyntaxError(f'[line {self.line_no}] unexpected end of line: expected {want}')

    def consume_words(self, *words: str) -> None:
        for word in words:
            tok = self.expect('WORD')
            if tok[1].lower() != word:
                raise SyntaxError(
                    f"[line {tok[2]}, col {tok[3]}] expected keyword '{word}', got '{tok[1]}'"
                )

    def at_end(self) -> bool:
        return self.i >= len(self.toks)


def parse_coord(cur: Cursor, axis: str) -> int:
    cur.consume_words(axis)
    cur.expect('EQUAL')
    return int(cur.expect('NUMBER')[1])


def parse_point(cur: Cursor) -> Point:
    x = parse_coord(cur, 'x')
    cur.expect('COMMA')
    y = parse_coord(cur, 'y')
    return Point(x, y)


def _parse_tokens(cur: Cursor) -> Tuple[Point, Point]:
    cur.consume_words('sensor', 'at')
    sensor = parse_point(cur)
    cur.expect('COLON')
    cur.consume_words('closest', 'beacon', 'is', 'at')
    beacon = parse_point(cur)
    if not cur.at_end():
        t = cur.peek()
        raise SyntaxError(f'[line {t[2]}, col {t[3]}] unexpected trailing {t[0]} {t[1]!r}')
    return sensor, beacon


def parse_line(line: str, line_no: int = 1) -> Coverage:
    cur = Cursor(tokenize_line(line, line_no), line_no)
    sensor, beacon = _parse_tokens(cur)
    return Coverage.new(sensor, beacon)


def parse_report(text: str) -> List[Coverage]:
    coverages: List[Coverage] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith('#'):
            continue
        coverages.append(parse_line(line, line_no))
    return coverages
