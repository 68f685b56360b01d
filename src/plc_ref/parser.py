from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from lark import Lark, UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from .ast_transforms import BuildAst
from .tree import Source

GRAMMAR_PATH = Path(__file__).resolve().parent / "grammar.lark"

class ParseError(Exception):
    """Parse error with position info"""
    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(
            f"{message} at line {line}, col {column}" if line is not None else message
        )

@lru_cache(maxsize=1)
def make_parser() -> Lark:
    grammar = GRAMMAR_PATH.read_text(encoding="utf-8")

    return Lark(
        grammar,
        start="source",
        parser="lalr",
        transformer=BuildAst(),
        maybe_placeholders=True,
        propagate_positions=False,
    )

def parse_source(src: str) -> Source:
    try:
        return make_parser().parse(src)
    except UnexpectedInput as exc:
        line = getattr(exc, "line", None)
        column = getattr(exc, "column", None)

        if line is None or line < 1:
            line, column = None, None
        raise ParseError(_describe(exc), line, column) from None

def _describe(exc: UnexpectedInput) -> str:
    match exc:
        case UnexpectedEOF():
            return "Unexpected end of input"
        case UnexpectedToken(token=tok):
            if tok.type == "$END":
                return "Unexpected end of input"
            return f"Unexpected token {str(tok)!r}"
        case UnexpectedCharacters(char=ch):
            return f"Unexpected character {ch!r}"
    return "Invalid syntax"
