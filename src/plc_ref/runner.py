from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .evaluator import eval_program
from .eval.common import stringify
from .parser import ParseError, parse_source
from .runtime import PlcObject, PlcRuntimeError, Scope, init_stdlib, make_root_scope

LOG_LEVEL_ENV = "PLC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

def run(src: str, scope: Optional[Scope]=None) -> PlcObject:
    """Parse `src` and evaluate it; `scope` defaults to a fresh root scope."""
    init_stdlib()
    program = parse_source(src)

    if scope is None:
        scope = make_root_scope()

    return eval_program(program, scope)

def configure_logging(level: Optional[str]=None) -> None:
    level = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss.SSS} | {level:<7} | {name}:{line} | {message}")
    logger.enable("plc_ref")

def _load_source(arg: Optional[str]) -> str:
    """
    Resolve CLI input into source text.
    - None or "-" => read stdin.
    - Existing path => read file contents.
    - Otherwise treat the argument as literal source.
    """

    if arg is None or arg == "-":
        data = sys.stdin.read()
        if not data:
            raise SystemExit("No input provided on stdin")
        return data

    candidate = Path(arg)
    try:
        is_file = candidate.is_file()
    except OSError:
        # too long or otherwise unusable as a path
        is_file = False

    if is_file:
        return candidate.read_text(encoding="utf-8")

    return arg

def main(argv: Optional[list[str]]=None) -> int:
    log_level = None
    arg = None
    it = iter(sys.argv[1:] if argv is None else argv)

    for token in it:
        if token.startswith("--log-level="):
            log_level = token.split("=", 1)[1]
            continue

        if token == "--log-level":
            try:
                log_level = next(it)
            except StopIteration:
                raise SystemExit("--log-level flag requires a level") from None
            continue

        if arg is None:
            arg = token
        else:
            raise SystemExit(f"Unexpected argument: {token}")

    configure_logging(log_level)
    source = _load_source(arg or "-")

    try:
        result = run(source)
    except ParseError as exc:
        logger.debug("parse failed: {!r}", exc)
        print(f"ParseError: {exc}", file=sys.stderr)
        return 1
    except PlcRuntimeError as exc:
        logger.debug("evaluation failed: {!r}", exc)
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    logger.debug("main returned {}", stringify(result))
    return 0

if __name__ == "__main__":
    sys.exit(main())
