# vortex/cli.py
"""vortex – run a bundled grammar over some text

Usage:
    $ python -m vortex parse integer --text -123
    $ python -m vortex parse url --input urls.txt --json -D
    $ python -m vortex grammars

parse    : parse the whole input with the named grammar and print the tree
grammars : list the bundled grammars

With -D/--debug, progress and cursor details are written to stderr.
"""

from __future__ import annotations
import argparse
import json
import sys
from typing import Optional

from .driver import parse_strict
from .grammars import GRAMMARS

# ------------------------------
# helpers
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _read_input(args) -> str:
    if args.text is not None:
        return args.text
    with open(args.input, "r", encoding="utf-8") as f:
        text = f.read()
    # a trailing newline from the file is not part of the input
    return text[:-1] if text.endswith("\n") else text

# ------------------------------
# commands
# ------------------------------

def cmd_parse(args) -> int:
    try:
        factory = GRAMMARS[args.grammar]
    except KeyError:
        _eprint(f"[ERROR] Unknown grammar: {args.grammar} (try: {', '.join(sorted(GRAMMARS))})")
        return 2

    try:
        text = _read_input(args)
        grammar = factory()
        if args.debug: _eprint(f"[DEBUG] grammar={args.grammar} chars={len(text)}")
        node = parse_strict(text, grammar)
    except SyntaxError as e:
        _eprint("[PARSE ERROR]", str(e))
        if args.debug and getattr(e, "reason", None):
            _eprint(f"[DEBUG] reason={e.reason} offset={e.offset}")
        return 2
    except Exception as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    if args.json:
        print(json.dumps(node.to_list(), ensure_ascii=False))
    else:
        print(node.pretty())
    if args.debug: _eprint(f"[DEBUG] consumed={node.text()!r}")
    return 0


def cmd_grammars(args) -> int:
    for name in sorted(GRAMMARS):
        print(name)
    return 0

# ------------------------------
# entry point
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="vortex", description="vortex parser combinator CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_parse = sub.add_parser("parse", help="parse input with a bundled grammar and print the tree")
    p_parse.add_argument("grammar", help="grammar name (see `vortex grammars`)")
    src_group = p_parse.add_mutually_exclusive_group(required=True)
    src_group.add_argument("--text", help="input text")
    src_group.add_argument("--input", help="path to an input file")
    p_parse.add_argument("--json", action="store_true", help="print the tree as nested JSON lists")
    p_parse.add_argument("-D", "--debug", action="store_true", help="print debug details to stderr")
    p_parse.set_defaults(func=cmd_parse)

    p_list = sub.add_parser("grammars", help="list bundled grammars")
    p_list.set_defaults(func=cmd_grammars)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
