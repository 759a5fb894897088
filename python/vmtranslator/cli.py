from __future__ import annotations
import argparse
import sys
from functools import partial
from pathlib import Path

from .options import StaticPolicy, TranslatorOptions
from .translator import translate


def read_text_blocked(path: str, buf_size: int) -> str:
    # read in fixed-size chunks until EOF
    chunks = []
    with open(path, "r", encoding="utf-8") as f:
        for part in iter(partial(f.read, buf_size), ""):
            chunks.append(part)
    return "".join(chunks)


def script_name_for(path: Path) -> str:
    # Foo.vm -> Foo, Foo.test.vm -> Foo
    return path.name.split(".", 1)[0]


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="vmtranslator",
        description="Translate a .vm stack-machine file into Hack assembly",
    )
    ap.add_argument("input", help="Input .vm file")
    ap.add_argument("-o", "--output", help="Output .asm file (default: input with .asm suffix)")
    ap.add_argument(
        "--static",
        choices=[p.value for p in StaticPolicy],
        default=StaticPolicy.SYMBOLS.value,
        help="static segment handling: 'symbols' emits @<script>.<i>, 'reject' fails",
    )
    ap.add_argument("--script-name", help="Name used for static symbols (default: input file stem)")
    ap.add_argument("--buf", type=int, default=64 * 1024, help="Read buffer size")
    ap.add_argument("-v", "--verbose", action="store_true", help="Print every line as it is parsed")
    args = ap.parse_args(argv)

    inp = Path(args.input)
    if not inp.exists():
        print(f"[vmtranslator] ERROR: input file not found: {inp}", file=sys.stderr)
        return 3

    out = Path(args.output) if args.output else inp.with_suffix(".asm")
    script_name = args.script_name or script_name_for(inp)
    options = TranslatorOptions(static_policy=StaticPolicy(args.static))

    print(f"[vmtranslator] converting {inp}")
    text = read_text_blocked(str(inp), args.buf)

    def show_line(line_no: int, text: str) -> None:
        print(f"[vmtranslator] parsing line {line_no}: {text}")

    on_line = show_line if args.verbose else None

    res = translate(script_name, text.splitlines(), options, on_line=on_line)

    if res.errors:
        for e in res.errors:
            print(f"[translate error] line={e.line_no}: {e.message} ({e.text})", file=sys.stderr)
        print(f"[vmtranslator] {len(res.errors)} error(s), nothing written", file=sys.stderr)
        return 2

    if res.program.is_empty():
        print("[vmtranslator] no commands found, nothing written")
        return 0

    out.parent.mkdir(parents=True, exist_ok=True)
    res.program.save(str(out))
    print(f"OK. asm_written={out.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
