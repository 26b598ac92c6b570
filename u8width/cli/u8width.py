"""u8width CLI entrypoint."""

import argparse
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from u8width.core import (
    InvalidArgument,
    TraceLogger,
    U8Error,
    codepoint_width,
    decode_codepoint,
    sequence_length,
    string_width,
)


def parse_hex(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise InvalidArgument(f"not a hex byte string: {text!r}") from exc


def parse_codepoint(text: str) -> int:
    """Accept ``U+XXXX``, ``0xXXXX`` or a decimal number."""
    value = text.strip()
    try:
        if value[:2].upper() == "U+":
            return int(value[2:], 16)
        return int(value, 0)
    except ValueError as exc:
        raise InvalidArgument(f"not a codepoint: {text!r}") from exc


Outcome = Tuple[Dict[str, Any], str]


def clen(args: argparse.Namespace) -> Outcome:
    data = parse_hex(args.hex)
    length = sequence_length(data)
    return {"bytes": data.hex(), "length": length}, f"length={length}"


def decode(args: argparse.Namespace) -> Outcome:
    data = parse_hex(args.hex)
    cp, consumed = decode_codepoint(data)
    return (
        {"bytes": data.hex(), "codepoint": cp, "consumed": consumed},
        f"codepoint=U+{cp:04X} consumed={consumed}",
    )


def cpwidth(args: argparse.Namespace) -> Outcome:
    cp = parse_codepoint(args.codepoint)
    width = codepoint_width(cp)
    return {"codepoint": cp, "width": width}, f"U+{cp:04X} width={width}"


def width(args: argparse.Namespace) -> Outcome:
    sources = [s for s in (args.text, args.hex, args.file) if s is not None]
    if len(sources) != 1:
        raise InvalidArgument("give exactly one of TEXT, --hex or --file")

    if args.file is not None:
        lines = Path(args.file).read_bytes().splitlines()
        widths: List[int] = [string_width(line) if line else 0 for line in lines]
        return (
            {"file": args.file, "lines": widths, "max": max(widths, default=0)},
            f"lines={len(widths)} max={max(widths, default=0)}",
        )

    # os.fsencode restores argv bytes that were not valid UTF-8
    data = parse_hex(args.hex) if args.hex is not None else os.fsencode(args.text)
    total = string_width(data) if data else 0
    return {"bytes": data.hex(), "width": total}, f"width={total}"


def command_inputs(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        name: getattr(args, name)
        for name in args.inputs
        if getattr(args, name) is not None
    }


def emit(args: argparse.Namespace, payload: Dict[str, Any], line: str) -> None:
    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="u8width", description="UTF-8 validation and terminal column width"
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument(
        "--trace-log", default=None, help="Append a trace entry per command to this file"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    clen_parser = subparsers.add_parser(
        "clen", help="Byte length of the first UTF-8 character"
    )
    clen_parser.add_argument("hex", help="Input bytes as hex, e.g. 'e4 b8 ad'")
    clen_parser.set_defaults(func=clen, inputs=("hex",))

    decode_parser = subparsers.add_parser(
        "decode", help="Decode the first UTF-8 character to a codepoint"
    )
    decode_parser.add_argument("hex", help="Input bytes as hex")
    decode_parser.set_defaults(func=decode, inputs=("hex",))

    cpwidth_parser = subparsers.add_parser("cpwidth", help="Column width of a codepoint")
    cpwidth_parser.add_argument("codepoint", help="U+XXXX, 0xXXXX or decimal")
    cpwidth_parser.set_defaults(func=cpwidth, inputs=("codepoint",))

    width_parser = subparsers.add_parser("width", help="Column width of a string")
    width_parser.add_argument("text", nargs="?", default=None, help="Text to measure")
    width_parser.add_argument("--hex", default=None, help="Measure these hex bytes instead")
    width_parser.add_argument(
        "--file", default=None, help="Measure each line of this file"
    )
    width_parser.set_defaults(func=width, inputs=("text", "hex", "file"))

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    trace = TraceLogger(Path(args.trace_log)) if args.trace_log else None
    try:
        payload, line = args.func(args)
    except (U8Error, OSError) as exc:
        if trace is not None:
            trace.record(args.command, command_inputs(args), error=exc)
        parser.exit(1, f"u8width: error: {exc}\n")

    if trace is not None:
        trace.record(args.command, command_inputs(args), result=payload)
    emit(args, payload, line)


if __name__ == "__main__":
    main()
