"""Command line interface for the wordbits toolkit."""
from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from . import io
from .engine.access import clear_bit, get_bit, set_bit, toggle_bit
from .engine.counting import popcount
from .engine.highest import highest_bit
from .engine.masks import power_of_two, range_mask, run_mask, single_bit
from .engine.models import WORD_BITS, ClearMethod, HighestBitMethod, PopcountMethod, SwapMethod
from .engine.rearrange import remove_bit, swap_bits
from .engine.render import to_binary_string
from .engine.rotate import rotate_left, rotate_right
from .engine.runs import count_runs
from .engine.unique import find_unique

logger = logging.getLogger(__name__)


def _parse_width(value: str) -> int:
    """Parse --width, ensuring a positive bit count."""
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {value}") from None
    if width <= 0:
        raise argparse.ArgumentTypeError(f"width must be positive: {value}")
    return width


def _word(value: str) -> int:
    try:
        return io.parse_word(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid word literal: {value}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordbits", description="Fixed-width bit manipulation CLI")
    parser.add_argument("-V", "--version", action="version", version="wordbits 0.1")
    parser.add_argument("-v", "--verbose", action="store_true", default=False)
    sub = parser.add_subparsers(dest="command", required=True)

    def add_common_options(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("--width", type=_parse_width, default=WORD_BITS)
        cmd.add_argument("--format", choices=["text", "json"], default="text")
        cmd.add_argument("--out", default="-")

    def add_word_command(name: str, help_text: str) -> argparse.ArgumentParser:
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("word", type=_word)
        add_common_options(cmd)
        return cmd

    cmd = add_word_command("popcount", help_text="count set bits")
    cmd.add_argument("--method", choices=[m.value for m in PopcountMethod], default=PopcountMethod.KERNIGHAN.value)

    cmd = add_word_command("highest", help_text="index of the most significant set bit")
    cmd.add_argument("--method", choices=[m.value for m in HighestBitMethod], default=HighestBitMethod.THRESHOLD.value)

    for name, help_text in (
        ("get", "read one bit"),
        ("set", "set one bit to 1"),
        ("toggle", "invert one bit"),
        ("remove", "remove one bit and shift higher bits down"),
    ):
        cmd = add_word_command(name, help_text=help_text)
        cmd.add_argument("index", type=int)

    cmd = add_word_command("clear", help_text="set one bit to 0")
    cmd.add_argument("index", type=int)
    cmd.add_argument("--method", choices=[m.value for m in ClearMethod], default=ClearMethod.NOT.value)

    for name, help_text in (("rotl", "rotate left"), ("rotr", "rotate right")):
        cmd = add_word_command(name, help_text=help_text)
        cmd.add_argument("count", type=int)

    cmd = add_word_command("runs", help_text="count windows of consecutive set bits")
    cmd.add_argument("length", type=int)

    cmd = add_word_command("swap", help_text="swap two bits")
    cmd.add_argument("index_a", type=int)
    cmd.add_argument("index_b", type=int)
    cmd.add_argument("--method", choices=[m.value for m in SwapMethod], default=SwapMethod.XOR.value)

    cmd = add_word_command("render", help_text="binary digits of a word")
    cmd.add_argument("--pad", action="store_true", default=False, help="zero-fill to the word width")

    unique = sub.add_parser("unique", help="find the value without a duplicate")
    unique.add_argument("--input", required=True, help="text, .jsonl or .csv file of words; '-' for stdin")
    add_common_options(unique)

    mask = sub.add_parser("mask", help="build a mask")
    group = mask.add_mutually_exclusive_group(required=True)
    group.add_argument("--bit", type=int, metavar="INDEX")
    group.add_argument("--run", type=int, metavar="COUNT")
    group.add_argument("--range", type=int, nargs=2, metavar=("LOW", "HIGH"))
    group.add_argument("--power", type=int)
    add_common_options(mask)
    return parser


def _emit_result(args: argparse.Namespace, inputs: dict[str, object], result: object, is_word: bool) -> None:
    if args.format == "json":
        payload: dict[str, object] = {
            "command": args.command,
            "width": args.width,
            "inputs": inputs,
            "result": result,
        }
        if is_word:
            payload["binary"] = to_binary_string(result, args.width)
        io.write_json(payload, args.out)
    elif isinstance(result, bool):
        io.write_text(("true" if result else "false") + "\n", args.out)
    elif is_word:
        io.write_text(f"{result}\t{to_binary_string(result, args.width)}\n", args.out)
    else:
        io.write_text(f"{result}\n", args.out)


def _command_mask(args: argparse.Namespace) -> None:
    if args.bit is not None:
        inputs, result = {"bit": args.bit}, single_bit(args.bit, args.width)
    elif args.run is not None:
        inputs, result = {"run": args.run}, run_mask(args.run, args.width)
    elif args.range is not None:
        low, high = args.range
        inputs, result = {"range": [low, high]}, range_mask(low, high, args.width)
    else:
        inputs, result = {"power": args.power}, power_of_two(args.power, args.width)
    _emit_result(args, inputs, result, is_word=True)


def _command_unique(args: argparse.Namespace) -> None:
    values = io.read_words(args.input)
    logger.debug("read %d words from %s", len(values), args.input)
    result = find_unique(values, args.width)
    _emit_result(args, {"input": args.input, "count": len(values)}, result, is_word=True)


def _command_word(args: argparse.Namespace) -> None:
    command = args.command
    word = args.word
    width = args.width
    inputs: dict[str, object] = {"word": word}
    is_word = True
    if command == "popcount":
        inputs["method"] = args.method
        result: object = popcount(word, width, method=args.method)
        is_word = False
    elif command == "highest":
        inputs["method"] = args.method
        result = highest_bit(word, width, method=args.method)
        is_word = False
    elif command == "get":
        inputs["index"] = args.index
        result = get_bit(word, args.index, width)
        is_word = False
    elif command == "set":
        inputs["index"] = args.index
        result = set_bit(word, args.index, width)
    elif command == "clear":
        inputs.update(index=args.index, method=args.method)
        result = clear_bit(word, args.index, width, method=args.method)
    elif command == "toggle":
        inputs["index"] = args.index
        result = toggle_bit(word, args.index, width)
    elif command == "remove":
        inputs["index"] = args.index
        result = remove_bit(word, args.index, width)
    elif command == "rotl":
        inputs["count"] = args.count
        result = rotate_left(word, args.count, width)
    elif command == "rotr":
        inputs["count"] = args.count
        result = rotate_right(word, args.count, width)
    elif command == "runs":
        inputs["length"] = args.length
        result = count_runs(word, args.length, width)
        is_word = False
    elif command == "swap":
        inputs.update(index_a=args.index_a, index_b=args.index_b, method=args.method)
        result = swap_bits(word, args.index_a, args.index_b, width, method=args.method)
    elif command == "render":
        inputs["pad"] = args.pad
        result = to_binary_string(word, width, pad=args.pad)
        is_word = False
    else:
        raise ValueError(f"unknown command {command}")
    _emit_result(args, inputs, result, is_word)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("command=%s width=%d", args.command, args.width)
    try:
        if args.command == "mask":
            _command_mask(args)
        elif args.command == "unique":
            _command_unique(args)
        else:
            _command_word(args)
    except ValueError as exc:
        # BitwiseError derives from ValueError; both are reported as usage errors.
        parser.exit(2, f"{parser.prog}: error: {exc}\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
