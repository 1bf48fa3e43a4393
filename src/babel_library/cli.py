from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from babel_library.core.errors import BabelError
from babel_library.data.config import load_config
from babel_library.engine.library import Address, Library
from babel_library.engine.sampler import CoordinateSampler, SamplerConfig
from babel_library.utils.layout import format_page


def _library(args: argparse.Namespace) -> Library:
    return Library(load_config(args.config))


def cmd_search(args: argparse.Namespace) -> int:
    library = _library(args)
    sampler = CoordinateSampler(SamplerConfig(seed=args.seed))

    query = args.query
    if args.noisy:
        query = library.normalizer.scatter(query, random.Random(args.seed), library.cfg.content_alphabet)

    try:
        addr = library.locate(query, sampler)
    except BabelError as e:
        raise SystemExit(f"Bad query: {e}")

    print(f'Page found!\n"{addr}"')
    return 0


def cmd_read(args: argparse.Namespace) -> int:
    library = _library(args)
    try:
        page = library.resolve(Address.parse(args.address))
    except BabelError as e:
        raise SystemExit(f"Bad address: {e}")

    print(format_page(page, library.cfg.columns))
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    library = _library(args)
    sampler = CoordinateSampler(SamplerConfig(seed=args.seed))

    in_path = Path(args.input)
    if not in_path.exists():
        raise SystemExit(f"Missing input file: {in_path}")
    # Only "\n" ends a page; splitlines() would also break on form feeds and similar.
    lines = in_path.read_text(encoding="utf-8").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]

    out_lines = []
    for lineno, line in enumerate(tqdm(lines, desc="Locating", unit="page", disable=args.quiet), start=1):
        try:
            addr = library.locate(line, sampler)
        except BabelError as e:
            raise SystemExit(f"{in_path}:{lineno}: {e}")
        out_lines.append(str(addr))

    text = "\n".join(out_lines) + ("\n" if out_lines else "")
    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        print(f"Wrote {out_path}")
    else:
        sys.stdout.write(text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="babel-library", description="Home of every page ever written.")
    p.add_argument("--config", default=None, help="Path to a YAML config (library: rows/columns/alphabets).")
    sub = p.add_subparsers(dest="cmd", required=True)

    s_search = sub.add_parser("search", help="Search the library for a page containing the query.")
    s_search.add_argument("query", help="The search query.")
    s_search.add_argument("--noisy", action="store_true", help="Allow random characters around the query.")
    s_search.add_argument("--seed", type=int, default=None, help="Seed for reproducible locations.")
    s_search.set_defaults(func=cmd_search)

    s_read = sub.add_parser("read", help="Read a page from the library.")
    s_read.add_argument("address", help="The address of the page (wall:shelf:volume:page:hex_address).")
    s_read.set_defaults(func=cmd_read)

    s_batch = sub.add_parser("batch", help="Locate every line of a text file.")
    s_batch.add_argument("--input", required=True, help="Text file, one page query per line.")
    s_batch.add_argument("--output", default=None, help="Write addresses here instead of stdout.")
    s_batch.add_argument("--seed", type=int, default=None, help="Seed for reproducible locations.")
    s_batch.add_argument("--quiet", action="store_true", help="Hide the progress bar.")
    s_batch.set_defaults(func=cmd_batch)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
