#!/usr/bin/env python3
"""
Score passwords from the command line.

Loads the word list synchronously (cache first, then source), then scores each
password argument, or each line of stdin when no arguments are given.

Output per password: score<TAB>meaning<TAB>color, or one JSON object with --json.

Usage:
  python -m psw_strength.tools.analyze_password "Abc123!@"
  python -m psw_strength.tools.analyze_password --wordlist https://example.org/wordlist.json --no-cache < passwords.txt
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from typing import Iterable, TextIO

from psw_strength.config import get_settings
from psw_strength.psw_logging import get_logger
from psw_strength.scoring import AnalysisResult, StrengthScorer
from psw_strength.wordlist import WordListLoader

logger = get_logger(__name__)


def _format(result: AnalysisResult, as_json: bool) -> str:
    if as_json:
        return json.dumps(result.to_dict(), ensure_ascii=False)
    return f"{result.score}\t{result.meaning}\t{result.color}"


def _passwords(args_passwords: list[str], stdin: TextIO) -> Iterable[str]:
    if args_passwords:
        yield from args_passwords
        return
    for line in stdin:
        yield line.rstrip("\r\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score password strength (Basic16 / Comprehensive8) and print label and color.",
    )
    parser.add_argument("passwords", nargs="*", help="Passwords to score (default: read lines from stdin)")
    parser.add_argument("--wordlist", default=None, help="Word-list URL or JSON file (default: PSW_WORDLIST_SOURCE)")
    parser.add_argument("--no-cache", action="store_true", help="Do not read or write the word-list cache")
    parser.add_argument("--json", action="store_true", help="Print one JSON object per password")
    return parser


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    settings = get_settings()
    settings.configure_logging()
    config = settings.loader_config()
    if args.wordlist:
        config = replace(config, source=args.wordlist)
    if args.no_cache:
        config = replace(config, cache_path=None)

    loader = WordListLoader(config)
    if not loader.load():
        logger.warning("analyze_password_without_wordlist", source=config.source)

    scorer = StrengthScorer(loader)
    for password in _passwords(args.passwords, stdin):
        print(_format(scorer.analyze(password), args.json), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
