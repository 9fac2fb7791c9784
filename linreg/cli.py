"""
Building a Large Language Model from Scratch
— A Step-by-Step Guide Using Python and PyTorch

(c) Dr. Yves J. Hilpisch (The Python Quants GmbH)
AI-Powered by GPT-5.

Command-line trainer for univariate linear regression.

Usage:
  linreg input-target.txt
  linreg input-target.txt settings.txt
  python -m linreg input-target.txt settings.txt
"""

from __future__ import annotations


import argparse
import sys
from contextlib import nullcontext
from typing import List, Optional

from linreg.gradient import DegenerateInputError
from linreg.series import read_pairs
from linreg.settings import SettingsError, parse_settings, resolve_config
from linreg.train import check_series, train

EPILOG = """\
<input-target pairs file> example (two integers per pair):
  1 2
  2 3
  3 4
  123 432
  10 1
  -10 37

<initial settings file> example:
  w 0.0
  b 0.0
  alpha 0.00001
  iterations 100000
  output stdout
  log-every 100

Settings:
  w           initial weight
  b           initial bias
  alpha       learning rate
  iterations  steps to train, inclusive from 0
              (1000 runs 0..1000, i.e. 1001 steps)
  log-every   log every N steps (100 logs 0, 100, 200, ...)
  output      file to write progress to (stdout or unset: standard output)

The settings file is optional; without it the values above are used. It may
set any subset of the keys in any order, e.g.

  log-every 1000
  w 100

is a valid settings file.
"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="linreg",
        description="Fit y = w*x + b with batch gradient descent",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("pairs", help="input-target pairs file")
    p.add_argument("settings", nargs="?", help="initial settings file")
    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    try:
        return build_parser().parse_args(argv)
    except SystemExit as e:
        # argparse exits 2 on bad usage; this tool reports all failures as 1
        if e.code not in (0, None):
            print("\n" + EPILOG, file=sys.stderr, end="")
            raise SystemExit(1)
        raise


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    try:
        # undecodable bytes become U+FFFD and end up as malformed records
        with open(args.pairs, encoding="utf-8", errors="replace") as f:
            x, y = read_pairs(f)
    except OSError as e:
        raise SystemExit(f"Error opening input-target pairs file: {e}")
    try:
        check_series(x, y)
    except DegenerateInputError as e:
        raise SystemExit(f"Error: {e} in {args.pairs}")

    pairs = None
    if args.settings is not None:
        try:
            with open(args.settings, encoding="utf-8", errors="replace") as f:
                pairs = parse_settings(f)
        except OSError as e:
            raise SystemExit(f"Error opening settings file: {e}")
    try:
        cfg = resolve_config(pairs)
    except SettingsError as e:
        raise SystemExit(f"Error in settings: {e}")

    # Only a file we opened here gets closed; stdout stays open
    try:
        sink = (
            open(cfg.output, "w", encoding="utf-8")
            if cfg.output is not None
            else nullcontext(sys.stdout)
        )
    except OSError as e:
        raise SystemExit(f"Error opening output file: {e}")
    with sink as out:
        train(x, y, cfg, out=out, keep_records=False)


if __name__ == "__main__":
    main()
