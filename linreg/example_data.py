"""Self-contained example workspace with sample trainer inputs.

Creates a folder in the current working directory holding an
``input-target.txt`` pairs file and a ``settings.txt`` file, the same
examples the CLI help shows, and (optionally) cleans them up when done.

Usage (CLI):
  python -m linreg.example_data create [--keep]
  python -m linreg.example_data path     # print last created path
  python -m linreg.example_data cleanup <path>

Usage (Python):
  from linreg.cli import main
  from linreg.example_data import ExampleWorkspace
  with ExampleWorkspace().create_defaults() as ws:
      main([str(ws.pairs_path), str(ws.settings_path)])
"""
from __future__ import annotations

import argparse
import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path

_LAST_PATH_FILE = Path(".example_workspace_path")

PAIRS_FILE = "input-target.txt"
SETTINGS_FILE = "settings.txt"

DEFAULT_FILES = {
    PAIRS_FILE: "1 2\n2 3\n3 4\n123 432\n10 1\n-10 37\n",
    SETTINGS_FILE: (
        "w 0.0\n"
        "b 0.0\n"
        "alpha 0.00001\n"
        "iterations 100000\n"
        "output stdout\n"
        "log-every 100\n"
    ),
}


@dataclass
class ExampleWorkspace:
    base_dir: Path = field(default_factory=Path.cwd)
    name: str | None = None
    cleanup_on_exit: bool = True

    def __post_init__(self) -> None:
        if self.name is None:
            stamp = time.strftime("%Y%m%d-%H%M%S")
            self.name = f"linreg-example-{stamp}"
        self.root = Path(self.base_dir) / self.name  # type: ignore[attr-defined]

    @property
    def pairs_path(self) -> Path:
        return self.root / PAIRS_FILE

    @property
    def settings_path(self) -> Path:
        return self.root / SETTINGS_FILE

    def create(self) -> "ExampleWorkspace":
        self.root.mkdir(parents=True, exist_ok=True)
        _LAST_PATH_FILE.write_text(str(self.root))
        return self

    def create_defaults(self) -> "ExampleWorkspace":
        self.create()
        for fname, text in DEFAULT_FILES.items():
            (self.root / fname).write_text(text)
        return self

    def add_text(self, filename: str, content: str) -> Path:
        p = self.root / filename
        p.write_text(content)
        return p

    def cleanup(self) -> None:
        if self.root.exists():
            shutil.rmtree(self.root)
        if _LAST_PATH_FILE.exists():
            _LAST_PATH_FILE.unlink()

    # Context manager API
    def __enter__(self) -> "ExampleWorkspace":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        if self.cleanup_on_exit:
            self.cleanup()


def _cmd_create(args: argparse.Namespace) -> None:
    ws = ExampleWorkspace(cleanup_on_exit=not args.keep)
    ws.create_defaults()
    print(ws.root)
    print(f"Run: linreg {ws.pairs_path} {ws.settings_path}")


def _cmd_path(_: argparse.Namespace) -> None:
    if _LAST_PATH_FILE.exists():
        print(_LAST_PATH_FILE.read_text())
    else:
        print("No workspace recorded. Use 'create' first.")


def _cmd_cleanup(args: argparse.Namespace) -> None:
    target = Path(args.path).resolve()
    if not target.exists():
        print("No such path:", target)
        return
    shutil.rmtree(target)
    if _LAST_PATH_FILE.exists():
        last = Path(_LAST_PATH_FILE.read_text().strip()).resolve()
        if last == target:
            _LAST_PATH_FILE.unlink()
    print("Removed:", target)


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(prog="linreg.example_data", add_help=True)
    sub = p.add_subparsers(dest="cmd", required=True)

    c = sub.add_parser("create", help="create a workspace with sample pairs and settings")
    c.add_argument("--keep", action="store_true", help="do not auto-clean later")
    c.set_defaults(func=_cmd_create)

    sub.add_parser("path", help="print last workspace path").set_defaults(func=_cmd_path)

    d = sub.add_parser("cleanup", help="remove a workspace path")
    d.add_argument("path", help="path to workspace directory")
    d.set_defaults(func=_cmd_cleanup)

    ns = p.parse_args(argv)
    ns.func(ns)


if __name__ == "__main__":
    main()
