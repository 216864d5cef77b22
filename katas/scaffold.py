"""Create the directory and starter files for a new kata."""

from __future__ import annotations

import sys
from pathlib import Path

TEMPLATE = "package kata \n\n"
FILES = ("kata.go", "kata_test.go")


class ScaffoldError(Exception):
    """Raised when a kata directory or file cannot be created."""


def create_kata(name: str, base: str | Path = ".") -> Path:
    """Create ``base/name`` holding the starter files; return the new directory."""
    folder = Path(base) / name
    try:
        folder.mkdir(mode=0o777)
    except OSError as exc:
        raise ScaffoldError(f"could not create dir {str(folder)!r}") from exc
    for filename in FILES:
        path = folder / filename
        try:
            path.write_text(TEMPLATE, encoding="utf-8")
        except OSError as exc:
            raise ScaffoldError(f"could not create file {str(path)!r}") from exc
    return folder


def main(argv: list[str] | None = None) -> int:
    """Create a kata named after the arguments joined with dashes."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("no name given", file=sys.stderr)
        return 1
    try:
        create_kata("-".join(args))
    except ScaffoldError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())