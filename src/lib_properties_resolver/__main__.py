"""``python -m lib_properties_resolver`` entry point; forwards argv to :func:`cli.main`."""

from __future__ import annotations

import sys

from .cli import main


if __name__ == "__main__":  # pragma: no cover - exercised via python -m
    raise SystemExit(main(sys.argv[1:]))
