"""Entry point for `python -m dp_engine`."""

from dp_engine.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
