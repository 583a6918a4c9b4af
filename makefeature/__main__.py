"""Entry point for ``python -m makefeature``."""

from makefeature.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
