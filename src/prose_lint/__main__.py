"""Allow running as ``python -m prose_lint``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
