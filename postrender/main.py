from __future__ import annotations
import sys
from postrender.app import run_app


def main() -> int:
    """Module entrypoint for `python -m postrender.main` and the `post-render` script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
