from __future__ import annotations
import sys
from modprofile.app import run_app


def main() -> int:
    """Module entrypoint for `python -m modprofile.main` and the `modprofile-editor` script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
