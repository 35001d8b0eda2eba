"""Module entrypoint for ``python -m signalhound``."""

from signalhound.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
