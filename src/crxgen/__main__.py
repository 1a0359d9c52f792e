"""Module entrypoint for ``python -m crxgen``."""

from crxgen.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
