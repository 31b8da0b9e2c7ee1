"""Module entrypoint for ``python -m cardtree``."""

from .cli import main


if __name__ == "__main__":
    main()
