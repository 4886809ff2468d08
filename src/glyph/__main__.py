"""Allow running as ``python -m glyph``."""

from .cli import main

if __name__ == "__main__":
    main()
