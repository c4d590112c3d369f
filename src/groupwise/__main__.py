"""Allow running as ``python -m groupwise``."""

from groupwise.cli import main

if __name__ == "__main__":
    main()
