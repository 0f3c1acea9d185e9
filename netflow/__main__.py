"""Allow ``python -m netflow``."""

from netflow.cli import main

if __name__ == "__main__":
    main()
