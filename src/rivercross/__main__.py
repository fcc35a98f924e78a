"""Allow ``python -m rivercross``."""

from rivercross.cli import main

if __name__ == "__main__":
    main()
