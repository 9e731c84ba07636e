"""Entry point for ``python -m contraction_clock``."""

from contraction_clock.cli import main

if __name__ == "__main__":
    main()
