"""Entry script for running the propagation analysis from a checkout."""

from token_propagation.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
