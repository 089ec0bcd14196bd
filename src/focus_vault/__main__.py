"""Entry point for `python -m focus_vault`."""

import sys


def main():
    from focus_vault.app import run
    sys.exit(run())


if __name__ == "__main__":
    main()
