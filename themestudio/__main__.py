"""Entry point for `python -m themestudio`."""

import sys


def main():
    from themestudio.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
