import argparse
import logging
import sys

from textual.logging import TextualHandler

from browser import run_browser
from catalog.errors import StartupError
from catalog.linkcheck import run_link_check


def _configure_logging(mode):
    if mode == "test":
        logging.basicConfig(
            level=logging.WARNING,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        return

    # Anything written to stderr would tear the full-screen UI.
    logging.basicConfig(level=logging.INFO, handlers=[TextualHandler()])


def build_parser():
    parser = argparse.ArgumentParser(
        prog="catalog-browser",
        description="Browse the remote content catalog, or check its links with 'test'.",
    )
    parser.add_argument("mode", nargs="?", choices=["test"], help="run the link health check")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    _configure_logging(args.mode)

    if args.mode == "test":
        return run_link_check()

    try:
        run_browser()
    except StartupError as exc:
        print(f"Alas, there's been an error: {exc}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
