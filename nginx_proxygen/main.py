"""Main entry point for the proxygen CLI"""

import argparse
import logging
import sys

from . import __version__
from .collector import DEST, SRC, InputError, get_site
from .config import LOG_LEVELS, Settings
from .output import disable_color, print_banner
from .reader import InputReader, use_tolerant_decoding
from .render import print_conf
from .structured_logging import setup_logging
from .utils import print_newline

logger = logging.getLogger("proxygen.main")

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="proxygen",
        description="Interactive NGINX reverse proxy configuration generator",
    )
    parser.add_argument("--version", action="version", version=f"proxygen {__version__}")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--quiet", action="store_true", help="Skip the welcome banner")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for messages written to stderr (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None, stdin=None) -> int:
    """
    Run the generator once: source, destination, then the config.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    settings = Settings.from_env().with_args(args)
    setup_logging(settings)

    if not settings.color:
        disable_color()

    if settings.banner:
        print_banner(__version__)

    use_tolerant_decoding(stdin if stdin is not None else sys.stdin)
    reader = InputReader(stdin)
    try:
        src = get_site(reader, SRC)
        dest = get_site(reader, DEST)
    except InputError as e:
        logger.info("Aborting: %s (%s)", e, e.role)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print_newline()
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED

    print_conf(src, dest)
    logger.info("Generated config for %s -> %s", src.address, dest.address)
    return EXIT_SUCCESS


def run():
    """Console script entry point"""
    use_tolerant_decoding(sys.stdout)
    sys.exit(main())


if __name__ == "__main__":
    run()
