"""Command-line interface for dfimage."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from . import __version__
from .dockerfile import dockerfile_from_image, write_dockerfile
from .exceptions import ConfigurationError, DfimageError
from .utils.discovery import discover_socket
from .utils.validator import validate_output_path

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dfimage",
        usage="%(prog)s --image <image_name:tag> [--socket /path/to/docker.sock]",
        description=(
            "dfimage extracts a Dockerfile from the specified image name "
            "and prints it to STDOUT."
        ),
    )
    parser.add_argument(
        "-i", "--image",
        help="Specify the name of the image you want to inspect.",
    )
    parser.add_argument(
        "-s", "--socket",
        help="Specify the path to the docker.sock file.",
    )
    parser.add_argument(
        "-o", "--outfile",
        help="Write the output to OUTFILE.",
    )
    parser.add_argument(
        "--api-version",
        help="Engine API version to request, e.g. 1.41 (default: engine default).",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=30,
        help="Timeout in seconds for each engine request (default: 30).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"dfimage version {__version__}",
        help="Output version information and exit.",
    )
    return parser


async def run(args: argparse.Namespace) -> None:
    """Validate options, reconstruct and emit the Dockerfile."""
    if not args.image:
        raise ConfigurationError("Missing required option --image")

    socket_path = discover_socket(args.socket)
    if args.outfile:
        validate_output_path(Path(args.outfile))

    lines = await dockerfile_from_image(
        args.image,
        socket_path=socket_path,
        api_version=args.api_version,
        timeout=args.timeout,
    )

    if args.outfile:
        await write_dockerfile(args.outfile, lines)
        print(f"File successfully written to {args.outfile}.")
    else:
        for line in lines:
            print(line)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        asyncio.run(run(args))
    except DfimageError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
