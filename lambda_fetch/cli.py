# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""
Command-line entry point for downloading Lambda artifacts.

Usage:
    lambda-fetch arn:aws:lambda:us-east-1:123456789012:function:my-fn
    lambda-fetch arn:aws:lambda:eu-west-1:123456789012:layer:my-layer:3 --dest layer.zip
    python -m lambda_fetch ARN --verbose
"""

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from . import __version__
from .clients.lambda_client import build_boto_config
from .clients.regional_client_factory import RegionalClientFactory
from .config import Settings, settings
from .errors import LambdaFetchError, ParseError
from .services import ArtifactFetcher, ArtifactWriter, DownloadService, ResourceResolver
from .utils.error_sanitization import sanitize_error_message

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def configure_logging(log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    # botocore and urllib3 are only interesting when debugging
    library_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    logging.getLogger("botocore").setLevel(library_level)
    logging.getLogger("urllib3").setLevel(library_level)


def build_parser(config: Settings) -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="lambda-fetch",
        description="Download the deployment package of an AWS Lambda function or layer version",
    )
    parser.add_argument(
        "arn",
        help="Lambda function ARN or layer version ARN",
    )
    parser.add_argument(
        "--dest",
        "-d",
        default=config.default_dest,
        help=f"Destination file (default: {config.default_dest})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def build_service(config: Settings) -> DownloadService:
    """Wire the download pipeline from settings."""
    factory = RegionalClientFactory(
        boto_config=build_boto_config(
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        )
    )
    return DownloadService(
        resolver=ResourceResolver(client_factory=factory.get_client),
        fetcher=ArtifactFetcher(timeout=config.download_timeout),
        writer=ArtifactWriter(create_parents=config.create_parents),
    )


def run(arn: str, dest: str, service: DownloadService) -> int:
    """
    Download one artifact and map the outcome to an exit status.

    Args:
        arn: ARN given on the command line
        dest: Destination path
        service: Configured download service

    Returns:
        Process exit status
    """
    try:
        result = asyncio.run(service.download(arn, dest))
    except ParseError as e:
        logger.debug(f"ARN rejected: {e.kind.value}")
        print(f"error: {sanitize_error_message(e)}", file=sys.stderr)
        return EXIT_USAGE
    except LambdaFetchError as e:
        logger.debug(f"Download failed: {e.kind.value}: {e.detail!r}")
        print(f"error: {sanitize_error_message(e)}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.info("Download interrupted")
        return EXIT_INTERRUPTED

    print(result.destination)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the command-line tool.

    Loads configuration, configures logging and runs one download.
    """
    try:
        config = settings()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        print(f"error: invalid configuration: {problems}", file=sys.stderr)
        return EXIT_USAGE

    args = build_parser(config).parse_args(argv)

    configure_logging("DEBUG" if args.verbose else config.log_level)

    return run(args.arn, args.dest, build_service(config))


if __name__ == "__main__":
    sys.exit(main())
