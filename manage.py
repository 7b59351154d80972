#!/usr/bin/env python3
"""
Organization folders command line

Prints an organization's folders, all at once or one page at a time, and
generates sample datasets.

Usage:
    python manage.py [--mode MODE] [--org-id ORG_ID] [--limit N] [--token TOKEN] [--output PATH]

Modes:
    - list: Print every folder of the org (default)
    - page: Print one page of the org's folders
    - generate: Write a generated sample dataset to --output

Environment Variables:
    FOLDERS_DATA_FILE: JSON dataset to read instead of the generated sample
    FOLDERS_SAMPLE_SIZE: Number of generated sample folders
    FOLDERS_SAMPLE_SEED: Seed of the generated sample
"""

import argparse
import logging
import os
import sys

os.environ.setdefault("ENVIRONMENT", "development")
from folders.container import ApplicationContainer  # noqa: E402
from folders.data.sample import DEFAULT_ORG_ID, generate_sample_folders, write_sample_file  # noqa: E402
from folders.exceptions import BaseError  # noqa: E402
from folders.models import FetchFolderRequest, FetchFolderRequestWithPag  # noqa: E402
from logging_config import setup_logging  # noqa: E402
from settings import settings  # noqa: E402

logger = logging.getLogger(__name__)


def list_folders(container: ApplicationContainer, org_id: str) -> None:
    """Print every folder of an org."""
    folder_controller = container.controllers.folder_controller()
    response = folder_controller.fetch_all_folders(FetchFolderRequest(org_id=org_id))
    print(response.model_dump_json(indent=2, by_alias=True))


def page_folders(container: ApplicationContainer, org_id: str, limit: int, token: str) -> None:
    """Print one page of an org's folders."""
    folder_controller = container.controllers.folder_controller()
    response = folder_controller.fetch_folders_paginated(
        FetchFolderRequestWithPag(org_id=org_id, page_limit=limit, token=token)
    )
    print(response.model_dump_json(indent=2, by_alias=True))


def generate(output: str) -> None:
    """Write a generated dataset to ``output``."""
    folders = generate_sample_folders(
        size=settings.folders.sample_size,
        seed=settings.folders.sample_seed,
        org_count=settings.folders.sample_org_count,
    )
    write_sample_file(output, folders)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Organization folders")
    parser.add_argument("--mode", choices=["list", "page", "generate"], default="list", help="Operating mode")
    parser.add_argument("--org-id", default=DEFAULT_ORG_ID, help="Organization ID")
    parser.add_argument("--limit", type=int, default=10, help="Page size for --mode page")
    parser.add_argument("--token", default="", help="Page token for --mode page")
    parser.add_argument("--output", help="Dataset path for --mode generate")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging()
    container = ApplicationContainer()

    try:
        if args.mode == "list":
            list_folders(container, args.org_id)
        elif args.mode == "page":
            page_folders(container, args.org_id, args.limit, args.token)
        elif args.mode == "generate":
            if not args.output:
                parser.error("--output is required with --mode generate")
            generate(args.output)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except BaseError as e:
        logger.error(f"Request failed; {e}", extra=e.extra)
        sys.exit(1)
    except Exception:
        logger.exception("Application failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
