import argparse
import logging
import sys
from typing import Optional

from local_tools.aws_session import build_client, build_session, get_available_aws_profiles
from local_tools.default_config import DEFAULT_LIMIT, DEFAULT_LOCAL_ENDPOINT, DEFAULT_REGION
from local_tools.dynamo_local_import import DynamoLocalImporter

'''
USAGE

import-dynamodb-local --table-name my-table --limit 100
import-dynamodb-local -t my-table -r eu-west-1 -e http://localhost:4566 --limit 0 --all-pages
'''

logger = logging.getLogger(__name__)


def run(
    table_name: str,
    region: str = DEFAULT_REGION,
    local_endpoint: str = DEFAULT_LOCAL_ENDPOINT,
    remote_endpoint: Optional[str] = None,
    limit: int = DEFAULT_LIMIT,
    profile: Optional[str] = None,
    all_pages: bool = False,
) -> int:
    """Programmatic entry point. Returns the number of items written locally."""
    session = build_session(profile)
    remote_client = build_client(session, "dynamodb", region=region, endpoint_url=remote_endpoint)
    local_client = build_client(session, "dynamodb", region=region, endpoint_url=local_endpoint)

    logger.info(f"Remote table '{table_name}' in {region} -> local endpoint {local_endpoint}")

    importer = DynamoLocalImporter(
        remote_client,
        local_client,
        table_name,
        limit=limit,
        all_pages=all_pages,
    )
    return importer.export_and_import()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="import-dynamodb-local",
        description="Copy a remote DynamoDB table's schema and items into a local DynamoDB.",
    )
    parser.add_argument("--table-name", "-t", required=True, help="The name of the remote DynamoDB table")
    parser.add_argument(
        "--region",
        "-r",
        default=DEFAULT_REGION,
        help=f"The region of the remote DynamoDB table (default: {DEFAULT_REGION})",
    )
    parser.add_argument("--remote-endpoint", default=None, help="The endpoint of the remote DynamoDB table")
    parser.add_argument(
        "--local-endpoint",
        "-e",
        default=DEFAULT_LOCAL_ENDPOINT,
        help=f"The endpoint of the local DynamoDB (default: {DEFAULT_LOCAL_ENDPOINT})",
    )
    parser.add_argument(
        "--limit",
        "-l",
        type=int,
        default=DEFAULT_LIMIT,
        help=f"The limit of items to export and import (default: {DEFAULT_LIMIT}, 0 for all items)",
    )
    parser.add_argument(
        "--profile",
        "-p",
        default=None,
        help=f"AWS profile for the remote account (Available: {', '.join(get_available_aws_profiles())})",
    )
    parser.add_argument("--all-pages", action="store_true", help="Follow scan pagination on the remote table")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.limit < 0:
        logger.error("--limit must be 0 or a positive number")
        return 2

    try:
        run(
            table_name=args.table_name,
            region=args.region,
            local_endpoint=args.local_endpoint,
            remote_endpoint=args.remote_endpoint,
            limit=args.limit,
            profile=args.profile,
            all_pages=args.all_pages,
        )
    except Exception as e:
        logger.error(f"❌ Import failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
