import argparse
import logging
import sys
from typing import Optional

from local_tools.aws_session import build_client, build_session
from local_tools.default_config import DEFAULT_AWS_PROFILE, DEFAULT_REGION
from local_tools.stack_env_vars import CollectionResult, StackEnvCollector, export_stack_variables

'''
USAGE

get-stack-vars MyStackName
get-stack-vars MyStackName locals.json --profile dev --region eu-west-1
'''

logger = logging.getLogger(__name__)


def run(
    stack_name: str,
    output: Optional[str] = None,
    profile: str = DEFAULT_AWS_PROFILE,
    region: str = DEFAULT_REGION,
) -> CollectionResult:
    """Programmatic entry point that collects and optionally writes the stack's Lambda variables."""
    session = build_session(profile)
    collector = StackEnvCollector(
        build_client(session, "cloudformation", region=region),
        build_client(session, "lambda", region=region),
    )
    logger.info(f"🔄 Collecting Lambda environment variables for stack {stack_name} ({region})")
    return export_stack_variables(collector, stack_name, output)


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        if "stack_name" in message:
            self.exit(2, "CloudFormation stack required!\n")
        super().error(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="get-stack-vars",
        description="Print the environment variables of every Lambda function in a CloudFormation stack.",
    )
    parser.add_argument("stack_name", help="CloudFormation (or SAM) stack name")
    parser.add_argument("output_file", nargs="?", default=None,
                        help='Optional JSON file to write as {"Parameters": {...}}')
    parser.add_argument("--profile", default=DEFAULT_AWS_PROFILE, help="AWS profile to use")
    parser.add_argument("--region", default=DEFAULT_REGION, help=f"AWS region (default: {DEFAULT_REGION})")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        run(args.stack_name, output=args.output_file, profile=args.profile, region=args.region)
    except Exception as e:
        logger.error(f"❌ Failed to collect variables: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
