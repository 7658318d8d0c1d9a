"""
jss-kit - Main Entry Point

Normalizes Sitecore JSS and GraphQL JSON dumps from the command line.

Usage:
    python main.py jss rendering.json --item Hero --field Title
    python main.py gql response.json
    python main.py component layout.json ContentBlock
    python main.py fetch "{GUID}"
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from jsskit.config import get_settings
from jsskit.core import JssKitError, configure_logging
from jsskit.services import SitecoreDataService
from jsskit.transport import GraphQLClient

logger = structlog.get_logger(__name__)


def load_json(path: str) -> Any:
    """Read a JSON document from a file, or stdin when path is "-"."""
    if path == "-":
        return json.load(sys.stdin)
    return json.loads(Path(path).read_text(encoding="utf-8"))


def print_json(data: Any) -> None:
    """Write data to stdout as indented JSON."""
    print(json.dumps(data, indent=2, ensure_ascii=False))


def run_jss(service: SitecoreDataService, args: argparse.Namespace) -> Any:
    rendering = load_json(args.file)
    lookup = service.get_raw if args.raw else service.get
    return lookup(rendering, args.item, args.field)


def run_gql(service: SitecoreDataService, args: argparse.Namespace) -> Any:
    data = load_json(args.file)
    # Accept a full response body as well as a bare item
    if isinstance(data, dict) and "data" in data:
        body = data["data"] or {}
        data = body.get("item") or body.get("contextItem")
    return service.processor.process_gql_data(data)


def run_component(service: SitecoreDataService, args: argparse.Namespace) -> Any:
    service.set_data(load_json(args.file))
    return service.get_component(args.identifier)


async def run_fetch(service: SitecoreDataService, args: argparse.Namespace) -> Any:
    async with GraphQLClient() as client:
        service.graphql_client = client
        return await service.fetch(args.guid)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Normalize Sitecore JSS and GraphQL content data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        '--host',
        type=str,
        help='Asset host prefix for GraphQL images (default: JSS_HOST setting)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    jss = subparsers.add_parser('jss', help='Look up and normalize a JSS rendering')
    jss.add_argument('file', help='Rendering JSON file ("-" for stdin)')
    jss.add_argument('--item', '-i', help='Name of a nested item to look up')
    jss.add_argument('--field', '-f', help='Name of a field to look up')
    jss.add_argument('--raw', action='store_true', help='Skip normalization')

    gql = subparsers.add_parser('gql', help='Normalize a GraphQL item or response')
    gql.add_argument('file', help='GraphQL JSON file ("-" for stdin)')

    component = subparsers.add_parser('component', help='Find a rendering in layout data')
    component.add_argument('file', help='Layout service JSON file ("-" for stdin)')
    component.add_argument('identifier', help='UID, component name or datasource ID')

    fetch = subparsers.add_parser('fetch', help='Fetch and normalize an item over GraphQL')
    fetch.add_argument('guid', help='Item ID or path')

    return parser


def main() -> None:
    """Main entry point for the command line tool."""
    args = build_parser().parse_args()

    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error("settings_invalid", command=args.command, error=str(e))
        sys.exit(1)

    configure_logging(settings.log_level, settings.log_format)

    try:
        service = SitecoreDataService(host=args.host)
        if args.command == 'jss':
            result = run_jss(service, args)
        elif args.command == 'gql':
            result = run_gql(service, args)
        elif args.command == 'component':
            result = run_component(service, args)
        else:
            result = asyncio.run(run_fetch(service, args))
    except (OSError, json.JSONDecodeError) as e:
        logger.error("input_unreadable", error=str(e))
        sys.exit(2)
    except JssKitError as e:
        logger.error("command_failed", command=args.command, error=str(e))
        sys.exit(1)

    print_json(result)


if __name__ == '__main__':
    main()
