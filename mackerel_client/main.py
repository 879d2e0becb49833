"""
Command line entry point for managing Mackerel monitors.
"""

import argparse
import json
from dataclasses import replace
import sys
import logging
from typing import List, Optional

import yaml

from mackerel_client.client import MonitorClient
from mackerel_client.config import ClientConfig, config_from_env, load_config
from mackerel_client.errors import MackerelError, TransportError
from mackerel_client.monitors import Monitor, monitor_from_dict

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser"""
    parser = argparse.ArgumentParser(
        prog='mackerel-monitors',
        description='List, create, update and delete Mackerel monitors'
    )
    parser.add_argument(
        '--config',
        help='YAML configuration file (defaults to MACKEREL_APIKEY from the environment)'
    )
    parser.add_argument('--verbose', action='store_true', help='Log HTTP requests')

    commands = parser.add_subparsers(dest='command', required=True)

    commands.add_parser('list', help='List all monitors')

    create = commands.add_parser('create', help='Create a monitor from a YAML or JSON file')
    create.add_argument('file')

    update = commands.add_parser('update', help='Replace a monitor with a YAML or JSON definition')
    update.add_argument('id')
    update.add_argument('file')

    delete = commands.add_parser('delete', help='Delete a monitor')
    delete.add_argument('id')

    return parser


def read_monitor(path: str) -> Monitor:
    """
    Read a monitor definition.

    YAML is a superset of JSON, so both formats are accepted.

    Args:
        path: Definition file

    Returns:
        Monitor instance
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    return monitor_from_dict(data)


def _load_client_config(args: argparse.Namespace) -> ClientConfig:
    config = load_config(args.config) if args.config else config_from_env()
    if args.verbose and not config.verbose:
        config = replace(config, verbose=True)
    return config


def run(args: argparse.Namespace, client: MonitorClient) -> None:
    """Execute a parsed command and print its JSON result"""
    if args.command == 'list':
        monitors = client.find_monitors()
        result = {'monitors': [m.to_dict() for m in monitors]}
    elif args.command == 'create':
        result = client.create_monitor(read_monitor(args.file)).to_dict()
    elif args.command == 'update':
        result = client.update_monitor(args.id, read_monitor(args.file)).to_dict()
    else:
        deleted = client.delete_monitor(args.id)
        result = deleted.to_dict() if deleted else {}

    print(json.dumps(result, indent=2))


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    try:
        config = _load_client_config(args)
        if config.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        client = MonitorClient.from_config(config)
        try:
            run(args, client)
        finally:
            client.transport.close()
    except (MackerelError, TransportError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        logger.error(f"Invalid monitor definition: {e}")
        return 1
    except OSError as e:
        # TransportError is an OSError too, so this comes after it
        logger.error(f"Cannot read file: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
