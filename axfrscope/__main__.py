import argparse
import asyncio
import io
import logging
import sys

from axfrscope._logging import configure_logging
from axfrscope.axfr import Dispatcher, read_lines
from axfrscope.dns import ResolverConfig

logger = logging.getLogger('axfrscope')


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='axfrscope',
        description=(
            'Read domains from stdin, attempt a zone transfer against each of '
            'their name servers and print the hostnames found, one per line.'
        ),
    )
    parser.add_argument(
        '-ns', '--nameserver',
        default='8.8.8.8',
        help='name server to use for DNS lookups (default: %(default)s)',
    )
    parser.add_argument(
        '-t', '--threads',
        dest='concurrency',
        type=int,
        default=8,
        help='number of concurrent workers (default: %(default)s)',
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=5.0,
        help='seconds to wait for each DNS exchange (default: %(default)s)',
    )
    parser.add_argument(
        '--lifetime',
        type=float,
        default=30.0,
        help='seconds a whole zone transfer may take (default: %(default)s)',
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help='log debug output')
    verbosity.add_argument('-q', '--quiet', action='store_true', help='only log errors')
    return parser.parse_args(argv)


def _log_level(args: argparse.Namespace) -> str:
    if args.verbose:
        return 'DEBUG'
    if args.quiet:
        return 'ERROR'
    return 'WARNING'


async def run(config: ResolverConfig) -> int:
    # undecodable bytes reach the resolver as a bad name instead of aborting the batch
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors='replace')

    dispatcher = Dispatcher(config=config)
    await dispatcher.run(read_lines(sys.stdin))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(_log_level(args))

    try:
        config = ResolverConfig(
            nameserver=args.nameserver,
            concurrency=args.concurrency,
            timeout=args.timeout,
            lifetime=args.lifetime,
        )
    except ValueError as exc:
        logger.error(f'Invalid configuration: {exc}')
        return 2

    try:
        return asyncio.run(run(config))
    except KeyboardInterrupt:
        return 130


if __name__ == '__main__':
    sys.exit(main())
