"""Parse socket address strings, printing the host and port of each one.

Supported formats are hostname:port, ipv4:port, [ipv6]:port, and
[ipv6%scope]:port.

"""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter
from typing import Optional, TextIO

from . import __version__
from .address import Address
from .config import ConfigError, ParseConfig
from .errors import AddressError

__all__ = ['main', 'run']

logger = logging.getLogger(__name__)


def main() -> int:
    parser = ArgumentParser(description=__doc__,
                            formatter_class=ArgumentDefaultsHelpFormatter)
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-q', '--quiet', action='store_true',
                       help='Only log errors.')
    group.add_argument('-v', '--verbose', action='store_true',
                       help='Log debug output.')
    ParseConfig.add_arguments(parser)
    args = parser.parse_args()

    if args.quiet:
        level = logging.ERROR
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level,
                        format='%(asctime)-15s %(name)s %(message)s')

    try:
        config = ParseConfig.from_args(args)
    except ConfigError as exc:
        parser.error(str(exc))
    return run(config)


def run(config: ParseConfig, *, out: Optional[TextIO] = None) -> int:
    """Parse each configured address string, writing the results to *out*.
    Returns ``0`` if every address string was valid, ``1`` otherwise.

    Args:
        config: The parse config object.
        out: The output stream.

    """
    if out is None:
        out = sys.stdout
    failed = 0
    for text in config.addresses:
        try:
            address = config.address_parser.parse(text)
        except AddressError as exc:
            failed += 1
            if config.fail_fast:
                logger.error('%s', exc)
                break
            logger.warning('%s', exc)
        else:
            out.write(_format(address, config.output_format))
            out.write('\n')
    if failed:
        logger.info('%d of %d addresses failed to parse',
                    failed, len(config.addresses))
        return 1
    return 0


def _format(address: Address, output_format: str) -> str:
    if output_format == 'json':
        return json.dumps({'host': address.host, 'port': address.port})
    return f'{address.host}\t{address.port}'


if __name__ == '__main__':
    raise RuntimeError('Use setuptools entry_points to execute')
