
from __future__ import annotations

import os
from argparse import ArgumentParser, Namespace
from collections.abc import Sequence
from pathlib import Path
from typing import final, TypeVar, Final, Any, Optional

from .address import Address, AddressParser

__all__ = ['OUTPUT_FORMATS', 'ConfigT_co', 'ConfigError', 'ParseConfig']

#: The supported output formats for parsed addresses.
OUTPUT_FORMATS: Final = ('text', 'json')

#: Covariant type variable for :class:`ParseConfig` sub-classes.
ConfigT_co = TypeVar('ConfigT_co', bound='ParseConfig', covariant=True)


class ConfigError(Exception):
    """Raised when the configuration is insufficient or invalid for parsing
    addresses, along with a human-readable message about what was wrong.

    """
    pass


class ParseConfig:
    """Configure which address strings are parsed, and how.

    Args:
        addresses: The address strings to parse.
        address_type: Override the :class:`~socketaddress.address.Address`
            implementation.
        fail_fast: Stop at the first address string that fails to parse.
        output_format: How parsed addresses are written, ``'text'`` or
            ``'json'``.

    Raises:
        ConfigError: The given configuration was invalid.

    """

    def __init__(self, *, addresses: Sequence[str],
                 address_type: type[Address] = Address,
                 fail_fast: bool = False,
                 output_format: str = 'text') -> None:
        super().__init__()
        self.addresses: Final = addresses
        self.address_parser: Final = AddressParser(address_type)
        self.fail_fast: Final = fail_fast
        self.output_format: Final = output_format
        self._validate()

    def _validate(self) -> None:
        if not self.addresses:
            raise ConfigError('At least one address string is required.')
        elif self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f'Unknown output format: {self.output_format!r}')

    @classmethod
    def add_arguments(cls, parser: ArgumentParser, *,
                      prefix: str = '--') -> None:
        """Add command-line based configuration for parsing addresses.

        Note:
            Arguments added should use *prefix* and explicitly provide a unique
            name, e.g.::

                parser.add_argument(f'{prefix}arg', dest='sa_arg', ...)

            This prevents collision with other argument names and allows custom
            *prefix* values without affecting the :class:`~argparse.Namespace`.

        Args:
            parser: The argument parser.
            prefix: The prefix for added arguments, which should start with
                ``--`` and end with ``-``, e.g. ``'--'`` or ``'--foo-'``.

        """
        group = parser.add_argument_group('address options')
        group.add_argument('sa_addresses', metavar='ADDRESS', nargs='*',
                           help='An address string, e.g. host:port.')
        group.add_argument(f'{prefix}fail-fast', dest='sa_fail_fast',
                           action='store_true',
                           help='Stop at the first invalid address.')
        group.add_argument(f'{prefix}format', dest='sa_format',
                           choices=OUTPUT_FORMATS, default='text',
                           help='Output format for parsed addresses.')

    @classmethod
    def _get_env(cls, env_prefix: str, env: str) -> Optional[str]:
        env_file_val = os.getenv(f'{env_prefix}_{env}_FILE')
        if env_file_val is not None:
            env_path = Path(env_file_val).expanduser()
            try:
                with open(env_path, 'r') as env_file:
                    return env_file.read().rstrip('\r\n')
            except OSError as exc:
                raise ConfigError(
                    f'Could not read {env_prefix}_{env}_FILE: {exc}') from exc
        return os.getenv(f'{env_prefix}_{env}')

    @classmethod
    def _get_env_list(cls, env_prefix: str, env: str) -> Sequence[str]:
        env_val = cls._get_env(env_prefix, env)
        if env_val:
            return [item for line in env_val.splitlines()
                    for item in line.split(',') if item]
        else:
            return []

    @classmethod
    def parse_args(cls, args: Namespace, *,
                   env_prefix: str = 'SOCKET_ADDRESS') -> dict[str, Any]:
        """Parse the given :class:`~argparse.Namespace` into a dictionary of
        keyword arguments for the :class:`ParseConfig` constructor.

        The addresses default to environment variables if not given in
        *args*:

        ``SOCKET_ADDRESS_ADDRESSES``
          Comma-separated address strings.

        ``SOCKET_ADDRESS_ADDRESSES_FILE``
          Path to a file of address strings, one per line.

        Args:
            args: The command-line arguments.
            env_prefix: Prefix for the environment variables.

        """
        addresses = args.sa_addresses or \
            cls._get_env_list(env_prefix, 'ADDRESSES')
        return {'addresses': addresses,
                'fail_fast': args.sa_fail_fast,
                'output_format': args.sa_format}

    @final
    @classmethod
    def from_args(cls: type[ConfigT_co], args: Namespace,
                  **overrides: Any) -> ConfigT_co:
        """Build and return a new config object. This first calls
        :meth:`.parse_args` and then passes the results as keyword arguments
        to the constructor.

        Args:
            args: The command-line arguments.
            overrides: Keyword arguments to override.

        """
        kwargs = cls.parse_args(args)
        kwargs |= overrides
        return cls(**kwargs)
