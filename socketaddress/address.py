
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Optional

from .errors import EmptyInputError, InvalidFormatError, MissingPortError, \
    BadPortError
from .state import Ipv4State, Ipv6State, DIGITS, IPV6_HOST_CHARS, \
    IPV6_SCOPE_CHARS

__all__ = ['MAX_PORT', 'Address', 'AddressParser', 'parse_address']

logger = logging.getLogger(__name__)

#: The largest valid port number.
MAX_PORT: Final = 65535


@dataclass(frozen=True, order=True)
class Address:
    """Manages an address for socket connections.

    Args:
        host: The address hostname string.
        port: The address port number.

    """

    host: str
    port: int

    @classmethod
    def get(cls, addr: tuple[str, int]) -> Address:
        """Return an :class:`Address` from a ``(host, port)`` tuple.

        Args:
            addr: The address tuple from :mod:`socket` functions.

        """
        return cls(addr[0], addr[1])

    def __str__(self) -> str:
        if ':' in self.host:
            return f'[{self.host}]:{self.port}'
        return ':'.join((self.host, str(self.port)))


class AddressParser:
    """Parses address strings in one of the following formats:

    * ``hostname:port``, e.g. ``'localhost:8080'``
    * ``ipv4:port``, e.g. ``'192.168.0.1:1234'``
    * ``[ipv6]:port``, e.g. ``'[::1]:9999'``
    * ``[ipv6%scope]:port``, e.g. ``'[fe80::1%eth0]:22'``

    The host is not resolved or validated as an IP address, and the scope of
    an IPv6 address is not included in the resulting host.

    Args:
        address_type: Override the :class:`Address` implementation.

    """

    def __init__(self, address_type: type[Address] = Address) -> None:
        super().__init__()
        self.address_type: Final = address_type

    def parse(self, text: Optional[str]) -> Address:
        """Parse the address string, trying the ``host:port`` format before
        the ``[ipv6]:port`` format.

        Args:
            text: The address string.

        Raises:
            EmptyInputError: *text* was ``None`` or empty.
            InvalidFormatError: *text* matched neither format.
            MissingPortError: *text* did not have a port number.
            BadPortError: The port number was out of range.

        """
        if not text:
            raise EmptyInputError(text)
        address = self.parse_ipv4_or_host(text)
        if address is None:
            address = self.parse_ipv6(text)
        if address is None:
            raise InvalidFormatError(text)
        return address

    def parse_ipv4_or_host(self, text: str) -> Optional[Address]:
        """Parse a ``host:port`` address string, where the host is everything
        up to the first ``:``. Returns ``None`` if *text* is not in this
        format.

        Args:
            text: The address string.

        Raises:
            MissingPortError: Nothing followed the ``:``.
            BadPortError: The port number was out of range.

        """
        state = Ipv4State.HOST
        separator_index = -1
        for i, char in enumerate(text):
            if char == '[':
                logger.debug('Declined as host:port at %d: %r', i, text)
                return None
            elif state is Ipv4State.HOST:
                if char == ':':
                    separator_index = i
                    state = Ipv4State.PORT
            elif char not in DIGITS:
                logger.debug('Declined as host:port at %d: %r', i, text)
                return None
        if separator_index == -1:
            logger.debug('Declined as host:port, no separator: %r', text)
            return None
        elif separator_index == len(text) - 1:
            raise MissingPortError(text)
        return self.build_address(text[:separator_index],
                                  text[separator_index + 1:],
                                  text=text)

    def parse_ipv6(self, text: str) -> Optional[Address]:
        """Parse an ``[ipv6]:port`` or ``[ipv6%scope]:port`` address string.
        Returns ``None`` if *text* is not in this format.

        Args:
            text: The address string.

        Raises:
            MissingPortError: The closing ``]`` was not followed by a ``:`` and
                port number.
            BadPortError: The port number was out of range.

        """
        state = Ipv6State.START_ADDR
        port_index = -1
        scope_index = -1
        for i, char in enumerate(text):
            if state is Ipv6State.START_ADDR:
                if char != '[':
                    break
                state = Ipv6State.HOST
            elif state is Ipv6State.HOST:
                if char == ']':
                    state = Ipv6State.END_ADDR
                elif char == '%':
                    scope_index = i
                    state = Ipv6State.SCOPE
                elif char not in IPV6_HOST_CHARS:
                    break
            elif state is Ipv6State.SCOPE:
                if char == ']':
                    state = Ipv6State.END_ADDR
                elif char not in IPV6_SCOPE_CHARS:
                    break
            elif state is Ipv6State.END_ADDR:
                if char != ':':
                    break
                port_index = i
                state = Ipv6State.PORT
            elif char not in DIGITS:
                break
        else:
            if state is Ipv6State.START_ADDR:
                return None
            elif port_index == -1 or port_index == len(text) - 1:
                raise MissingPortError(text)
            end_index = scope_index if scope_index != -1 else port_index - 1
            return self.build_address(text[1:end_index],
                                      text[port_index + 1:],
                                      text=text)
        logger.debug('Declined as [ipv6]:port in state %s: %r',
                     state.name, text)
        return None

    def build_address(self, host: str, port_text: str, *,
                      text: Optional[str] = None) -> Address:
        """Construct a new address from the *host* and the decimal port
        number string.

        Args:
            host: The address hostname string.
            port_text: The address port number string.
            text: The original address string, for error reporting.

        Raises:
            BadPortError: *port_text* was not a number from 0 to 65535.

        """
        try:
            port = int(port_text.lstrip('0') or '0', 10)
        except ValueError as exc:
            raise BadPortError(port_text, text=text) from exc
        if port < 0 or port > MAX_PORT:
            raise BadPortError(port_text, text=text)
        return self.address_type(host, port)


_default_parser = AddressParser()


def parse_address(text: Optional[str]) -> Address:
    """Parse the address string with the default :class:`AddressParser`.

    See Also:
        :meth:`AddressParser.parse`

    Args:
        text: The address string.

    """
    return _default_parser.parse(text)
