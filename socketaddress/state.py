
from __future__ import annotations

from enum import auto, Enum
from typing import Final

__all__ = ['Ipv4State', 'Ipv6State', 'DIGITS', 'IPV6_HOST_CHARS',
           'IPV6_SCOPE_CHARS']

#: ASCII decimal digits. :meth:`str.isdigit` is not used because it also
#: accepts non-ASCII digits.
DIGITS: Final = frozenset('0123456789')

#: Characters allowed between the brackets of an IPv6 address, before any
#: ``%`` scope separator.
IPV6_HOST_CHARS: Final = DIGITS | frozenset('abcdefABCDEF:')

#: Characters allowed in an IPv6 scope, or zone identifier, e.g. ``eth0``.
IPV6_SCOPE_CHARS: Final = DIGITS | frozenset(
    'abcdefghijklmnopqrstuvwxyz'
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    '_-.~')


class Ipv4State(Enum):
    """States while parsing a ``host:port`` address string, where the host is
    a hostname or an IPv4 address.

    """

    #: Everything up to the first ``:``.
    HOST = auto()

    #: The decimal digits after the first ``:``.
    PORT = auto()


class Ipv6State(Enum):
    """States while parsing an ``[ipv6]:port`` or ``[ipv6%scope]:port``
    address string.

    """

    #: Expecting the opening ``[``.
    START_ADDR = auto()

    #: Hexadecimal digits and ``:`` up to a ``]`` or ``%``.
    HOST = auto()

    #: The zone identifier between ``%`` and ``]``.
    SCOPE = auto()

    #: Expecting the ``:`` after the closing ``]``.
    END_ADDR = auto()

    #: The decimal digits after ``]:``.
    PORT = auto()
