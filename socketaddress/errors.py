
from __future__ import annotations

from typing import Final, Optional

__all__ = ['AddressError', 'EmptyInputError', 'InvalidFormatError',
           'MissingPortError', 'BadPortError']


class AddressError(ValueError):
    """Raised when an address string could not be parsed, along with a
    human-readable message about what was wrong.

    Args:
        msg: The exception message.
        text: The address string that failed to parse.

    """

    def __init__(self, msg: str, *, text: Optional[str] = None) -> None:
        super().__init__(msg)
        self.text: Final = text


class EmptyInputError(AddressError):
    """The address string was ``None`` or empty."""

    def __init__(self, text: Optional[str] = None) -> None:
        super().__init__('Input string must not be None or empty', text=text)


class InvalidFormatError(AddressError):
    """The address string matched neither the ``host:port`` nor the
    ``[ipv6]:port`` format.

    """

    def __init__(self, text: str) -> None:
        super().__init__(f'Invalid format: {text}', text=text)


class MissingPortError(AddressError):
    """The address string had a recognizable host portion but nothing after
    the port separator, e.g. ``'example.tld:'`` or ``'[::1]'``.

    """

    def __init__(self, text: str) -> None:
        super().__init__(
            f"The 'port' portion of the address is required: {text}",
            text=text)


class BadPortError(AddressError):
    """The port portion of the address string was not a decimal integer in
    the range ``0`` to ``65535``.

    Args:
        port_text: The port portion of the address string.
        text: The address string that failed to parse.

    """

    def __init__(self, port_text: str, *, text: Optional[str] = None) -> None:
        msg = f'Invalid port number: {port_text!r}'
        if text is not None:
            msg = f'Invalid port number {port_text!r}: {text}'
        super().__init__(msg, text=text)
        self.port_text: Final = port_text
