"""
Opaque pagination tokens.

A token is the base64 encoding of the decimal offset into an org's filtered
folder list. Decimal digits only ever encode to characters shared by the
standard and URL-safe alphabets, so tokens can be placed in a query string
as they are.
"""

import base64
import binascii
import re

from folders.exceptions import InvalidTokenFormatError

_DECIMAL_PATTERN = re.compile(r"-?[0-9]+")


def encode_token(offset: int) -> str:
    """Encode a non-negative offset as an opaque token."""
    if offset < 0:
        raise ValueError(f"Cannot encode a negative offset: {offset}")
    return base64.b64encode(str(offset).encode("ascii")).decode("ascii")


def decode_token(token: str) -> int:
    """
    Decode a token produced by :func:`encode_token`.

    Args:
        token: The opaque token string

    Returns:
        The offset stored in the token. Negative values are returned as they are
        and left for the caller to reject.

    Raises:
        InvalidTokenFormatError: If the token is not base64 or does not hold a decimal integer
    """
    try:
        raw = base64.b64decode(token, altchars=b"-_", validate=True)
        decoded = raw.decode("ascii")
    except (binascii.Error, ValueError) as e:
        raise InvalidTokenFormatError(f"invalid token format: {e}") from e

    if not _DECIMAL_PATTERN.fullmatch(decoded):
        raise InvalidTokenFormatError("invalid token format: token does not hold an offset")

    try:
        return int(decoded)
    except ValueError as e:
        raise InvalidTokenFormatError(f"invalid token format: {e}") from e
