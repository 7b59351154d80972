"""
Offset windowing over an org's filtered folder list.

``prev_token`` steps back by the page limit of the current call. A caller that
changes ``page_limit`` between calls will not land exactly on the page it came
from.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from folders.exceptions import InvalidTokenError
from folders.models.folder import Folder
from folders.utils.tokens import decode_token, encode_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Page:
    folders: list[Folder]
    next_token: str = ""
    prev_token: str = ""


def paginate(folders: Sequence[Folder], page_limit: int, token: str = "") -> Page:
    """
    Cut one page out of ``folders``.

    Args:
        folders: The filtered folders, in their stable order
        page_limit: Maximum number of folders on the page
        token: Token of the page to return; empty for the first page

    Returns:
        The page with its next and previous tokens (empty when there is none)

    Raises:
        InvalidTokenError: If the token cannot be decoded or holds a negative offset
    """
    start_index = decode_token(token) if token else 0
    if start_index < 0:
        raise InvalidTokenError("invalid token: token must be non-negative")

    total = len(folders)
    end_index = min(start_index + page_limit, total)

    page = list(folders[start_index:end_index])

    next_token = encode_token(end_index) if end_index < total else ""
    prev_token = encode_token(max(start_index - page_limit, 0)) if start_index > 0 else ""

    logger.debug(f"Paginated {total} folders: window [{start_index}, {end_index}), returned {len(page)}")
    return Page(folders=page, next_token=next_token, prev_token=prev_token)
