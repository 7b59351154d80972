from .identifiers import is_valid_uuid_v4, normalize_org_id
from .tokens import decode_token, encode_token

__all__ = [
    "decode_token",
    "encode_token",
    "is_valid_uuid_v4",
    "normalize_org_id",
]
