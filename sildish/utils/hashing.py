"""Content hashes for exported catalogs, labelled "blake2b:<hex>"."""

import hashlib
import json
from typing import Any


HASH_PREFIX = "blake2b"
DIGEST_SIZE = 32


def hash_bytes(data: bytes) -> str:
    return f"{HASH_PREFIX}:{hashlib.blake2b(data, digest_size=DIGEST_SIZE).hexdigest()}"


def hash_string(text: str, encoding: str = "utf-8") -> str:
    return hash_bytes(text.encode(encoding))


def hash_json(data: Any) -> str:
    """
    Hash a JSON value independently of key order and whitespace.

    Non-ASCII characters, including Private Use Area glyphs, are hashed as
    UTF-8 rather than as escapes.
    """
    canonical = json.dumps(data, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    return hash_string(canonical)


def verify_hash(data: bytes, expected_hash: str) -> bool:
    return hash_bytes(data) == expected_hash
