"""
Detail Key Hashing
Replaces field names in equipment detail records with short SHA-256 digests,
keeping a reverse lookup table from digest to original name
"""
import hashlib
import threading
from typing import Any, Dict, Mapping, Optional
import logging

logger = logging.getLogger(__name__)

DEFAULT_DIGEST_BYTES = 8


class KeyHashRegistry:
    """
    Session-scoped digest -> field name table

    Grows monotonically; a digest written twice keeps the last name (collisions
    are not detected). Safe to share between threads.
    """

    def __init__(self, digest_bytes: int = DEFAULT_DIGEST_BYTES):
        """
        Initialize the registry.

        Args:
            digest_bytes: SHA-256 bytes kept per digest (hex length is twice this)
        """
        self.digest_bytes = digest_bytes
        self._keys: Dict[str, str] = {}
        self._lock = threading.Lock()

    def register(self, digest: str, key: str) -> None:
        with self._lock:
            self._keys[digest] = key

    def lookup(self, digest: str) -> Optional[str]:
        """Original field name for a digest, or None"""
        with self._lock:
            return self._keys.get(digest)

    def as_dict(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._keys)

    def __contains__(self, digest: object) -> bool:
        with self._lock:
            return digest in self._keys

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)


def digest_key(key: str, digest_bytes: int = DEFAULT_DIGEST_BYTES) -> str:
    """Hex prefix of the SHA-256 digest of a field name"""
    return hashlib.sha256(key.encode("utf-8")).digest()[:digest_bytes].hex()


def hash_key(key: str, registry: KeyHashRegistry) -> str:
    """Digest a field name and record it in the registry"""
    digest = digest_key(key, registry.digest_bytes)
    registry.register(digest, key)
    return digest


def hash_equipment_keys(record: Mapping[str, Any], registry: KeyHashRegistry) -> Dict[str, Any]:
    """
    Recursively replace every field name with its digest

    Nested mappings are rewritten after their parent key is digested; lists and
    scalars are kept as they are. Field order is preserved.

    Args:
        record: Detail record
        registry: Registry receiving digest -> name entries

    Returns:
        New record keyed by digests
    """
    hashed: Dict[str, Any] = {}
    for key, value in record.items():
        digest = hash_key(str(key), registry)
        if isinstance(value, Mapping):
            hashed[digest] = hash_equipment_keys(value, registry)
        else:
            hashed[digest] = value
    return hashed
