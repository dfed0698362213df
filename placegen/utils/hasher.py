"""Content hashing and manifest writing for generated images."""

import hashlib
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, Union


class ContentHasher:
    """Compute digests of generated payloads."""

    def __init__(self, hash_algorithm: str = 'sha256'):
        """Initialize the hasher with specified algorithm.

        Args:
            hash_algorithm: Hash algorithm to use (default: sha256)
        """
        self.hash_algorithm = hash_algorithm

    def hash_bytes(self, data: bytes) -> str:
        """Return the hex digest of ``data``."""
        hasher = hashlib.new(self.hash_algorithm)
        hasher.update(data)
        return hasher.hexdigest()

    def build_manifest(self, items: Iterable[Any]) -> Dict[str, Any]:
        """Build a manifest of name, size and digest for each item.

        Args:
            items: Objects exposing ``name`` and ``data``

        Returns:
            Manifest dictionary
        """
        files = {}
        for item in items:
            files[item.name] = {
                'size': len(item.data),
                self.hash_algorithm: self.hash_bytes(item.data),
            }

        return {
            'algorithm': self.hash_algorithm,
            'created': datetime.now().isoformat(timespec='seconds'),
            'files': files,
        }

    def save_manifest(self, items: Iterable[Any], path: Union[str, Path]) -> Path:
        """Write the manifest as JSON to ``path``."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.build_manifest(items), f, indent=2)

        return path

    def verify(self, data: bytes, expected: str) -> bool:
        """Check ``data`` against an expected hex digest."""
        return self.hash_bytes(data) == expected.lower()
