"""
JSON key-value store on top of a storage backend
"""
import json
from typing import List


class KeyValueStore:
    """Reads and writes whole collections of records under a key"""

    def __init__(self, storage):
        self.storage = storage

    def get(self, key: str) -> List:
        """
        Read the records stored under key

        Missing keys and unreadable values both come back as an empty list.
        """
        raw = self.storage.get_item(key)
        if raw is None:
            return []
        try:
            records = json.loads(raw)
        except (TypeError, ValueError):
            return []
        if not isinstance(records, list):
            return []
        return records

    def set(self, key: str, records: List):
        """Replace everything stored under key"""
        self.storage.set_item(key, json.dumps(records))
