"""
Storage backends for CleanCity
Each backend stores plain text under a key, like browser localStorage
"""
from pathlib import Path
from typing import Dict, Optional

from pymongo import MongoClient
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError
import streamlit as st

from config import (
    STORAGE_BACKEND,
    STORAGE_DIR,
    MONGODB_URI,
    DATABASE_NAME,
    STORAGE_COLLECTION,
)


class MemoryStorage:
    """In-process storage, lost when the process exits"""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self._items = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str):
        self._items[key] = value


class LocalFileStorage:
    """One '<key>.json' file per key inside a directory"""

    def __init__(self, directory):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding='utf-8')

    def set_item(self, key: str, value: str):
        # Write errors (disk full, permissions) are left to the caller
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding='utf-8')


class MongoStorage:
    """Key-value documents in a MongoDB collection: {_id: key, value: text}"""

    def __init__(self, collection):
        self.collection = collection

    def get_item(self, key: str) -> Optional[str]:
        document = self.collection.find_one({"_id": key})
        if not document:
            return None
        return document.get("value")

    def set_item(self, key: str, value: str):
        self.collection.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)


# Initialize MongoDB client
@st.cache_resource
def get_mongodb_client():
    """Get MongoDB client connection (cached by Streamlit)"""
    try:
        print(f"🔌 Attempting to connect to MongoDB at: {MONGODB_URI.split('@')[-1] if '@' in MONGODB_URI else MONGODB_URI}")
        client = MongoClient(MONGODB_URI, serverSelectionTimeoutMS=5000)
        # Test connection
        client.admin.command('ping')
        print("✅ MongoDB connection successful!")
        return client
    except (ConnectionFailure, ServerSelectionTimeoutError) as e:
        print(f"❌ MongoDB connection failed: {e}")
        return None


def get_storage_collection():
    """Get the key-value collection, or None when MongoDB is unreachable"""
    client = get_mongodb_client()
    if client:
        return client[DATABASE_NAME][STORAGE_COLLECTION]
    return None


def get_storage(backend: Optional[str] = None):
    """Build the storage backend selected by configuration"""
    backend = (backend or STORAGE_BACKEND).lower()
    if backend == 'memory':
        return MemoryStorage()
    if backend == 'mongodb':
        collection = get_storage_collection()
        if collection is not None:
            return MongoStorage(collection)
        print(f"⚠️ MongoDB unavailable, falling back to file storage in '{STORAGE_DIR}'")
    elif backend != 'file':
        raise ValueError(f"Unknown storage backend '{backend}'. Must be one of ['file', 'mongodb', 'memory']")
    return LocalFileStorage(STORAGE_DIR)
