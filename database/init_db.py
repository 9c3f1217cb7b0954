"""
Storage Initialization Script
Checks that the configured storage is reachable and seeds missing collections
Run with: python -m database.init_db
"""
from .database import get_storage
from .store import KeyValueStore
from .schemas import COLLECTIONS
from config import STORAGE_BACKEND


def seed_collections(storage) -> list:
    """
    Write an empty list under every collection key that has no value yet.
    Existing data is never touched.

    Returns:
        Names of the collections that were created
    """
    store = KeyValueStore(storage)
    created = []
    for name, key in COLLECTIONS.items():
        if storage.get_item(key) is None:
            store.set(key, [])
            created.append(name)
            print(f"✅ {name} collection created under '{key}'")
        else:
            print(f"✅ {name} collection found under '{key}' ({len(store.get(key))} records)")
    return created


def verify_storage(storage) -> bool:
    """Verify the storage backend can be read"""
    try:
        storage.get_item(COLLECTIONS['Reports'])
        print(f"✅ Storage reachable: {type(storage).__name__}")
        return True
    except Exception as e:
        print(f"❌ Storage check failed: {e}")
        return False


if __name__ == "__main__":
    print("=" * 50)
    print("CleanCity Storage Initialization")
    print("=" * 50)
    print(f"\nBackend: {STORAGE_BACKEND}\n")

    storage = get_storage()
    if verify_storage(storage):
        print("\n" + "=" * 50)
        print("Seeding Collections...")
        print("=" * 50 + "\n")
        seed_collections(storage)
    else:
        print("\n❌ Cannot proceed without storage.")
        print("Please check CLEANCITY_STORAGE and related settings in your .env file")
