"""
Database package for CleanCity
"""
from .database import (
    MemoryStorage,
    LocalFileStorage,
    MongoStorage,
    get_storage
)
from .store import KeyValueStore
from .models import (
    Report,
    User,
    ReportRepository,
    UserRepository
)
from .schemas import (
    Status,
    WasteType,
    Priority,
    REPORT_STATUS_ENUM,
    WASTE_TYPE_ENUM,
    COLLECTIONS
)

__all__ = [
    'MemoryStorage',
    'LocalFileStorage',
    'MongoStorage',
    'get_storage',
    'KeyValueStore',
    'Report',
    'User',
    'ReportRepository',
    'UserRepository',
    'Status',
    'WasteType',
    'Priority',
    'REPORT_STATUS_ENUM',
    'WASTE_TYPE_ENUM',
    'COLLECTIONS'
]
