"""Storage driver abstraction for autoarchiver.

Provides a uniform interface for the file operations the archiver needs:
- LocalDriver: Local filesystem

Usage:
    from storage import create_storage
    
    driver = create_storage("local:/path/to/vault")
"""

from .base import StorageDriver, StorageError, FolderExistsError, FileInfo
from .local import LocalDriver


def create_storage(uri: str) -> StorageDriver:
    """Create a storage driver from a URI.
    
    Args:
        uri: Storage URI, currently only local:/path/to/folder
            
    Returns:
        StorageDriver instance for the specified backend
        
    Raises:
        ValueError: If URI format is invalid
    """
    storage_type, value = parse_storage_uri(uri)
    if storage_type == "local":
        return LocalDriver(value)
    raise ValueError(f"Unsupported storage type: {storage_type}")


def parse_storage_uri(uri: str) -> tuple:
    """Parse a storage URI into (type, value) tuple.
    
    Raises:
        ValueError: If URI format is invalid
    """
    if uri.startswith("local:"):
        return ("local", uri[6:])
    raise ValueError(
        f"Invalid storage URI: {uri}. "
        "Must start with 'local:'"
    )


__all__ = [
    'StorageDriver',
    'StorageError',
    'FolderExistsError',
    'FileInfo',
    'LocalDriver',
    'create_storage',
    'parse_storage_uri',
]
