"""Base classes for storage drivers.

This module defines the abstract interface that all storage backends must implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class FolderExistsError(StorageError):
    """Raised by create_folder() when the folder is already there."""
    pass


@dataclass
class FileInfo:
    """Information about a file in storage.
    
    Attributes:
        path: Relative path within the storage root (forward slashes)
        name: Filename only (no directory)
        size: File size in bytes (optional)
    """
    path: str
    name: str
    size: Optional[int] = None


class StorageDriver(ABC):
    """Abstract base class for storage backends.
    
    Paths are relative to the storage root and use forward slashes. Read
    operations are required; write operations may raise NotImplementedError
    for read-only backends.
    """
    
    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name for this storage (e.g., '/home/me/notes (local)')."""
        pass
    
    # =========================================================================
    # Read Operations (required for all drivers)
    # =========================================================================
    
    @abstractmethod
    def list_files(self, path: str = "", recursive: bool = False,
                   extension: Optional[str] = None) -> List[FileInfo]:
        """List files at the given path.
        
        Args:
            path: Relative path within storage (empty string for root)
            recursive: If True, include files in subdirectories
            extension: Filter by file extension (e.g., ".md"), case-insensitive
            
        Returns:
            List of FileInfo objects
            
        Raises:
            StorageError: If path doesn't exist or can't be accessed
        """
        pass
    
    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Check if a file exists at the given path."""
        pass
    
    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a file or folder exists at the given path."""
        pass
    
    @abstractmethod
    def read_text(self, path: str) -> str:
        """Read a text file and return its contents.
        
        Args:
            path: Relative path to the text file
            
        Returns:
            File contents as a string (UTF-8 decoded)
            
        Raises:
            StorageError: If file doesn't exist or can't be read
        """
        pass
    
    # =========================================================================
    # Write Operations (optional - raise NotImplementedError if read-only)
    # =========================================================================
    
    def upload(self, local_path: str, dest_path: str) -> None:
        """Upload a local file to storage, replacing any existing file.
        
        Creates parent directories as needed.
        
        Raises:
            StorageError: If upload fails
            NotImplementedError: If storage is read-only
        """
        raise NotImplementedError(f"{self.display_name} does not support write operations")
    
    def create_folder(self, path: str) -> None:
        """Create a folder, including missing parent folders.
        
        Raises:
            FolderExistsError: If the folder already exists
            StorageError: If the folder can't be created
            NotImplementedError: If storage is read-only
        """
        raise NotImplementedError(f"{self.display_name} does not support write operations")
    
    def rename(self, src_path: str, dest_path: str) -> None:
        """Move a file to an exact destination path.
        
        The destination folder must exist and the destination must be free.
        
        Raises:
            StorageError: If the move fails or the destination is taken
            NotImplementedError: If storage is read-only
        """
        raise NotImplementedError(f"{self.display_name} does not support write operations")
