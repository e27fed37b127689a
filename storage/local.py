"""Local filesystem storage driver."""

import os
import shutil
from typing import List, Optional

from .base import StorageDriver, StorageError, FolderExistsError, FileInfo


class LocalDriver(StorageDriver):
    """Storage driver for local filesystem.
    
    All paths are relative to the root_path provided at construction.
    """
    
    def __init__(self, root_path: str) -> None:
        """Initialize local storage driver.
        
        Args:
            root_path: Path to the root directory
            
        Raises:
            StorageError: If root_path doesn't exist
        """
        self.root_path = os.path.abspath(root_path)
        if not os.path.exists(self.root_path):
            raise StorageError(f"Directory does not exist: {self.root_path}")
        if not os.path.isdir(self.root_path):
            raise StorageError(f"Not a directory: {self.root_path}")
    
    @property
    def display_name(self) -> str:
        return f"{self.root_path} (local)"
    
    def _full_path(self, path: str) -> str:
        """Convert relative path to absolute path."""
        if not path:
            return self.root_path
        return os.path.join(self.root_path, *path.split("/"))
    
    def _rel_path(self, abs_path: str) -> str:
        """Convert absolute path to a forward-slash relative path."""
        return os.path.relpath(abs_path, self.root_path).replace(os.sep, "/")
    
    def list_files(self, path: str = "", recursive: bool = False,
                   extension: Optional[str] = None) -> List[FileInfo]:
        """List files at the given path, sorted by relative path."""
        full_path = self._full_path(path)
        
        if not os.path.exists(full_path):
            raise StorageError(f"Path does not exist: {path}")
        if not os.path.isdir(full_path):
            raise StorageError(f"Not a directory: {path}")
        
        extension_lower = extension.lower() if extension else None
        results = []
        
        if recursive:
            for root, dirs, files in os.walk(full_path):
                for filename in files:
                    if extension_lower and not filename.lower().endswith(extension_lower):
                        continue
                    abs_path = os.path.join(root, filename)
                    results.append(self._file_info(abs_path, filename))
        else:
            for filename in os.listdir(full_path):
                abs_path = os.path.join(full_path, filename)
                if not os.path.isfile(abs_path):
                    continue
                if extension_lower and not filename.lower().endswith(extension_lower):
                    continue
                results.append(self._file_info(abs_path, filename))
        
        results.sort(key=lambda f: f.path)
        return results
    
    def _file_info(self, abs_path: str, filename: str) -> FileInfo:
        try:
            size = os.path.getsize(abs_path)
        except OSError:
            size = None
        return FileInfo(path=self._rel_path(abs_path), name=filename, size=size)
    
    def file_exists(self, path: str) -> bool:
        """Check if a file exists at the given path."""
        return os.path.isfile(self._full_path(path))
    
    def exists(self, path: str) -> bool:
        """Check if a file or folder exists at the given path."""
        return os.path.exists(self._full_path(path))
    
    def read_text(self, path: str) -> str:
        """Read a text file and return its contents."""
        full_path = self._full_path(path)
        
        if not os.path.exists(full_path):
            raise StorageError(f"File does not exist: {path}")
        if not os.path.isfile(full_path):
            raise StorageError(f"Not a file: {path}")
        
        try:
            with open(full_path, 'r', encoding='utf-8') as f:
                return f.read()
        except Exception as e:
            raise StorageError(f"Failed to read file {path}: {e}")
    
    def upload(self, local_path: str, dest_path: str) -> None:
        """Copy a local file to the storage location."""
        full_dest = self._full_path(dest_path)
        
        # Create parent directories
        dest_dir = os.path.dirname(full_dest)
        if dest_dir:
            os.makedirs(dest_dir, exist_ok=True)
        
        try:
            shutil.copyfile(local_path, full_dest)
        except Exception as e:
            raise StorageError(f"Failed to copy file to {dest_path}: {e}")
    
    def create_folder(self, path: str) -> None:
        """Create a folder and any missing parents."""
        full_path = self._full_path(path)
        
        if os.path.isdir(full_path):
            raise FolderExistsError(f"Folder already exists: {path}")
        
        try:
            os.makedirs(full_path)
        except FileExistsError:
            if os.path.isdir(full_path):
                raise FolderExistsError(f"Folder already exists: {path}")
            raise StorageError(f"A file is in the way of folder: {path}")
        except OSError as e:
            raise StorageError(f"Failed to create folder {path}: {e}")
    
    def rename(self, src_path: str, dest_path: str) -> None:
        """Move a file to an exact destination path."""
        full_src = self._full_path(src_path)
        full_dest = self._full_path(dest_path)
        
        if not os.path.isfile(full_src):
            raise StorageError(f"Source file does not exist: {src_path}")
        if os.path.exists(full_dest):
            raise StorageError(f"Destination already exists: {dest_path}")
        if not os.path.isdir(os.path.dirname(full_dest)):
            raise StorageError(f"Destination folder does not exist: {dest_path}")
        
        try:
            os.rename(full_src, full_dest)
        except OSError as e:
            raise StorageError(f"Failed to move file from {src_path} to {dest_path}: {e}")
