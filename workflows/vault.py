"""Document store adapter: Markdown documents on top of a storage driver."""

from dataclasses import dataclass
from typing import List

from archiver import DocumentSnapshot, normalize
from storage import StorageDriver, FolderExistsError
from .frontmatter import parse_document

DOCUMENT_EXTENSION = ".md"


@dataclass
class DocumentRef:
    """Handle to a document. Vault.move() updates path in place."""
    path: str


def _is_hidden(path: str) -> bool:
    return any(part.startswith(".") for part in path.split("/"))


class Vault:
    """Markdown documents stored through a StorageDriver.
    
    Provides everything the transition workflow needs from the store:
    listing, type check, metadata snapshot, existence checks, folder
    creation and moves.
    """
    
    def __init__(self, driver: StorageDriver) -> None:
        self.driver = driver
    
    @property
    def display_name(self) -> str:
        return self.driver.display_name
    
    def list_documents(self) -> List[DocumentRef]:
        """List all Markdown documents, skipping hidden folders."""
        files = self.driver.list_files(recursive=True, extension=DOCUMENT_EXTENSION)
        return [DocumentRef(normalize(f.path)) for f in files if not _is_hidden(f.path)]
    
    def is_document(self, doc: DocumentRef) -> bool:
        return doc.path.lower().endswith(DOCUMENT_EXTENSION)
    
    def snapshot(self, doc: DocumentRef) -> DocumentSnapshot:
        """Read and parse the document's current metadata.
        
        Raises:
            StorageError: If the document can't be read
        """
        fields, tags = parse_document(self.driver.read_text(doc.path))
        return DocumentSnapshot.build(doc.path, fields, tags)
    
    def exists(self, path: str) -> bool:
        return self.driver.exists(path)
    
    def ensure_folder(self, path: str) -> None:
        """Create a folder (and parents) unless it already exists."""
        path = normalize(path)
        if not path or self.driver.exists(path):
            return
        try:
            self.driver.create_folder(path)
        except FolderExistsError:
            pass
    
    def move(self, doc: DocumentRef, dest_path: str) -> None:
        """Move the document and point the ref at its new path."""
        self.driver.rename(doc.path, dest_path)
        doc.path = normalize(dest_path)
