from app.domains.documents.entities import Document
from app.domains.documents.schemas import (
    DocumentBase, DocumentCreate, DocumentUpdate, DocumentResponse, DocumentListResponse
)

__all__ = [
    "Document",
    "DocumentBase", "DocumentCreate", "DocumentUpdate", "DocumentResponse", "DocumentListResponse"
]
