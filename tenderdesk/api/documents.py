"""Document metadata routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from tenderdesk.api.deps import current_actor, require_found
from tenderdesk.core.dependencies import CurrentActor, get_db_session
from tenderdesk.core.exceptions import NotFoundError
from tenderdesk.schemas import DocumentCreateRequest, DocumentResponse
from tenderdesk.services import DocumentService

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=list[DocumentResponse])
def list_documents(db: Session = Depends(get_db_session)) -> list[DocumentResponse]:
    return [DocumentResponse.model_validate(document) for document in DocumentService(db=db).list_documents()]


@router.get("/{document_id}", response_model=DocumentResponse)
def get_document(document_id: int, db: Session = Depends(get_db_session)) -> DocumentResponse:
    return DocumentResponse.model_validate(require_found(DocumentService(db=db).get_document(document_id), "Document"))


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
def create_document(
    payload: DocumentCreateRequest,
    actor: CurrentActor = Depends(current_actor),
    db: Session = Depends(get_db_session),
) -> DocumentResponse:
    document = DocumentService(db=db).create_document(payload.model_dump(), actor_id=actor.user_id)
    return DocumentResponse.model_validate(document)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_document(document_id: int, db: Session = Depends(get_db_session)) -> Response:
    if not DocumentService(db=db).delete_document(document_id):
        raise NotFoundError("Document not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
