"""
Note API Endpoints.

Internal REST endpoints for note management.
"""

from fastapi import APIRouter

from notebox.backend.core.dependencies import DbSession, RequestId
from notebox.backend.schemas.base import ApiResponse, ResponseMetadata
from notebox.backend.schemas.note import NoteCreate, NoteCreated
from notebox.backend.services.note import note_create

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[NoteCreated],
    status_code=201,
    summary="Create a note",
    description=(
        "Create a note for a user of an account. Malformed bodies are "
        "rejected with VALIDATION_ERROR, business-rule violations with "
        "BUSINESS_RULE_ERROR."
    ),
)
async def create_note(
    data: NoteCreate,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[NoteCreated]:
    """Create a new note."""
    created = await note_create(db, data)
    return ApiResponse(data=created, metadata=ResponseMetadata(request_id=request_id))
