"""
API Version 1 Router.

Aggregates all v1 endpoint routers.
"""

from fastapi import APIRouter

from notebox.backend.api.v1.endpoints import note

router = APIRouter()

# Internal (authenticated-area) endpoints
router.include_router(note.router, prefix="/internal/note", tags=["note"])
