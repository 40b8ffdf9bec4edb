"""
FastAPI routes for the date picker backend.

Endpoints:
- POST /pickers                        - create a picker session
- GET  /pickers/{picker_id}            - current picker view
- POST /pickers/{picker_id}/input      - keystroke in the input field
- POST /pickers/{picker_id}/commit     - input field lost focus
- POST /pickers/{picker_id}/cells      - a day cell was clicked
- POST /pickers/{picker_id}/shortcuts/{shortcut} - "today" / "tomorrow"
- POST /pickers/{picker_id}/navigate   - previous / next / current month
- POST /sessions/reset                 - delete a picker session
- GET  /health                         - health check
"""

import logging
from collections.abc import Callable
from datetime import date
from enum import Enum
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from datepicker.core.session import Session
from datepicker.core.synchronizer import DatePicker
from datepicker.core.view import build_picker_view

logger = logging.getLogger(__name__)

router = APIRouter()

# Injected by the app factory
_session_store = None


def configure_routes(session_store):
    """Inject the session store into the routes module.

    Called by the app factory during startup.
    """
    global _session_store
    _session_store = session_store


# --- Request / Response Models ---


class Shortcut(str, Enum):
    """Quick-select buttons above the grid."""

    TODAY = "today"
    TOMORROW = "tomorrow"


class Direction(str, Enum):
    """Month navigation targets."""

    PREVIOUS = "previous"
    NEXT = "next"
    TODAY = "today"


class CreatePickerRequest(BaseModel):
    """Request body for POST /pickers."""

    picker_id: str | None = None
    viewing: date | None = Field(
        default=None,
        description="Any date in the month to show first (defaults to today)",
    )


class InputRequest(BaseModel):
    """Request body for POST /pickers/{picker_id}/input."""

    value: str


class CellRequest(BaseModel):
    """Request body for POST /pickers/{picker_id}/cells."""

    date: date


class NavigateRequest(BaseModel):
    """Request body for POST /pickers/{picker_id}/navigate."""

    direction: Direction


class PickerResponse(BaseModel):
    """Response body for all picker endpoints."""

    picker_id: str
    view: dict[str, Any]


class ResetRequest(BaseModel):
    """Request body for the /sessions/reset endpoint."""

    picker_id: str


# --- Helpers ---


def _require_store():
    if _session_store is None:
        raise HTTPException(status_code=500, detail="Server not properly configured")
    return _session_store


def _get_session(picker_id: str) -> Session:
    session = _require_store().get_session(picker_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Picker '{picker_id}' not found")
    return session


def _respond(picker_id: str, session: Session) -> PickerResponse:
    return PickerResponse(picker_id=picker_id, view=build_picker_view(session.picker))


def _apply(
    picker_id: str,
    session: Session,
    handler: Callable[[DatePicker], Any],
) -> PickerResponse:
    """Run a picker event handler and return the updated view."""
    try:
        handler(session.picker)
        return _respond(picker_id, session)
    except Exception as e:
        logger.error("Error updating picker %s: %s", picker_id, e, exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error updating picker: {str(e)}",
        )


# --- Endpoints ---


@router.post("/pickers", response_model=PickerResponse)
async def create_picker(request: CreatePickerRequest):
    """Create a picker session, optionally starting on a given month."""
    store = _require_store()
    store.cleanup_expired()
    picker_id, session = store.create_session(
        picker_id=request.picker_id,
        viewing=request.viewing,
    )
    logger.info("Created picker %s", picker_id)
    return _apply(picker_id, session, lambda picker: None)


@router.get("/pickers/{picker_id}", response_model=PickerResponse)
async def get_picker(picker_id: str):
    """Return the current view of a picker."""
    return _apply(picker_id, _get_session(picker_id), lambda picker: None)


@router.post("/pickers/{picker_id}/input", response_model=PickerResponse)
async def change_input(picker_id: str, request: InputRequest):
    """Store the (sanitized) text typed so far."""
    session = _get_session(picker_id)
    return _apply(picker_id, session, lambda picker: picker.on_input_change(request.value))


@router.post("/pickers/{picker_id}/commit", response_model=PickerResponse)
async def commit_input(picker_id: str):
    """Resolve the typed text into a selection.

    Unparsable text is reverted rather than reported, so this always
    returns 200 with the corrected view.
    """
    session = _get_session(picker_id)
    return _apply(picker_id, session, DatePicker.commit)


@router.post("/pickers/{picker_id}/cells", response_model=PickerResponse)
async def activate_cell(picker_id: str, request: CellRequest):
    """Toggle the clicked day as the single selection."""
    session = _get_session(picker_id)
    return _apply(picker_id, session, lambda picker: picker.activate_cell(request.date))


@router.post("/pickers/{picker_id}/shortcuts/{shortcut}", response_model=PickerResponse)
async def apply_shortcut(picker_id: str, shortcut: Shortcut):
    """Select today or tomorrow."""
    handlers = {
        Shortcut.TODAY: DatePicker.select_today,
        Shortcut.TOMORROW: DatePicker.select_tomorrow,
    }
    return _apply(picker_id, _get_session(picker_id), handlers[shortcut])


@router.post("/pickers/{picker_id}/navigate", response_model=PickerResponse)
async def navigate(picker_id: str, request: NavigateRequest):
    """Move the viewed month without touching the selection."""
    handlers = {
        Direction.PREVIOUS: DatePicker.view_previous_month,
        Direction.NEXT: DatePicker.view_next_month,
        Direction.TODAY: DatePicker.view_today,
    }
    return _apply(picker_id, _get_session(picker_id), handlers[request.direction])


@router.post("/sessions/reset")
async def reset_session(request: ResetRequest):
    """Delete a picker session and start fresh."""
    deleted = _require_store().delete_session(request.picker_id)
    return {
        "success": deleted,
        "message": "Session reset" if deleted else "Session not found",
    }


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    session_count = _session_store.count() if _session_store else 0
    return {
        "status": "healthy",
        "active_sessions": session_count,
    }
