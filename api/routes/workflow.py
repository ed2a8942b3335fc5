"""Edit workflow endpoints.

Drive the create/edit/delete dialog: open it, edit the candidate, submit for
validation, and confirm or cancel the pending mutation. These are the only
endpoints that change the event list.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.dependencies import CalendarSessionDep
from api.models import (
    ConfirmResponse,
    EventResponse,
    SlotSelectionResponse,
    SubmitResponse,
    WorkflowStateResponse,
)
from models.workflow import EventEditWorkflow

router = APIRouter(
    prefix="/workflow",
    tags=["workflow"],
)


# Request Models


class SelectSlotRequest(BaseModel):
    """Request to select a range on the calendar grid.

    Args:
        start: Start of the selection.
        end: End of the selection.
    """

    start: datetime = Field(description="Start of the selection")
    end: datetime = Field(description="End of the selection")


class OpenCreateRequest(BaseModel):
    """Request to open the dialog for a new event.

    Args:
        default_date: Start of the new candidate (default: now).
    """

    default_date: Optional[datetime] = Field(
        default=None, description="Start of the new candidate"
    )


class OpenEditRequest(BaseModel):
    """Request to open the dialog on an existing event.

    Args:
        event_id: Event to edit.
    """

    event_id: int = Field(description="Event to edit")


class EditCandidateRequest(BaseModel):
    """Request to change candidate fields. Omitted fields are left unchanged.

    Args:
        title: New title.
        description: New description.
        start: New start time.
        end: New end time.
    """

    title: Optional[str] = Field(default=None, description="New title")
    description: Optional[str] = Field(default=None, description="New description")
    start: Optional[datetime] = Field(default=None, description="New start time")
    end: Optional[datetime] = Field(default=None, description="New end time")


def _state_response(workflow: EventEditWorkflow) -> WorkflowStateResponse:
    return WorkflowStateResponse(**workflow.get_snapshot())


# Route Handlers


@router.get("", response_model=WorkflowStateResponse)
async def get_workflow(session: CalendarSessionDep):
    """Get the current workflow state.

    Args:
        session: Calendar session dependency.

    Returns:
        Phase, candidate, error, pending action and prompts.
    """
    return _state_response(session.workflow)


@router.post("/select-slot", response_model=SlotSelectionResponse)
async def select_slot(request: SelectSlotRequest, session: CalendarSessionDep):
    """Select a grid range; opens the dialog unless the range is unavailable.

    A past or already-booked selection is not an error: the response carries
    the notice to show and the workflow stays idle.

    Args:
        request: The selected range.
        session: Calendar session dependency.

    Returns:
        Whether the dialog opened, and the notice if it did not.
    """
    notice = session.workflow.select_slot(request.start, request.end)
    return SlotSelectionResponse(
        accepted=notice is None,
        notice=notice,
        workflow=_state_response(session.workflow),
    )


@router.post("/open-create", response_model=WorkflowStateResponse)
async def open_create(request: OpenCreateRequest, session: CalendarSessionDep):
    """Open the dialog on a new 30-minute candidate.

    Args:
        request: Optional default start.
        session: Calendar session dependency.

    Returns:
        Workflow state in the editing phase.
    """
    session.workflow.open_for_create(request.default_date)
    return _state_response(session.workflow)


@router.post("/open-edit", response_model=WorkflowStateResponse)
async def open_edit(request: OpenEditRequest, session: CalendarSessionDep):
    """Open the dialog on a copy of an existing event.

    Args:
        request: Event to edit.
        session: Calendar session dependency.

    Returns:
        Workflow state in the editing phase.

    Raises:
        EventNotFoundError: If the event does not exist (404).
    """
    session.workflow.open_for_edit(request.event_id)
    return _state_response(session.workflow)


@router.patch("/candidate", response_model=WorkflowStateResponse)
async def edit_candidate(request: EditCandidateRequest, session: CalendarSessionDep):
    """Change candidate fields; clears any displayed validation error.

    Args:
        request: Fields to change.
        session: Calendar session dependency.

    Returns:
        Workflow state with the updated candidate.
    """
    session.workflow.edit_candidate(**request.model_dump(exclude_none=True))
    return _state_response(session.workflow)


@router.post("/submit", response_model=SubmitResponse)
async def submit(session: CalendarSessionDep):
    """Validate the candidate and ask for confirmation if it passes.

    A failed validation is returned with status 200 and is_valid=false; the
    reason is also kept as the workflow's displayed error.

    Args:
        session: Calendar session dependency.

    Returns:
        Validation result and the resulting workflow state.
    """
    result = session.workflow.submit()
    return SubmitResponse(
        is_valid=result.is_valid,
        reason=result.reason,
        workflow=_state_response(session.workflow),
    )


@router.post("/delete", response_model=WorkflowStateResponse)
async def request_delete(session: CalendarSessionDep):
    """Ask for confirmation to delete the edited event.

    Args:
        session: Calendar session dependency.

    Returns:
        Workflow state awaiting delete confirmation.
    """
    session.workflow.request_delete()
    return _state_response(session.workflow)


@router.post("/confirm", response_model=ConfirmResponse)
async def confirm(session: CalendarSessionDep):
    """Perform the pending mutation and close the dialog.

    Args:
        session: Calendar session dependency.

    Returns:
        The action performed, the affected event and the idle workflow state.
    """
    action = session.workflow.pending_action
    event = session.workflow.confirm()
    return ConfirmResponse(
        action=action.value if action else "",
        event=EventResponse(**event.model_dump()) if event else None,
        workflow=_state_response(session.workflow),
    )


@router.post("/cancel-confirm", response_model=WorkflowStateResponse)
async def cancel_confirm(session: CalendarSessionDep):
    """Dismiss the confirmation prompt and return to editing.

    Args:
        session: Calendar session dependency.

    Returns:
        Workflow state back in the editing phase.
    """
    session.workflow.cancel_confirm()
    return _state_response(session.workflow)


@router.post("/close", response_model=WorkflowStateResponse)
async def close(session: CalendarSessionDep):
    """Close the dialog without saving.

    Args:
        session: Calendar session dependency.

    Returns:
        Idle workflow state.
    """
    session.workflow.close_without_saving()
    return _state_response(session.workflow)
