"""Create/edit/delete workflow gating every store mutation behind confirmation.

The workflow is always in exactly one of three states:

    Idle ──open_for_create / open_for_edit / select_slot──▶ Editing
    Editing ──submit (valid) / request_delete──▶ ConfirmPending
    ConfirmPending ──confirm──▶ Idle          (store is mutated here, only here)
    ConfirmPending ──cancel_confirm──▶ Editing
    Editing / ConfirmPending ──close_without_saving──▶ Idle

Each state carries only the data valid for it, so combinations such as a
confirmation prompt without a pending action cannot be represented.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field

from models.availability import check_slot_selection
from models.clock import CalendarClock
from models.event import CalendarEvent, EventDraft
from models.exceptions import (
    EventNotFoundError,
    SlotUnavailableError,
    WorkflowStateError,
)
from models.interval import DEFAULT_EVENT_DURATION
from models.store import EDITABLE_FIELDS, EventStore
from models.validation import ValidationResult, validate_event

logger = logging.getLogger(__name__)


class PendingAction(str, Enum):
    """Store mutation awaiting the user's confirmation."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class IdleState(BaseModel):
    """No dialog is open and no candidate exists."""

    phase: Literal["idle"] = "idle"


class EditingState(BaseModel):
    """The edit dialog is open on a candidate.

    Args:
        candidate: The draft being edited.
        is_new: Whether the candidate is a new event (create) or an edit.
        exclude_id: Id of the edited event, left out of overlap checks.
        error: Validation message currently displayed, if any.
    """

    phase: Literal["editing"] = "editing"
    candidate: EventDraft = Field(description="The draft being edited")
    is_new: bool = Field(description="Whether the candidate is a new event")
    exclude_id: Optional[int] = Field(
        default=None, description="Id of the edited event"
    )
    error: Optional[str] = Field(
        default=None, description="Displayed validation message"
    )


class ConfirmPendingState(BaseModel):
    """The confirmation prompt is showing above the edit dialog.

    Args:
        editing: The editing state to return to if the prompt is cancelled.
        pending_action: The mutation that confirm() will perform.
    """

    phase: Literal["confirm_pending"] = "confirm_pending"
    editing: EditingState = Field(description="Editing state underneath the prompt")
    pending_action: PendingAction = Field(description="Mutation awaiting confirmation")


WorkflowState = Annotated[
    Union[IdleState, EditingState, ConfirmPendingState],
    Field(discriminator="phase"),
]


class EventEditWorkflow(BaseModel):
    """State machine driving event creation, editing and deletion.

    The workflow holds at most one candidate at a time and is the only writer
    of the event store. Validation failures never raise: the message is kept
    on the editing state for display and the state does not change. Calling a
    transition from a state that does not offer it raises WorkflowStateError.

    Args:
        store: The session's event store.
        clock: Clock read at validation and slot-selection time.
        state: Current workflow state.
        notice: Message from the last rejected slot selection, if any.
    """

    store: EventStore = Field(description="The session's event store")
    clock: CalendarClock = Field(
        default_factory=CalendarClock, description="Source of the current time"
    )
    state: WorkflowState = Field(
        default_factory=IdleState, description="Current workflow state"
    )
    notice: Optional[str] = Field(
        default=None, description="Message from the last rejected slot selection"
    )

    # Read-only views of the current state

    @property
    def phase(self) -> str:
        """Name of the current state ("idle", "editing" or "confirm_pending")."""
        return self.state.phase

    @property
    def is_idle(self) -> bool:
        """Whether no dialog is open."""
        return isinstance(self.state, IdleState)

    def _editing_view(self) -> Optional[EditingState]:
        if isinstance(self.state, EditingState):
            return self.state
        if isinstance(self.state, ConfirmPendingState):
            return self.state.editing
        return None

    @property
    def candidate(self) -> Optional[EventDraft]:
        """The draft being edited, or None when idle."""
        editing = self._editing_view()
        return editing.candidate if editing else None

    @property
    def error(self) -> Optional[str]:
        """The validation message currently displayed, if any."""
        if isinstance(self.state, EditingState):
            return self.state.error
        return None

    @property
    def pending_action(self) -> Optional[PendingAction]:
        """The mutation awaiting confirmation, or None."""
        if isinstance(self.state, ConfirmPendingState):
            return self.state.pending_action
        return None

    @property
    def confirmation_prompt(self) -> Optional[str]:
        """Question shown in the confirmation dialog, or None if not pending."""
        action = self.pending_action
        if action is None:
            return None
        return f"Are you sure you want to {action.value} this event?"

    def _require(self, operation: str, *allowed: type) -> Any:
        if not isinstance(self.state, allowed):
            raise WorkflowStateError(operation, self.phase)
        return self.state

    # Opening the dialog

    def open_for_create(self, default_date: Optional[datetime] = None) -> EventDraft:
        """Open the dialog on a new candidate.

        Args:
            default_date: Start of the candidate. Defaults to the current
                time (the "Add Event" button passes no date).

        Returns:
            The new candidate, lasting 30 minutes from its start.

        Raises:
            WorkflowStateError: If the workflow is not idle.
        """
        self._require("open an event for creation", IdleState)

        start = default_date if default_date is not None else self.clock.now()
        candidate = EventDraft(start=start, end=start + DEFAULT_EVENT_DURATION)

        self.state = EditingState(candidate=candidate, is_new=True)
        self.notice = None
        return candidate

    def select_slot(self, start: datetime, end: datetime) -> Optional[str]:
        """Handle a click or drag on the calendar grid.

        Past or already-booked selections are rejected before any dialog
        opens: the rejection message is stored as the notice and returned,
        and the workflow stays idle. Otherwise a create candidate is opened
        at the selection's start.

        Args:
            start: Start of the selected range.
            end: End of the selected range.

        Returns:
            The rejection notice, or None if the dialog was opened.

        Raises:
            WorkflowStateError: If the workflow is not idle.
        """
        self._require("select a slot", IdleState)

        try:
            check_slot_selection(start, end, self.store.list(), self.clock.now())
        except SlotUnavailableError as e:
            logger.debug(f"Slot selection {start} - {end} rejected: {e.message}")
            self.notice = e.message
            return e.message

        self.open_for_create(start)
        return None

    def open_for_edit(self, event: CalendarEvent | int) -> EventDraft:
        """Open the dialog on a copy of an existing event.

        Args:
            event: The event to edit, or its id.

        Returns:
            The candidate copied from the event.

        Raises:
            WorkflowStateError: If the workflow is not idle.
            EventNotFoundError: If an id is given that is not in the store.
        """
        self._require("open an event for editing", IdleState)

        if isinstance(event, int):
            found = self.store.get(event)
            if found is None:
                raise EventNotFoundError(event)
            event = found

        candidate = EventDraft.from_event(event)
        self.state = EditingState(
            candidate=candidate, is_new=False, exclude_id=event.event_id
        )
        self.notice = None
        return candidate

    # Editing

    def edit_candidate(self, **fields: Any) -> EventDraft:
        """Change fields of the candidate.

        Any displayed validation error is cleared by an edit.

        Args:
            **fields: New values for title, description, start and/or end.

        Returns:
            The updated candidate.

        Raises:
            WorkflowStateError: If the dialog is not in the editing state.
            ValueError: If an unknown field is given.
        """
        editing = self._require("edit the candidate", EditingState)

        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot edit fields: {', '.join(sorted(unknown))}")

        values = editing.candidate.model_dump(exclude={"start", "end"})
        values.update(start=editing.candidate.start, end=editing.candidate.end)
        values.update(fields)
        candidate = EventDraft(**values)

        self.state = editing.model_copy(update={"candidate": candidate, "error": None})
        return candidate

    def submit(self) -> ValidationResult:
        """Validate the candidate and, if valid, ask for confirmation.

        The clock is read now, so resubmitting after a failure re-validates
        against the current time.

        Returns:
            The validation result. When invalid, its reason is also kept as
            the displayed error and the workflow stays in editing.

        Raises:
            WorkflowStateError: If the dialog is not in the editing state.
        """
        editing = self._require("submit", EditingState)

        result = validate_event(
            editing.candidate,
            editing.exclude_id,
            self.store.list(),
            self.clock.now(),
        )

        if not result.is_valid:
            logger.debug(f"Candidate rejected: {result.reason}")
            self.state = editing.model_copy(update={"error": result.reason})
            return result

        action = PendingAction.UPDATE if editing.exclude_id is not None else PendingAction.CREATE
        self.state = ConfirmPendingState(
            editing=editing.model_copy(update={"error": None}),
            pending_action=action,
        )
        return result

    def request_delete(self) -> None:
        """Ask for confirmation to delete the event being edited.

        Field validation is not run for deletion.

        Raises:
            WorkflowStateError: If not editing, or editing a new event.
        """
        editing = self._require("request deletion", EditingState)

        if editing.exclude_id is None:
            raise WorkflowStateError("request deletion", "editing a new event")

        self.state = ConfirmPendingState(
            editing=editing.model_copy(update={"error": None}),
            pending_action=PendingAction.DELETE,
        )

    # Confirmation

    def confirm(self) -> Optional[CalendarEvent]:
        """Perform the pending mutation and close the dialog.

        If the target of an update or deletion has vanished from the store,
        nothing is written and the workflow still returns to idle.

        Returns:
            The created or updated event, or None for deletions and vanished
            update targets.

        Raises:
            WorkflowStateError: If no action is awaiting confirmation.
        """
        pending = self._require("confirm", ConfirmPendingState)
        editing = pending.editing
        candidate = editing.candidate
        result: Optional[CalendarEvent] = None

        if pending.pending_action is PendingAction.CREATE:
            result = self.store.add(candidate)
        elif pending.pending_action is PendingAction.UPDATE:
            try:
                result = self.store.update(
                    editing.exclude_id,
                    {name: getattr(candidate, name) for name in EDITABLE_FIELDS},
                )
            except EventNotFoundError:
                logger.warning(
                    f"Event {editing.exclude_id} vanished before update was confirmed"
                )
        else:
            self.store.remove(editing.exclude_id)

        self.state = IdleState()
        return result

    def cancel_confirm(self) -> None:
        """Dismiss the confirmation prompt and keep editing.

        Raises:
            WorkflowStateError: If no action is awaiting confirmation.
        """
        pending = self._require("cancel confirmation", ConfirmPendingState)
        self.state = pending.editing

    def close_without_saving(self) -> None:
        """Close the dialog, discarding the candidate.

        Closing when no dialog is open does nothing.
        """
        if not self.is_idle:
            logger.debug("Dialog closed without saving")
        self.state = IdleState()

    def get_snapshot(self) -> dict[str, Any]:
        """Return the displayable workflow state for API responses.

        Returns:
            Dictionary with the phase, candidate, error, pending action,
            confirmation prompt and slot notice.
        """
        editing = self._editing_view()
        return {
            "phase": self.phase,
            "candidate": editing.candidate.model_dump(mode="json") if editing else None,
            "is_new": editing.is_new if editing else None,
            "exclude_id": editing.exclude_id if editing else None,
            "error": self.error,
            "pending_action": self.pending_action.value if self.pending_action else None,
            "confirmation_prompt": self.confirmation_prompt,
            "notice": self.notice,
        }
