"""Exceptions raised by the booking core."""


class EventNotFoundError(LookupError):
    """Raised when an event id is not present in the store.

    Args:
        event_id: The id that was looked up.
    """

    def __init__(self, event_id: int):
        self.event_id = event_id
        super().__init__(f"Event {event_id} not found")


class EventOverlapError(ValueError):
    """Raised when a store mutation would break the no-overlap invariant.

    Args:
        event_id: Id of the event being added or updated (None for a new draft).
        conflicting_id: Id of the stored event it would overlap.
    """

    def __init__(self, event_id: int | None, conflicting_id: int):
        self.event_id = event_id
        self.conflicting_id = conflicting_id
        subject = "New event" if event_id is None else f"Event {event_id}"
        super().__init__(f"{subject} overlaps with event {conflicting_id}")


class WorkflowStateError(RuntimeError):
    """Raised when a workflow transition is invoked from the wrong state.

    Args:
        operation: The transition that was attempted.
        state: The workflow state it was attempted from.
    """

    def __init__(self, operation: str, state: str):
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} while workflow is {state}")


class SlotUnavailableError(ValueError):
    """Base class for rejected grid slot selections.

    The message is the notice shown to the user before any dialog opens.
    """

    message = "This time slot is unavailable."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class PastSlotSelectionError(SlotUnavailableError):
    """The selected slot starts in the past."""

    message = "You cannot book a meeting in the past."


class SlotOverlapError(SlotUnavailableError):
    """The selected slot overlaps an existing event."""

    message = "This time slot is already booked. Please select a different time."
