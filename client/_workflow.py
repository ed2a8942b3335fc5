"""Edit workflow sub-client for the booking API.

This is an internal module. Import from `client` instead.
"""

from datetime import datetime
from typing import Any

from client._base import BaseClient, _isoformat
from client.models import (
    ConfirmResponse,
    SlotSelectionResponse,
    SubmitResponse,
    WorkflowStateResponse,
)


class WorkflowClient(BaseClient):
    """Client for the create/edit/delete workflow (/workflow/*).

    Every change to the calendar goes through this client: open a
    candidate, edit it, submit it for validation, then confirm.

    Example:
        with BookingClient() as client:
            client.workflow.open_create(datetime(2025, 5, 22, 10, 0))
            client.workflow.edit(title="Planning")
            result = client.workflow.submit()
            if result.is_valid:
                client.workflow.confirm()
            else:
                print(result.reason)

    Calling a transition the current phase does not offer raises
    ConflictError.
    """

    _BASE_PATH = "/workflow"

    def get_state(self) -> WorkflowStateResponse:
        """Get the current workflow state."""
        data = self._get(self._BASE_PATH)
        return WorkflowStateResponse(**data)

    def select_slot(self, start: datetime, end: datetime) -> SlotSelectionResponse:
        """Select a range on the grid.

        A past or booked range is rejected with a notice instead of an
        error; check ``accepted`` on the result.
        """
        data = self._post(
            f"{self._BASE_PATH}/select-slot",
            json={"start": _isoformat(start), "end": _isoformat(end)},
        )
        return SlotSelectionResponse(**data)

    def open_create(self, default_date: datetime | None = None) -> WorkflowStateResponse:
        """Open the dialog on a new 30-minute candidate.

        Args:
            default_date: Start of the candidate (default: the server's now).
        """
        data = self._post(
            f"{self._BASE_PATH}/open-create",
            json={"default_date": _isoformat(default_date)},
        )
        return WorkflowStateResponse(**data)

    def open_edit(self, event_id: int) -> WorkflowStateResponse:
        """Open the dialog on a copy of an existing event.

        Raises:
            NotFoundError: If the event does not exist.
        """
        data = self._post(f"{self._BASE_PATH}/open-edit", json={"event_id": event_id})
        return WorkflowStateResponse(**data)

    def edit(
        self,
        title: str | None = None,
        description: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> WorkflowStateResponse:
        """Change candidate fields. Fields left as None are unchanged."""
        body: dict[str, Any] = {
            "title": title,
            "description": description,
            "start": _isoformat(start),
            "end": _isoformat(end),
        }
        data = self._patch(
            f"{self._BASE_PATH}/candidate",
            json={k: v for k, v in body.items() if v is not None},
        )
        return WorkflowStateResponse(**data)

    def submit(self) -> SubmitResponse:
        """Validate the candidate; on success the workflow awaits confirmation."""
        data = self._post(f"{self._BASE_PATH}/submit")
        return SubmitResponse(**data)

    def request_delete(self) -> WorkflowStateResponse:
        """Ask for confirmation to delete the edited event."""
        data = self._post(f"{self._BASE_PATH}/delete")
        return WorkflowStateResponse(**data)

    def confirm(self) -> ConfirmResponse:
        """Perform the pending create, update or delete."""
        data = self._post(f"{self._BASE_PATH}/confirm")
        return ConfirmResponse(**data)

    def cancel_confirm(self) -> WorkflowStateResponse:
        """Dismiss the confirmation prompt and keep editing."""
        data = self._post(f"{self._BASE_PATH}/cancel-confirm")
        return WorkflowStateResponse(**data)

    def close(self) -> WorkflowStateResponse:
        """Close the dialog without saving."""
        data = self._post(f"{self._BASE_PATH}/close")
        return WorkflowStateResponse(**data)
