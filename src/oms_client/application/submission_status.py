"""Visible status of the submit action.

Drives user feedback only; it is not business state. Transitions:

    IDLE -> SUBMITTING -> SUCCEEDED | FAILED -> IDLE
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from oms_client.domain.model.order import Order

SUCCESS_MESSAGE = "Order created successfully"
GENERIC_FAILURE = "Error creating order. Please try again."


class SubmissionState(Enum):
    IDLE = "IDLE"
    SUBMITTING = "SUBMITTING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class SubmissionStatus:

    state: SubmissionState
    message: str | None = None
    order: Order | None = None  # set on SUCCEEDED only

    @staticmethod
    def idle() -> SubmissionStatus:
        return SubmissionStatus(SubmissionState.IDLE)

    @staticmethod
    def submitting() -> SubmissionStatus:
        return SubmissionStatus(SubmissionState.SUBMITTING)

    @staticmethod
    def succeeded(order: Order) -> SubmissionStatus:
        return SubmissionStatus(SubmissionState.SUCCEEDED, SUCCESS_MESSAGE, order)

    @staticmethod
    def failed(message: str | None) -> SubmissionStatus:
        return SubmissionStatus(SubmissionState.FAILED, message or GENERIC_FAILURE)

    @property
    def is_idle(self) -> bool:
        return self.state is SubmissionState.IDLE

    @property
    def is_submitting(self) -> bool:
        return self.state is SubmissionState.SUBMITTING

    @property
    def is_succeeded(self) -> bool:
        return self.state is SubmissionState.SUCCEEDED

    @property
    def is_failed(self) -> bool:
        return self.state is SubmissionState.FAILED

    def __str__(self) -> str:
        if self.message:
            return f"{self.state.value}: {self.message}"
        return self.state.value
