"""Application service: compose and submit an order.

Owns the draft, the catalog it is checked against, and the visible
submission status. Runs on a single event loop: the only suspension
points are the awaited back-end calls, each pushed to the loop's default
executor because the HTTP repositories are blocking.

Flow of one ``submit()``:
1. Build the SubmissionRequest (synchronous; a validation error is
   raised straight back and the status stays IDLE).
2. Move to SUBMITTING *before* the first await, so any interleaved call
   already sees the pending state.
3. Await the back end.
4. SUCCEEDED: reset the draft, close the form, refresh the order list
   once. FAILED: keep the draft exactly as it was.
"""

from __future__ import annotations

import asyncio

import structlog

from oms_client.application.load_catalog import LoadCatalogHandler
from oms_client.application.order_list import OrderListView
from oms_client.application.submission_status import SubmissionStatus
from oms_client.domain.exceptions import BackendError, SessionExpiredError
from oms_client.domain.model.catalog import ProductCatalog
from oms_client.domain.model.draft_order import DraftOrder
from oms_client.domain.model.submission import SubmissionRequest
from oms_client.domain.repository.order_repository import OrderRepository
from oms_client.domain.service.submission_preparation import prepare_submission

log = structlog.get_logger(__name__)


class SubmissionController:
    """Draft, catalog and submit status behind the order view.

    ``_attempt`` identifies the submission whose result may still be
    shown; ``abandon()`` moves it on so a late result is dropped.
    """

    def __init__(
        self,
        catalog_loader: LoadCatalogHandler,
        order_repo: OrderRepository,
        order_list: OrderListView,
    ) -> None:
        self._catalog_loader = catalog_loader
        self._order_repo = order_repo
        self._order_list = order_list
        self._catalog = ProductCatalog()
        self._draft = DraftOrder()
        self._status = SubmissionStatus.idle()
        self._is_open = False
        self._attempt = 0

    # --- Read access ----------------------------------------------------------

    @property
    def status(self) -> SubmissionStatus:
        return self._status

    @property
    def draft(self) -> DraftOrder:
        return self._draft

    @property
    def catalog(self) -> ProductCatalog:
        return self._catalog

    @property
    def order_list(self) -> OrderListView:
        return self._order_list

    @property
    def is_open(self) -> bool:
        """Whether the composition form is showing."""
        return self._is_open

    # --- View lifecycle -------------------------------------------------------

    async def activate(self) -> None:
        """View entry: refetch the catalog and the order list."""
        loop = asyncio.get_running_loop()
        if self._status.is_submitting:
            log.info("catalog.refetch_skipped", reason="submission in flight")
        else:
            self._catalog = await loop.run_in_executor(None, self._catalog_loader.handle)
            log.debug("catalog.loaded", products=len(self._catalog))
        await loop.run_in_executor(None, self._order_list.refresh)

    def open_form(self) -> None:
        """The "create order" action: a fresh draft with one empty row."""
        if self._status.is_submitting:
            log.warning("form.open_ignored", reason="submission in flight")
            return
        self._draft.reset()
        self._status = SubmissionStatus.idle()
        self._is_open = True

    def cancel(self) -> None:
        """Explicit cancel: discard the draft and close the form."""
        if self._status.is_submitting:
            log.warning("form.cancel_ignored", reason="submission in flight")
            return
        self._draft.reset()
        self._status = SubmissionStatus.idle()
        self._is_open = False

    def dismiss(self) -> None:
        """Acknowledge a success or failure message."""
        if self._status.is_succeeded or self._status.is_failed:
            self._status = SubmissionStatus.idle()

    def abandon(self) -> None:
        """Navigate away: any pending result will be dropped unseen."""
        self._attempt += 1
        self._status = SubmissionStatus.idle()

    # --- Submission -----------------------------------------------------------

    def prepare_submission(self) -> SubmissionRequest:
        return prepare_submission(self._draft, self._catalog)

    async def submit(self) -> SubmissionStatus:
        """Submit the current draft.

        Raises EmptyOrderError / UnknownProductError before any network
        call, and re-raises SessionExpiredError for the session layer.
        Back-end rejections and transport failures end in FAILED.
        """
        if self._status.is_submitting:
            log.warning("submission.ignored", reason="already submitting")
            return self._status
        self.dismiss()

        request = self.prepare_submission()

        self._attempt += 1
        attempt = self._attempt
        self._status = SubmissionStatus.submitting()
        log.info("submission.started", lines=len(request.lines))

        loop = asyncio.get_running_loop()
        try:
            order = await loop.run_in_executor(None, self._order_repo.submit, request)
        except SessionExpiredError:
            if attempt != self._attempt:
                log.info("submission.discarded", attempt=attempt)
                return self._status
            self.abandon()
            raise
        except BackendError as exc:
            if attempt != self._attempt:
                log.info("submission.discarded", attempt=attempt)
                return self._status
            self._status = SubmissionStatus.failed(exc.message)
            log.warning(
                "submission.failed", status_code=exc.status_code, error=self._status.message
            )
            return self._status
        except Exception:
            if attempt == self._attempt:
                self._status = SubmissionStatus.failed(None)
            raise

        if attempt != self._attempt:
            log.info("submission.discarded", attempt=attempt, order_id=order.id)
            return self._status

        self._draft.reset()
        self._is_open = False
        self._status = SubmissionStatus.succeeded(order)
        log.info("submission.succeeded", order_id=order.id, order_number=order.order_number)

        await loop.run_in_executor(None, self._order_list.refresh)
        return self._status
