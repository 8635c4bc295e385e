"""Domain service: turn a DraftOrder into a SubmissionRequest.

Cross-references the draft against the product catalog. Two phases, as
with any multi-row operation here:

  Phase 1 - select: keep rows that name a product and carry a positive
            integer quantity. Other rows are dropped silently; they are
            rows the user has not finished, not errors.
  Phase 2 - resolve: look every selected row up in the catalog. A single
            unknown product aborts the whole request, so a partial
            order is never sent.
"""

from __future__ import annotations

from oms_client.domain.exceptions import EmptyOrderError, UnknownProductError
from oms_client.domain.model.catalog import ProductCatalog
from oms_client.domain.model.draft_order import DraftOrder, LineItem
from oms_client.domain.model.submission import SubmissionLine, SubmissionRequest
from oms_client.domain.model.value_objects import Quantity


def select_candidates(draft: DraftOrder) -> list[tuple[LineItem, Quantity]]:
    """Rows that pass the selection filter, paired with their parsed quantity."""
    candidates: list[tuple[LineItem, Quantity]] = []
    for item in draft.items:
        if not item.has_product:
            continue
        quantity = Quantity.parse(item.requested_quantity)
        if quantity is None:
            continue
        candidates.append((item, quantity))
    return candidates


def prepare_submission(draft: DraftOrder, catalog: ProductCatalog) -> SubmissionRequest:
    """Validate *draft* against *catalog* and build the wire request.

    Raises:
        EmptyOrderError: no row survives the selection filter.
        UnknownProductError: a selected row names a product not in the catalog.
    """
    # Phase 1: select
    candidates = select_candidates(draft)
    if not candidates:
        raise EmptyOrderError()

    # Phase 2: resolve (all or nothing)
    lines: list[SubmissionLine] = []
    for item, quantity in candidates:
        product = catalog.find(item.product_ref)
        if product is None:
            raise UnknownProductError(str(item.product_ref).strip())
        lines.append(
            SubmissionLine(
                product_id=product.id,
                quantity=quantity,
                unit_price=product.unit_price,
            )
        )

    return SubmissionRequest(lines=tuple(lines))
