"""CLI commands for composing, submitting and listing orders."""

from __future__ import annotations

import asyncio
import json

import click

from oms_client.application.dto import OrderDTO
from oms_client.application.order_list import OrderListView
from oms_client.application.submission_controller import SubmissionController
from oms_client.application.submission_status import SubmissionStatus
from oms_client.domain.exceptions import DomainException


def _parse_items(raw_items: tuple[str, ...]) -> list[tuple[str, str | None]]:
    """Split 'REF:QTY' entries into raw (ref, quantity) pairs.

    Values are kept as typed; the draft validates nothing until submit.
    A bare 'REF' keeps the row's default quantity.
    """
    pairs: list[tuple[str, str | None]] = []
    for entry in raw_items:
        if ":" in entry:
            ref, qty = entry.rsplit(":", 1)
            pairs.append((ref.strip(), qty.strip()))
        else:
            pairs.append((entry.strip(), None))
    return pairs


def _fill_draft(controller: SubmissionController, pairs: list[tuple[str, str | None]]) -> None:
    """Enter each pair into the draft the way a user fills in form rows."""
    draft = controller.draft
    for index, (ref, qty) in enumerate(pairs):
        if index > 0:
            draft.add_item()
        draft.update_item(index, "product_ref", ref)
        if qty is not None:
            draft.update_item(index, "requested_quantity", qty)


async def _compose_and_submit(
    controller: SubmissionController,
    pairs: list[tuple[str, str | None]],
    dry_run: bool,
) -> SubmissionStatus | dict:
    await controller.activate()
    controller.open_form()
    _fill_draft(controller, pairs)
    if dry_run:
        return controller.prepare_submission().to_wire()
    return await controller.submit()


def display_orders(orders: list[OrderDTO]) -> None:
    """Shared formatting for the order list."""
    if not orders:
        click.echo("No orders found. Create your first order!")
        return

    click.echo(f"{'Order Number':<16} {'Date':<11} {'Status':<10} {'Total':>10} {'Items':>6}")
    click.echo("-" * 57)
    for o in orders:
        click.echo(
            f"{o.order_number:<16} {o.order_date:<11} {o.status:<10} {o.total:>10} {o.item_count:>6}"
        )


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.order_number or '#' + dto.id}  (status={dto.status})")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("create")
@click.option(
    "--item", "items", multiple=True, required=True,
    help="A line as 'ProductID:Qty' (repeatable).",
)
@click.option("--dry-run", is_flag=True, default=False, help="Print the request instead of sending it.")
@click.pass_obj
def order_create(container, items: tuple[str, ...], dry_run: bool) -> None:
    """Compose an order from --item lines and submit it."""
    pairs = _parse_items(items)
    controller = container.submission_controller()

    try:
        result = asyncio.run(_compose_and_submit(controller, pairs, dry_run))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dry_run:
        click.echo(json.dumps(result, indent=2))
        return

    if result.is_failed:
        raise click.ClickException(result.message)

    click.echo(result.message)
    _display_order(OrderDTO.from_order(result.order))
    click.echo()
    if controller.order_list.error:
        click.echo(f"Warning: {controller.order_list.error}", err=True)
    display_orders(controller.order_list.orders)


@click.command("list")
@click.pass_obj
def order_list(container) -> None:
    """List your orders."""
    view = OrderListView(container.order_repository())

    try:
        orders = view.refresh()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if view.error:
        raise click.ClickException(view.error)

    display_orders(orders)
