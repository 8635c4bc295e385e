"""CLI commands for the inventory history log."""

from __future__ import annotations

import click

from oms_client.application.show_history import FETCH_ERROR, ShowHistoryHandler
from oms_client.domain.exceptions import BackendError, DomainException


@click.command("list")
@click.option("--product", "product_id", default=None, help="Only entries for this product ID.")
@click.option("--action", default=None, help="Only entries with this action (ADD, UPDATE, DELETE, ORDER).")
@click.pass_obj
def history_list(container, product_id: str | None, action: str | None) -> None:
    """Show inventory changes, newest first."""
    handler = ShowHistoryHandler(container.history_repository())

    try:
        entries = handler.handle(product_id=product_id, action=action)
    except BackendError as exc:
        raise click.ClickException(exc.message or FETCH_ERROR)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not entries:
        click.echo("No history records found")
        return

    click.echo(f"{'Date':<17} {'Action':<7} {'Previous':>9} {'New':>6}  Description")
    click.echo("-" * 72)
    for e in entries:
        click.echo(
            f"{e.date:<17} {e.action:<7} {e.previous_quantity:>9} {e.new_quantity:>6}  {e.description}"
        )
