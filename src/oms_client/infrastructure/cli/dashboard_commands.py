"""CLI command for the dashboard summary."""

from __future__ import annotations

import click

from oms_client.application.dashboard import LOAD_ERROR, LOW_STOCK_THRESHOLD, DashboardHandler
from oms_client.domain.exceptions import BackendError, DomainException
from oms_client.infrastructure.cli.order_commands import display_orders


@click.command("dashboard")
@click.pass_obj
def dashboard(container) -> None:
    """Headline numbers and the latest orders."""
    handler = DashboardHandler(container.product_repository(), container.order_repository())

    try:
        summary = handler.handle()
    except BackendError as exc:
        raise click.ClickException(exc.message or LOAD_ERROR)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total products:  {summary.total_products}")
    click.echo(f"Total orders:    {summary.total_orders}")
    click.echo(f"Low stock (<{LOW_STOCK_THRESHOLD}): {summary.low_stock_products}")
    click.echo()
    click.echo("Recent orders")
    display_orders(summary.recent_orders)
