"""Root CLI group for oms-client with global flags and command registration."""

from __future__ import annotations

import click

from oms_client.infrastructure.bootstrap import Container
from oms_client.infrastructure.cli.auth_commands import auth_login, auth_logout, auth_register
from oms_client.infrastructure.cli.dashboard_commands import dashboard
from oms_client.infrastructure.cli.history_commands import history_list
from oms_client.infrastructure.cli.order_commands import order_create, order_list
from oms_client.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from oms_client.infrastructure.config import ClientSettings
from oms_client.infrastructure.logging import configure_logging


@click.group()
@click.option("--api-url", default=None, help="Back-end base URL (env: OMS_CLIENT_API_BASE_URL).")
@click.option("--timeout", "timeout_seconds", type=float, default=None, help="Request timeout in seconds.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    api_url: str | None,
    timeout_seconds: float | None,
    verbose: bool,
    log_json: bool,
) -> None:
    """OMS client: manage products, place orders and review inventory history."""
    settings = ClientSettings.from_cli(
        api_base_url=api_url,
        timeout_seconds=timeout_seconds,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    if ctx.obj is None:
        ctx.obj = Container(settings)


@cli.group()
def auth() -> None:
    """Sign in and out."""


@cli.group()
def order() -> None:
    """Place and list orders."""


@cli.group()
def product() -> None:
    """Browse and maintain the product catalog."""


@cli.group()
def history() -> None:
    """Review the inventory change log."""


# Register subcommands
auth.add_command(auth_login)
auth.add_command(auth_logout)
auth.add_command(auth_register)
order.add_command(order_create)
order.add_command(order_list)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
history.add_command(history_list)
cli.add_command(dashboard)
