"""CLI commands for signing in and out."""

from __future__ import annotations

import click

from oms_client.application.login import LoginHandler
from oms_client.application.register import RegisterHandler
from oms_client.domain.exceptions import DomainException


@click.command("login")
@click.option("--username", prompt=True, help="Account name.")
@click.option("--password", prompt=True, hide_input=True, help="Account password.")
@click.pass_obj
def auth_login(container, username: str, password: str) -> None:
    """Sign in and remember the session."""
    handler = LoginHandler(container.auth_repository(), container.session)

    try:
        handler.handle(username=username, password=password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Signed in as {container.session.username}")


@click.command("logout")
@click.pass_obj
def auth_logout(container) -> None:
    """Forget the saved session."""
    container.session.logout()
    click.echo("Signed out.")


@click.command("register")
@click.option("--username", prompt=True, help="Account name.")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True, help="Account password.")
@click.option("--email", prompt=True, help="Contact email.")
@click.option("--full-name", prompt=True, help="Display name.")
@click.pass_obj
def auth_register(container, username: str, password: str, email: str, full_name: str) -> None:
    """Create an account on the back end."""
    handler = RegisterHandler(container.auth_repository())

    try:
        message = handler.handle(username, password, email, full_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)
    click.echo("Please log in.")
