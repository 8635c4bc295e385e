"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from oms_client.application.add_product import AddProductHandler
from oms_client.application.delete_product import DeleteProductHandler
from oms_client.application.dto import ProductDTO
from oms_client.application.load_catalog import LoadCatalogHandler
from oms_client.application.update_product import UpdateProductHandler
from oms_client.domain.exceptions import DomainException


@click.command("list")
@click.pass_obj
def product_list(container) -> None:
    """List all products in the catalog."""
    handler = LoadCatalogHandler(container.product_repository())

    try:
        catalog = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if catalog.is_empty:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7}  {'SKU':<12} Category")
    click.echo("-" * 70)
    for p in (ProductDTO.from_product(p) for p in catalog):
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.unit_price:>10} {p.available:>7}  {p.sku:<12} {p.category}"
        )


@click.command("add")
@click.option("--sku", required=True, help="Stock-keeping unit, unique per account.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00).")
@click.option("--quantity", required=True, help="Units in stock.")
@click.option("--description", default=None, help="Free-text description.")
@click.option("--category", default=None, help="Category label.")
@click.pass_obj
def product_add(container, sku, name, price, quantity, description, category) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(container.product_repository())

    try:
        product = handler.handle(sku, name, price, quantity, description, category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Product created successfully")
    click.echo(f"Product #{product.id} '{product.name}' at {product.unit_price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--sku", default=None, help="New SKU.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New unit price (e.g. 29.99).")
@click.option("--quantity", default=None, help="New stock level.")
@click.option("--description", default=None, help="New description.")
@click.option("--category", default=None, help="New category.")
@click.pass_obj
def product_update(container, product_id, sku, name, price, quantity, description, category) -> None:
    """Update a product; fields not given keep their current value."""
    handler = UpdateProductHandler(container.product_repository())

    try:
        product = handler.handle(
            product_id,
            sku=sku,
            name=name,
            price=price,
            quantity=quantity,
            description=description,
            category=category,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Product updated successfully")
    click.echo(
        f"Product #{product.id} '{product.name}' at {product.unit_price}, "
        f"{product.available_quantity} in stock"
    )


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Are you sure you want to delete this product?")
@click.pass_obj
def product_delete(container, product_id: str) -> None:
    """Delete a product that no order refers to."""
    handler = DeleteProductHandler(container.product_repository())

    try:
        message = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)
