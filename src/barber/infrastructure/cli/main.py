import logging

import click

from barber.infrastructure import config
from barber.infrastructure.cli.appointment_commands import (
    appointment_cancel,
    appointment_list,
    appointment_schedule,
    appointment_show,
    appointment_total,
    appointment_update,
)
from barber.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Barber — appointment scheduling for the shop"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def appointment() -> None:
    """Manage appointments."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
appointment.add_command(appointment_cancel)
appointment.add_command(appointment_list)
appointment.add_command(appointment_schedule)
appointment.add_command(appointment_show)
appointment.add_command(appointment_total)
appointment.add_command(appointment_update)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
