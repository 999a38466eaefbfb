import click

from ._utils._common import setup_logging
from .cli_me import me
from .cli_sync_spec import sync_spec
from .cli_wait_task import wait_task


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Command line tools for the Postman API."""
    setup_logging(verbose)


cli.add_command(me)
cli.add_command(sync_spec)
cli.add_command(wait_task)
