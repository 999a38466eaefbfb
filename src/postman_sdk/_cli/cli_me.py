import click

from ._utils._common import SDK_ERRORS, create_client, echo_json, fail


@click.command()
def me() -> None:
    """Show the user that owns the API key."""
    client = create_client()

    try:
        response = client.users.me()
    except SDK_ERRORS as e:
        raise fail(e) from e

    echo_json(response)
