import json
import logging
import os
from typing import Any

import click
from dotenv import load_dotenv
from httpx import HTTPError, Response

from ..._config import PostmanApiConfig
from ..._postman import Postman
from ..._utils.constants import DOTENV_FILE
from ...errors import (
    ApiKeyMissingError,
    InvalidIdentifierError,
    TaskFailedError,
    TaskTimeoutError,
)

SDK_ERRORS = (
    ApiKeyMissingError,
    InvalidIdentifierError,
    TaskFailedError,
    TaskTimeoutError,
    HTTPError,
)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_client() -> Postman:
    """Build a client from the environment, reading ``.env`` first.

    Raises:
        click.ClickException: When ``POSTMAN_API_KEY`` is not set.
    """
    load_dotenv(os.path.join(os.getcwd(), DOTENV_FILE))

    config = PostmanApiConfig.from_env()
    try:
        config.require_api_key()
    except ApiKeyMissingError as e:
        raise click.ClickException(e.message) from e

    return Postman(api_key=config.api_key, base_url=config.base_url)


def echo_json(response: Response) -> None:
    click.echo(json.dumps(response.json(), indent=2))


def fail(error: Any) -> click.ClickException:
    return click.ClickException(str(error).strip())
