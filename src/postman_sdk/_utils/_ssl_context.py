import os
import ssl
from typing import TYPE_CHECKING, Any, Dict

import certifi

from .constants import ENV_REQUESTS_CA_BUNDLE, ENV_SSL_CERT_DIR, ENV_SSL_CERT_FILE

if TYPE_CHECKING:
    from .._config import PostmanApiConfig


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


def create_ssl_context() -> ssl.SSLContext:
    ssl_cert_file = expand_path(os.environ.get(ENV_SSL_CERT_FILE))
    requests_ca_bundle = expand_path(os.environ.get(ENV_REQUESTS_CA_BUNDLE))
    ssl_cert_dir = expand_path(os.environ.get(ENV_SSL_CERT_DIR))

    return ssl.create_default_context(
        cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
        capath=ssl_cert_dir,
    )


def get_httpx_client_kwargs(config: "PostmanApiConfig") -> Dict[str, Any]:
    """Keyword arguments shared by the sync and async httpx clients."""
    return {
        "verify": create_ssl_context(),
        "timeout": config.timeout,
        "follow_redirects": True,
    }
