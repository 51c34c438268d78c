import os
import ssl
from typing import Any, Dict, Optional

from .constants import DEFAULT_TIMEOUT_SECONDS


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    # Expand environment variables like $HOME
    path = os.path.expandvars(path)
    # Expand user home directory ~
    path = os.path.expanduser(path)
    return path


def create_ssl_context():
    # Try truststore first (system certificates)
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        # Fallback to manual certificate configuration
        import certifi

        ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
        requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
        ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )


def get_httpx_client_kwargs(
    timeout: Optional[float] = None, follow_redirects: bool = True
) -> Dict[str, Any]:
    """Keyword arguments shared by the sync and async transport clients.

    Args:
        timeout: Request timeout in seconds. Defaults to 60.
        follow_redirects: Whether redirects are followed by the transport.

    Returns:
        dict: Arguments accepted by both ``httpx.Client`` and ``httpx.AsyncClient``.
    """
    return {
        "verify": create_ssl_context(),
        "timeout": timeout if timeout is not None else DEFAULT_TIMEOUT_SECONDS,
        "follow_redirects": follow_redirects,
    }
