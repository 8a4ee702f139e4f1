"""HTTP Client Utilities."""

from .client import (
    RequestExecutor,
    configure_client,
    delete,
    get,
    get_client_config,
    head,
    patch,
    post,
    put,
)

__all__ = [
    # Executor
    "RequestExecutor",
    # Verb helpers
    "get",
    "post",
    "put",
    "delete",
    "patch",
    "head",
    # Configuration
    "configure_client",
    "get_client_config",
]
