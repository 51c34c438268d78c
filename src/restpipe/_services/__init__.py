from .network_manager import NetworkManager, is_retryable_exception

__all__ = [
    "NetworkManager",
    "is_retryable_exception",
]
