"""Operation registry for ConfigScout - name-based access to the file operations.

Hosts that dispatch work by message name (plugin buses, RPC layers) can bind
these names to a FileUtilService instead of calling its methods directly.
"""

import inspect
from typing import Any, Callable, Dict, List, Protocol

from loguru import logger

from services.file_util_service import FileUtilService

DEFAULT_PREFIX = "configscout:file:util:"

# Operation name -> FileUtilService method name
OPERATIONS: Dict[str, str] = {
    "list:dir:get": "get_dir_list",
    "list:file:get": "get_file_list",
    "path:relative:get": "get_relative_path",
    "config:babel:has": "has_babel_config",
    "config:typescript:has": "has_tsc_config",
    "is:js": "is_js",
    "is:ts": "is_ts",
    "files:open": "open_files",
    "configs:local:open": "open_local_configs",
    "cosmic:local:open": "open_local_cosmic",
    "dir:walk": "walk_dir",
    "files:walk": "walk_files",
}


class EventBus(Protocol):
    """Minimal host bus: registers a handler under a name."""

    def on(self, name: str, handler: Callable[..., Any]) -> Any:
        ...


class OperationRegistry:
    """Registry mapping prefixed operation names to bound service methods."""

    def __init__(self, service: FileUtilService, prefix: str = DEFAULT_PREFIX):
        """Initialize the registry.

        Args:
            service: Service whose methods back the operations
            prefix: Prefix prepended to every operation name
        """
        self._service = service
        self._prefix = prefix
        self._handlers: Dict[str, Callable[..., Any]] = {}

        for operation, method_name in OPERATIONS.items():
            self.register(f"{prefix}{operation}", getattr(service, method_name))

    @property
    def service(self) -> FileUtilService:
        return self._service

    def register(self, name: str, handler: Callable[..., Any]) -> None:
        """Register or replace a handler.

        Args:
            name: Full operation name
            handler: Callable invoked on dispatch
        """
        if name in self._handlers:
            logger.debug(f"Replacing handler for {name}")
        self._handlers[name] = handler

    def names(self) -> List[str]:
        return list(self._handlers)

    def get(self, name: str) -> Callable[..., Any]:
        """Get the handler for a full operation name.

        Raises:
            KeyError: If no handler is registered under name
        """
        if name not in self._handlers:
            raise KeyError(f"Unknown operation: {name}")
        return self._handlers[name]

    async def dispatch(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke an operation, awaiting coroutine results.

        Walk operations return their async iterator unconsumed.
        """
        result = self.get(name)(*args, **kwargs)
        if inspect.isawaitable(result):
            result = await result
        return result

    def attach(self, bus: EventBus) -> None:
        """Register every operation on a host bus."""
        for name, handler in self._handlers.items():
            bus.on(name, handler)
        logger.debug(f"Attached {len(self._handlers)} operations to {type(bus).__name__}")


__all__ = [
    "DEFAULT_PREFIX",
    "OPERATIONS",
    "EventBus",
    "OperationRegistry",
]
