"""modglobal — a process-wide key-value store, namespaced per caller.

Useful wherever a module would otherwise need its own stateful service
just to hold onto some state.  Start the store once at process startup,
then address values by ``(namespace, key)``, conventionally with the
calling module's ``__name__`` as the namespace::

    import modglobal

    modglobal.start()
    modglobal.set(__name__, "seen", 0)
    modglobal.has(__name__, "seen")   # -> True, even though 0 is falsey
    modglobal.delete(__name__, "seen")  # -> 0
"""

from modglobal.config import StoreConfig
from modglobal.exceptions import ModglobalError, StoreNotRunningError, StoreTimeoutError
from modglobal.facade import (
    clear_namespace,
    delete,
    get,
    get_server,
    has,
    is_running,
    list_keys,
    set,
    start,
    stop,
)
from modglobal.globals import ModuleGlobals, use
from modglobal.server import StoreServer

__version__ = "0.1.0"

__all__ = [
    "ModglobalError",
    "ModuleGlobals",
    "StoreConfig",
    "StoreNotRunningError",
    "StoreServer",
    "StoreTimeoutError",
    "clear_namespace",
    "delete",
    "get",
    "get_server",
    "has",
    "is_running",
    "list_keys",
    "set",
    "start",
    "stop",
    "use",
]
