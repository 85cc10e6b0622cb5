"""Per-caller forwarding onto a fixed namespace.

Two ways to get ``get_global`` / ``set_global`` / ``delete_global`` /
``has_global`` for a module:

* Hold a :class:`ModuleGlobals` bound to the module's name::

      state = ModuleGlobals(__name__)
      state.set_global("hits", 0)

* Or bind the functions straight into the module with :func:`use`::

      from modglobal import use

      use(globals())               # _get_global, _set_global, ...
      use(globals(), public=True)  # get_global, set_global, ...
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, MutableMapping
from typing import Any

from modglobal import facade

_FORWARDED = ("delete_global", "get_global", "has_global", "set_global")


class ModuleGlobals:
    """Forwards the four store operations with *namespace* filled in.

    Holds no state of its own; every call goes to the process-wide store.

    Parameters:
        namespace: Namespace token, conventionally the caller's ``__name__``.
    """

    __slots__ = ("namespace",)

    def __init__(self, namespace: Hashable) -> None:
        self.namespace = namespace

    def get_global(self, key: Hashable, default: Any = None) -> Any:
        return facade.get(self.namespace, key, default)

    def set_global(self, key: Hashable, value: Any) -> None:
        facade.set(self.namespace, key, value)

    def delete_global(self, key: Hashable) -> Any:
        return facade.delete(self.namespace, key)

    def has_global(self, key: Hashable) -> bool:
        return facade.has(self.namespace, key)

    def __repr__(self) -> str:
        return f"ModuleGlobals({self.namespace!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModuleGlobals):
            return NotImplemented
        return self.namespace == other.namespace

    def __hash__(self) -> int:
        return hash((ModuleGlobals, self.namespace))


def use(module_globals: MutableMapping[str, Any], *, public: bool = False) -> ModuleGlobals:
    """Bind the forwarding functions into a module's namespace.

    The namespace is the module's ``__name__``.  With ``public=False``
    (the default) the functions are bound as ``_get_global`` etc. and
    stay out of ``from module import *``.  With ``public=True`` they are
    bound under their plain names and added to ``__all__`` when the
    module defines one.

    Args:
        module_globals: The caller's ``globals()``.
        public:         Export the functions as part of the module's API.

    Returns:
        The :class:`ModuleGlobals` the functions delegate to.

    Raises:
        ValueError: If *module_globals* has no ``__name__``.
    """
    try:
        namespace = module_globals["__name__"]
    except KeyError:
        raise ValueError("use() expects a module's globals() with a '__name__' entry") from None

    bound = ModuleGlobals(namespace)
    for name in _FORWARDED:
        func: Callable[..., Any] = getattr(bound, name)
        if public:
            module_globals[name] = func
        else:
            module_globals[f"_{name}"] = func

    exported = module_globals.get("__all__")
    if public and exported is not None:
        missing = [name for name in _FORWARDED if name not in exported]
        if isinstance(exported, list):
            exported.extend(missing)
        else:
            module_globals["__all__"] = type(exported)([*exported, *missing])
    return bound
