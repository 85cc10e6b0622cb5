"""
modglobal — Hello World

One process-wide store, one namespace per module.
Falsey values are still values; absence is not an error.
"""

import concurrent.futures

import modglobal
from modglobal import ModuleGlobals, use

# Bind _get_global / _set_global / _delete_global / _has_global for this module.
use(globals())


def count_visit() -> int:
    # get-then-set is two operations; concurrent callers may interleave here.
    visits = _get_global("visits", 0)  # noqa: F821
    _set_global("visits", visits + 1)  # noqa: F821
    return visits + 1


def main():
    # ──────────────────────────────────────
    #  1. Start the store once per process
    # ──────────────────────────────────────
    modglobal.start()

    # ──────────────────────────────────────
    #  2. Plain API: namespace + key
    # ──────────────────────────────────────
    modglobal.set(__name__, "enabled", False)
    print("has enabled? ", modglobal.has(__name__, "enabled"))  # True
    print("enabled      ", modglobal.get(__name__, "enabled", True))  # False
    print("deleted      ", modglobal.delete(__name__, "enabled"))  # False
    print("after delete ", modglobal.get(__name__, "enabled", "<missing>"))

    # ──────────────────────────────────────
    #  3. Per-module forwarding
    # ──────────────────────────────────────
    for _ in range(3):
        count_visit()
    print("visits       ", _get_global("visits"))  # noqa: F821

    other = ModuleGlobals("some.other.module")
    other.set_global("visits", 100)
    print("other visits ", other.get_global("visits"), "(isolated)")

    # ──────────────────────────────────────
    #  4. Many threads, one serialized store
    # ──────────────────────────────────────
    with concurrent.futures.ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda i: modglobal.set(__name__, "last", i), range(100)))
    print("last writer  ", modglobal.get(__name__, "last"))

    modglobal.stop()


if __name__ == "__main__":
    main()
