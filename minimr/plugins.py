"""Lookup of the bundled map/reduce applications by name."""

from __future__ import annotations

from pathlib import PurePath
from types import ModuleType
from typing import Callable

from .apps import crash, early_exit, indexer, jobcount, mtiming, nocrash, rtiming, wc
from .worker import KeyValue

MapFunc = Callable[[str, str], "list[KeyValue]"]
ReduceFunc = Callable[[str, "list[str]"], str]

_APPS: dict[str, ModuleType] = {
    "crash": crash,
    "early_exit": early_exit,
    "indexer": indexer,
    "jobcount": jobcount,
    "mtiming": mtiming,
    "nocrash": nocrash,
    "rtiming": rtiming,
    "wc": wc,
}

_SUFFIXES = (".so", ".py")


def load_plugin(name: str) -> tuple[MapFunc, ReduceFunc]:
    """Return the map and reduce functions of the application called ``name``.

    ``name`` may be a bare application name such as ``wc`` or a path such as
    ``../mrapps/wc.so``; the directory and a ``.so`` or ``.py`` suffix are
    ignored. Raises LookupError if no such application exists.
    """
    stem = PurePath(name).name
    for suffix in _SUFFIXES:
        if stem.endswith(suffix):
            stem = stem[: -len(suffix)]
            break
    try:
        app = _APPS[stem]
    except KeyError:
        raise LookupError(f"cannot load plugin {name}") from None
    return app.map_fn, app.reduce_fn