from __future__ import annotations

import inspect
import logging
import reprlib
import time
from functools import wraps
from typing import Any, Callable, Iterable, Mapping, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 8
_repr.maxtuple = 8
_repr.maxdict = 8


def summarize(value: Any, *, max_items: int = 5, max_length: int = 300) -> str:
    """Render ``value`` for a log line without dumping large collections."""

    if isinstance(value, np.ndarray):
        parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"]
        if 0 < value.size <= max_items:
            parts.append(f"values={_repr.repr(value.tolist())}")
        elif value.size > max_items:
            parts.append(f"min={value.min()}")
            parts.append(f"max={value.max()}")
        return ", ".join(parts)

    # interval sets render through their ordered mapping
    as_dict = getattr(value, "as_dict", None)
    if callable(as_dict):
        mapping = as_dict()
        return f"{type(value).__name__}(segments={len(mapping)}, {summarize(mapping)})"

    if isinstance(value, dict):
        items = []
        for idx, (key, val) in enumerate(value.items()):
            if idx >= max_items:
                items.append("...")
                break
            items.append(f"{summarize(key)}: {summarize(val)}")
        return "{" + ", ".join(items) + "}"

    if isinstance(value, (list, tuple)):
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        items = [summarize(item) for item in value[:max_items]]
        if len(value) > max_items:
            items.append(f"... ({len(value)} items)")
        return f"{open_br}{', '.join(items)}{close_br}"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _render_call(qualname: str, args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    rendered = [summarize(arg) for arg in args]
    rendered.extend(f"{key}={summarize(value)}" for key, value in kwargs.items())
    return f"{qualname}({', '.join(rendered)})"


def debug_log_call(logger: logging.Logger, *, name: Optional[str] = None) -> Callable[[F], F]:
    """Trace calls of the decorated function at DEBUG level.

    The entry line renders the arguments through :func:`summarize`, so
    long coverage lists are cut short and interval sets show their segment
    count instead of every entry. The
    exit line carries the elapsed wall time and the summarised result.
    """

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", func.__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)

            logger.debug("Entering %s", _render_call(qualname, args, kwargs))
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("Exception in %s after %.3fs", qualname, time.perf_counter() - started)
                raise
            logger.debug(
                "Exiting %s in %.3fs -> %s", qualname, time.perf_counter() - started, summarize(result)
            )
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public module-level functions of ``namespace`` with :func:`debug_log_call`.

    Private helpers (leading underscore) and names listed in ``skip`` are left
    alone so hot inner loops stay unwrapped.
    """

    module_name = namespace.get("__name__")
    if not isinstance(module_name, str):
        module_name = None
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set or name.startswith("_"):
            continue
        if inspect.isfunction(value) and getattr(value, "__module__", None) == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)


__all__ = ["summarize", "debug_log_call", "apply_debug_logging"]
