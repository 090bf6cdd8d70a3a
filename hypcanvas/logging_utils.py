from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxdict = 6
_repr.maxlist = 6
_repr.maxtuple = 6


def _safe_repr(value: Any, *, max_items: int = 4, max_length: int = 300) -> str:
    # Complex prints compactly; anything holding many points is summarised.
    if isinstance(value, (list, tuple)) and len(value) > max_items:
        head = ", ".join(_safe_repr(item) for item in value[:max_items])
        return f"{type(value).__name__}(len={len(value)}: {head}, ...)"
    if isinstance(value, dict):
        keys = list(value.keys())
        if len(keys) > max_items:
            return f"dict(len={len(keys)}, keys={_repr.repr(keys[:max_items])}...)"
        return "{" + ", ".join(f"{k!r}: {_safe_repr(v)}" for k, v in value.items()) + "}"
    try:
        rendered = str(value) if type(value).__name__ == "Complex" else _repr.repr(value)
    except Exception as exc:  # pragma: no cover - repr of user payloads
        rendered = f"<repr-error {exc!r}>"
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append("kwargs={" + ", ".join(f"{key}={_safe_repr(val)}" for key, val in kwargs.items()) + "}")
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(logger: logging.Logger, *, name: Optional[str] = None) -> Callable[[F], F]:
    """Decorator tracing entry, result and exceptions of ``func`` at DEBUG."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func
        label = name or func.__qualname__

        @wraps(func)
        def traced(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("Entering %s (%s)", label, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.debug("Exception in %s", label, exc_info=True)
                raise
            logger.debug("Exiting %s -> %s", label, _safe_repr(result))
            return result

        traced._debug_logging_wrapped = True  # type: ignore[attr-defined]
        return cast(F, traced)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Iterable[str] = (),
) -> None:
    """Trace the module-level functions and plain methods defined in ``namespace``.

    Names imported from other modules are left alone.  Call at the bottom of a
    module with ``apply_debug_logging(globals(), logger=logger)``.
    """

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name or __name__)
    skipped = set(skip)

    for name, value in list(namespace.items()):
        if name in skipped or getattr(value, "__module__", None) != module_name:
            continue
        if inspect.isfunction(value):
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif inspect.isclass(value):
            for attr, member in list(vars(value).items()):
                if inspect.isfunction(member) and not attr.startswith("__"):
                    label = f"{value.__name__}.{attr}"
                    setattr(value, attr, debug_log_call(logger, name=label)(member))


__all__ = ["debug_log_call", "apply_debug_logging"]
