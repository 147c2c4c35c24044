from __future__ import annotations

from typing import Any, Callable


def curry_to_arity(fn: Callable[..., Any], arity: int) -> Callable[..., Any]:
    """Collect positional arguments over several calls, then call ``fn``.

    Calling with no arguments counts as passing a single ``None`` so that
    ``curried()()()`` eventually calls through instead of returning
    callables forever. Arguments beyond ``arity`` are dropped.
    """

    def _resolver(*collected: Any) -> Callable[..., Any]:
        def _curried(*args: Any) -> Any:
            if arity != 0 and not args:
                args = (None,)
            all_args = collected + args
            if len(all_args) >= arity:
                return fn(*all_args[:arity])
            return _resolver(*all_args)

        return _curried

    return _resolver()
