"""
Function tracing decorator.

Trace lines go through the OutputManager singleton at level 3 on the
opt-in 'trace' channel (enable with -vvv or --show trace:3).
"""

import functools
from pathlib import Path


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return repr(value[:47] + '...')
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Log calls, return values and exceptions of ``func``."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from .manager import get_output

        out = get_output()
        if out.threshold('trace') < 3:
            return func(*args, **kwargs)

        name = f"{func.__module__}.{func.__qualname__}"
        shown = [_short_repr(a) for a in args]
        shown += [f"{k}={_short_repr(v)}" for k, v in kwargs.items()]
        out.emit(3, "[TRACE] >> {fn}({args})", channel='trace',
                 fn=name, args=', '.join(shown))
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.emit(3, "[TRACE] !! {fn} raised {exc}: {msg}", channel='trace',
                     fn=name, exc=type(e).__name__, msg=str(e))
            raise
        if result is not None:
            out.emit(3, "[TRACE] << {fn} returned {val}", channel='trace',
                     fn=name, val=_short_repr(result))
        return result

    return wrapper
