"""
Call-site resolution over the Python call stack.
"""

import inspect

from ..models import CallerInfo, UNKNOWN_CALLER


def resolve_caller(skip: int = 0) -> CallerInfo:
    """
    Describe a frame on the current call stack.

    Args:
        skip: 0 for the function calling resolve_caller, 1 for its caller,
            and so on

    Returns:
        CallerInfo for that frame, or UNKNOWN_CALLER when the stack is
        not deep enough
    """
    if skip < 0:
        raise ValueError("skip cannot be negative")

    frame = inspect.currentframe()
    try:
        target = frame.f_back if frame is not None else None
        for _ in range(skip):
            if target is None:
                break
            target = target.f_back

        if target is None:
            return UNKNOWN_CALLER

        code = target.f_code
        module = target.f_globals.get("__name__", "")
        function_name = f"{module}.{code.co_qualname}" if module else code.co_qualname
        return CallerInfo(
            function_name=function_name,
            file_path=code.co_filename,
            line_number=target.f_lineno or 0,
        )
    finally:
        del frame


__all__ = [
    "resolve_caller",
]
