"""
Trace code generation.
"""

import random
import string
from typing import Optional


TRACE_ALPHABET = string.ascii_lowercase + string.digits


def generate_trace_code(
    prefix: str = "",
    length: int = 6,
    rng: Optional[random.Random] = None
) -> str:
    """
    Generate a random trace code for correlating related log lines.

    Not suitable for security purposes. Six characters give about 2e9
    combinations; pick a longer code when collisions matter.

    Args:
        prefix: Optional prefix, joined to the code with a dot
        length: Number of random characters
        rng: Random source, the module-level generator when omitted

    Returns:
        ``prefix.code`` or just ``code`` when the prefix is empty
    """
    if length < 0:
        raise ValueError("length cannot be negative")

    source = rng if rng is not None else random
    code = "".join(source.choices(TRACE_ALPHABET, k=length))

    if prefix:
        return f"{prefix}.{code}"
    return code


__all__ = [
    "TRACE_ALPHABET",
    "generate_trace_code",
]
