from __future__ import annotations

import os
from typing import Mapping

import numpy as np


SUPPORTED_INT_BITS = (8, 16, 32, 64)


def int_bounds(bits: int) -> tuple[int, int]:
    """Return (min, max) of a signed integer of the given width."""
    if bits not in SUPPORTED_INT_BITS:
        raise ValueError(
            f"unsupported integer width {bits!r}; "
            f"expected one of {', '.join(str(b) for b in SUPPORTED_INT_BITS)}."
        )
    info = np.iinfo(f"int{bits}")
    return int(info.min), int(info.max)


def load_int_bits(environ: Mapping[str, str] | None = None) -> int:
    """Read RATSOLVE_INT_BITS from *environ* (default: os.environ)."""
    env = os.environ if environ is None else environ
    raw = env.get("RATSOLVE_INT_BITS", "64")
    try:
        bits = int(raw)
    except ValueError:
        raise ValueError(f"RATSOLVE_INT_BITS must be an integer, got {raw!r}.") from None
    int_bounds(bits)
    return bits


RATSOLVE_INT_BITS = load_int_bits()
INT_MIN, INT_MAX = int_bounds(RATSOLVE_INT_BITS)
