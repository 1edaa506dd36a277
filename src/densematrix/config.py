"""
Configuration & Global Constants
================================
This module serves as the central registry for library-wide defaults.

Why is this file needed?
------------------------
1. Abstraction: It prevents the default element type from being hardcoded
   throughout the code.
2. Environment: It lets the default dtype and the log level be chosen from
   the environment without touching the calling code.

Exports:
    DEFAULT_DTYPE (np.dtype): Element type used when none is given.
    LOG_LEVEL_ENV (str): Name of the environment variable holding the log level.
"""
import logging
import os

import numpy as np

DTYPE_ENV: str = "DENSEMATRIX_DTYPE"
LOG_LEVEL_ENV: str = "DENSEMATRIX_LOG_LEVEL"


def resolve_dtype(name: str | None) -> np.dtype:
    """
    Resolve a dtype name (e.g. "int64", "float32") to a numeric numpy dtype.

    Args:
        name: The dtype name, or None for float64.

    Raises:
        ValueError: If numpy does not know the name or the dtype is not numeric.

    Returns:
        The resolved numpy dtype.
    """
    if not name:
        return np.dtype(np.float64)
    try:
        dtype = np.dtype(name)
    except TypeError as e:
        raise ValueError(f"Unknown dtype '{name}'.") from e
    return check_numeric_dtype(dtype)


def check_numeric_dtype(dtype: np.dtype) -> np.dtype:
    """
    Ensure `dtype` is an integer, float or complex dtype.

    Raises:
        ValueError: For bool, string, object and other non-numeric kinds.
    """
    if dtype.kind not in "iufc":
        raise ValueError(f"Unsupported dtype '{dtype}'. "
                         f"Only integer, float and complex types are allowed.")
    return dtype


def get_log_level(default: int = logging.INFO) -> int:
    """
    Get the logging level from the environment, falling back to `default`.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else default
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else default


# Global Constants
DEFAULT_DTYPE: np.dtype = resolve_dtype(os.environ.get(DTYPE_ENV))
