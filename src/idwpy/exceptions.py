# SPDX-License-Identifier: MIT
"""
idwpy.exceptions
================

Error types raised by idwpy.
"""

from __future__ import annotations


class ConfigurationError(ValueError):
    """
    Raised when an interpolator cannot be built from the given samples.

    Typical causes are empty ``points`` or ``values``, sequences of different
    length, or coordinates of an unsupported shape. These are caller bugs;
    validate inputs before construction instead of catching this error.
    """


__all__ = ["ConfigurationError"]
