"""Utilities for audio fingerprinting: base64url, bit packing, filters and a rolling integral image."""

__version__ = "1.4.4"
__all__ = ["base64url", "bitpack", "filters", "rolling_integral_image"]