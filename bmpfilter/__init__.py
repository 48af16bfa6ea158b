"""Filters for 24-bit BMP images: grayscale, reflect, blur and edge detection."""

__version__ = "0.1.0"
__all__ = ["bmp", "filters", "workers", "parallel", "cli"]