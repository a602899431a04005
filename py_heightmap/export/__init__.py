"""
Image export for generated rasters.
"""

from .image_exporter import export_heights, export_image

__all__ = ["export_image", "export_heights"]
