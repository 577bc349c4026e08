"""Card rendering."""

from .progressive import ImageState, ProgressiveImage
from .renderer import ProjectRenderer
from .template import ProjectTemplate

__all__ = [
    "ImageState",
    "ProgressiveImage",
    "ProjectRenderer",
    "ProjectTemplate",
]
