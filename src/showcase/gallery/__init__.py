"""Gallery assembly and page output."""

from .assembler import GalleryAssembler
from .container import GalleryContainer, append_random
from .page import GalleryPage

__all__ = [
    "GalleryAssembler",
    "GalleryContainer",
    "GalleryPage",
    "append_random",
]
