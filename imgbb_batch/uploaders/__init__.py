"""Image hosting upload clients."""

from .imgbb import ImageUploader, ImgBBUploader

__all__ = ["ImageUploader", "ImgBBUploader"]
