"""Image use cases."""

from .delete_image import DeleteImageRequest, DeleteImageResponse, DeleteImageUseCase
from .upload_image import UploadImageRequest, UploadImageResponse, UploadImageUseCase

__all__ = [
    "DeleteImageRequest",
    "DeleteImageResponse",
    "DeleteImageUseCase",
    "UploadImageRequest",
    "UploadImageResponse",
    "UploadImageUseCase",
]
