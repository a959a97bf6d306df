"""File attachment use cases."""

from .download_file import (
    DeleteFileRequest,
    DeleteFileUseCase,
    DownloadFileRequest,
    DownloadFileResponse,
    DownloadFileUseCase,
)
from .list_files import FileItem, ListFilesRequest, ListFilesResponse, ListFilesUseCase

__all__ = [
    "DeleteFileRequest",
    "DeleteFileUseCase",
    "DownloadFileRequest",
    "DownloadFileResponse",
    "DownloadFileUseCase",
    "FileItem",
    "ListFilesRequest",
    "ListFilesResponse",
    "ListFilesUseCase",
]
