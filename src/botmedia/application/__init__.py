"""Application layer - upload preparation and download use cases."""

from botmedia.application.use_cases.download_file import FileDownloader, build_file_url
from botmedia.application.use_cases.prepare_upload import (
    UploadRequest,
    build_upload,
    read_file,
    to_multipart_file,
)

__all__ = [
    "FileDownloader",
    "build_file_url",
    "UploadRequest",
    "build_upload",
    "read_file",
    "to_multipart_file",
]
