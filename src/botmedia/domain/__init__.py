"""Domain models and entities."""

from botmedia.domain.entities.file import File
from botmedia.domain.entities.media_input import (
    FileId,
    InlineBytes,
    LocalFile,
    MediaInput,
    MultipartFile,
    RemoteUrl,
    filename_from_path,
    from_bytes,
    from_file,
    from_file_with_name,
    from_string,
    get_attach_name,
    requires_multipart,
    to_json_value,
)
from botmedia.domain.mime import DEFAULT_MIME_TYPE, detect_mime_type
from botmedia.domain.results import FileError, Result

__all__ = [
    # Media inputs
    "MediaInput",
    "RemoteUrl",
    "FileId",
    "LocalFile",
    "InlineBytes",
    "MultipartFile",
    "from_string",
    "from_file",
    "from_file_with_name",
    "from_bytes",
    "filename_from_path",
    "to_json_value",
    "requires_multipart",
    "get_attach_name",
    # Remote metadata
    "File",
    # MIME
    "DEFAULT_MIME_TYPE",
    "detect_mime_type",
    # Results
    "Result",
    "FileError",
]
