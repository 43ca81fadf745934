"""Turn media inputs into JSON values and multipart parts for an upload request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from loguru import logger

from botmedia.application.ports.file_system import FileSystem
from botmedia.domain.entities.media_input import (
    FileId,
    InlineBytes,
    LocalFile,
    MediaInput,
    MultipartFile,
    RemoteUrl,
    filename_from_path,
    from_bytes,
    get_attach_name,
    to_json_value,
)
from botmedia.domain.results import FileError, Result
from botmedia.infrastructure.filesystem import LocalFileSystem


@dataclass
class UploadRequest:
    """JSON fields plus the multipart parts they reference."""

    fields: dict[str, Any] = field(default_factory=dict)
    files: list[MultipartFile] = field(default_factory=list)

    @property
    def is_multipart(self) -> bool:
        return bool(self.files)


def read_file(path: str, fs: Optional[FileSystem] = None) -> Result[MediaInput, FileError]:
    """Load a file from disk into an in-memory media input."""
    fs = fs or LocalFileSystem()
    try:
        data = fs.read_bytes(path)
    except OSError as e:
        logger.error(f"Failed to read {path}: {e}")
        return Result.fail(FileError.from_os_error(path, e))
    return Result.ok(from_bytes(data, filename_from_path(path)))


def to_multipart_file(
    media: MediaInput, fs: Optional[FileSystem] = None
) -> Result[Optional[MultipartFile], FileError]:
    """Multipart part for ``media``, or None when the input travels as plain JSON."""
    if isinstance(media, (RemoteUrl, FileId)):
        return Result.ok(None)

    if isinstance(media, InlineBytes):
        return Result.ok(MultipartFile.build(media.attach_name, media.filename, media.data))

    if isinstance(media, LocalFile):
        fs = fs or LocalFileSystem()
        try:
            content = fs.read_bytes(media.path)
        except OSError as e:
            logger.error(f"Failed to read {media.path} for upload: {e}")
            return Result.fail(FileError.from_os_error(media.path, e))
        return Result.ok(
            MultipartFile.build(media.attach_name, filename_from_path(media.path), content)
        )

    raise TypeError(f"Unsupported media input: {type(media).__name__}")


def build_upload(
    params: Mapping[str, Any],
    media: Mapping[str, MediaInput],
    fs: Optional[FileSystem] = None,
) -> Result[UploadRequest, FileError]:
    """Assemble the JSON fields and multipart parts for one API call.

    Args:
        params: Plain JSON fields (chat_id, caption, ...)
        media: JSON field name -> media input for that field
        fs: File system used to read LocalFile inputs

    Stops at the first file that cannot be read. Parts with a repeated
    attach name are skipped (the first one is kept) and logged.
    """
    fs = fs or LocalFileSystem()
    request = UploadRequest(fields=dict(params))
    seen: set[str] = set()

    for field_name, item in media.items():
        request.fields[field_name] = to_json_value(item)

        attach_name = get_attach_name(item)
        if attach_name is None:
            continue
        if attach_name in seen:
            logger.warning(f"Duplicate attach name '{attach_name}' for field '{field_name}', skipping part")
            continue

        part = to_multipart_file(item, fs)
        if not part.success:
            return Result.fail(part.error)
        seen.add(attach_name)
        request.files.append(part.value)

    logger.debug(f"Prepared upload: {len(request.fields)} fields, {len(request.files)} files")
    return Result.ok(request)
