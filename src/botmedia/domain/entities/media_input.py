"""Ways a file can be handed to the bot API in an upload request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from botmedia.domain.mime import detect_mime_type

URL_PREFIXES = ("http://", "https://")
ATTACH_SCHEME = "attach://"
FALLBACK_FILENAME = "file"


@dataclass(frozen=True)
class RemoteUrl:
    """File the remote service fetches itself from a public URL."""

    url: str


@dataclass(frozen=True)
class FileId:
    """File already uploaded, referenced by its opaque id."""

    id: str


@dataclass(frozen=True)
class LocalFile:
    """File on local storage, sent as a multipart part named ``attach_name``."""

    path: str
    attach_name: str


@dataclass(frozen=True)
class InlineBytes:
    """In-memory content sent as a multipart part named ``attach_name``."""

    data: bytes
    filename: str
    attach_name: str


MediaInput = Union[RemoteUrl, FileId, LocalFile, InlineBytes]


@dataclass(frozen=True)
class MultipartFile:
    """One part of a multipart body."""

    field_name: str
    filename: str
    content: bytes
    mime_type: Optional[str] = None

    @classmethod
    def build(cls, field_name: str, filename: str, content: bytes) -> MultipartFile:
        return cls(
            field_name=field_name,
            filename=filename,
            content=content,
            mime_type=detect_mime_type(filename),
        )


def from_string(value: str) -> MediaInput:
    """Classify a string as a URL or a file id.

    Only a leading ``http://`` or ``https://`` makes a URL; everything else,
    including the empty string, is treated as a file id.
    """
    if value.startswith(URL_PREFIXES):
        return RemoteUrl(url=value)
    return FileId(id=value)


def from_file(path: str) -> LocalFile:
    return LocalFile(path=path, attach_name="file_" + path.replace("/", "_"))


def from_file_with_name(path: str, attach_name: str) -> LocalFile:
    return LocalFile(path=path, attach_name=attach_name)


def from_bytes(data: bytes, filename: str) -> InlineBytes:
    return InlineBytes(data=data, filename=filename, attach_name="bytes_" + filename)


def filename_from_path(path: str) -> str:
    """Last ``/`` segment of ``path``, or ``"file"`` when that segment is empty."""
    segment = path.split("/")[-1]
    return segment or FALLBACK_FILENAME


def to_json_value(media: MediaInput) -> str:
    """Value to put in the JSON payload for this input."""
    if isinstance(media, RemoteUrl):
        return media.url
    if isinstance(media, FileId):
        return media.id
    if isinstance(media, (LocalFile, InlineBytes)):
        return ATTACH_SCHEME + media.attach_name
    raise TypeError(f"Unsupported media input: {type(media).__name__}")


def requires_multipart(media: MediaInput) -> bool:
    if isinstance(media, (LocalFile, InlineBytes)):
        return True
    if isinstance(media, (RemoteUrl, FileId)):
        return False
    raise TypeError(f"Unsupported media input: {type(media).__name__}")


def get_attach_name(media: MediaInput) -> Optional[str]:
    if requires_multipart(media):
        return media.attach_name
    return None
