"""Download files the bot API already knows by file id.

Flow:
1. Resolve the file id to metadata (getFile)
2. Build the file download URL from the API base URL, token and file_path
3. GET the bytes
4. Optionally write them to disk

Every stage returns a Result and stops the pipeline on failure. Nothing is
retried or cached.
"""

from __future__ import annotations

from typing import Optional

import httpx
from loguru import logger

from botmedia.application.ports.bot_client import BotApiError, BotClient
from botmedia.application.ports.file_system import FileSystem
from botmedia.domain.entities.file import File
from botmedia.domain.results import FileError, Result
from botmedia.infrastructure.filesystem import LocalFileSystem
from botmedia.infrastructure.logging_config import mask_token
from botmedia.infrastructure.settings import DEFAULT_API_URL, get_settings

DEFAULT_FILE_URL = "https://api.telegram.org/file"
BODY_PREVIEW_CHARS = 200


def build_file_url(api_url: str, token: str, file_path: str) -> str:
    """Download URL for ``file_path``.

    https://api.telegram.org/bot -> https://api.telegram.org/file/bot<token>/<path>
    https://host/bot             -> https://host/file/bot<token>/<path>
    https://host/api             -> https://host/api/file/bot<token>/<path>
    """
    if api_url == DEFAULT_API_URL:
        base = DEFAULT_FILE_URL
    elif api_url.endswith("/bot"):
        base = api_url[:-4] + "/file"
    else:
        base = api_url + "/file"
    return f"{base}/bot{token}/{file_path}"


def body_preview(body: bytes) -> str:
    if not body:
        return ""
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        text = "<binary data>"
    return ", body: " + text[:BODY_PREVIEW_CHARS]


class FileDownloader:
    """Resolve file ids and fetch their content.

    Args:
        client: Bot API client (api_url, token, get_file)
        http: httpx client used for the content GET; created from settings
              when omitted and closed by ``close()``
        fs: File system used by ``download_to_file``
    """

    def __init__(
        self,
        client: BotClient,
        http: Optional[httpx.Client] = None,
        fs: Optional[FileSystem] = None,
    ) -> None:
        self.client = client
        self._owns_http = http is None
        self.http = http or httpx.Client(timeout=get_settings().http_client_timeout())
        self.fs = fs or LocalFileSystem()

    def _safe(self, text: str) -> str:
        return mask_token(text, self.client.token)

    def get_file_info(self, file_id: str) -> Result[File, str]:
        try:
            file = self.client.get_file(file_id)
        except (BotApiError, httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"getFile failed for {file_id}: {self._safe(str(e))}")
            return Result.fail(f"Failed to get file info: {e}")
        return Result.ok(file)

    def download_file(self, file_id: str) -> Result[bytes, str]:
        info = self.get_file_info(file_id)
        if not info.success:
            return Result.fail(info.error)

        file_path = info.value.file_path
        if not file_path:
            logger.warning(f"File {file_id} has no file_path")
            return Result.fail("File path not available")

        return self.download_by_path(file_path)

    def download_by_path(self, file_path: str) -> Result[bytes, str]:
        url = build_file_url(self.client.api_url, self.client.token, file_path)

        try:
            request = self.http.build_request("GET", url, content=b"")
        except httpx.InvalidURL as e:
            logger.error(f"Invalid download URL {self._safe(url)}: {e}")
            return Result.fail(f"Failed to build request for: {url}, error: {e}")

        try:
            response = self.http.send(request)
        except httpx.HTTPError as e:
            logger.error(f"Download transport error from {self._safe(url)}: {self._safe(str(e))}")
            return Result.fail(f"Failed to download file from: {url}, error: {e}")

        if response.status_code != 200:
            logger.warning(f"Download of {file_path} failed with HTTP {response.status_code}")
            return Result.fail(
                f"Download failed with status: {response.status_code}{body_preview(response.content)}"
            )

        logger.info(f"Downloaded {file_path} ({len(response.content)} bytes)")
        return Result.ok(response.content)

    def download_to_file(self, file_id: str, save_path: str) -> Result[None, str]:
        downloaded = self.download_file(file_id)
        if not downloaded.success:
            return Result.fail(downloaded.error)

        try:
            self.fs.write_bytes(save_path, downloaded.value)
        except OSError as e:
            error = FileError.from_os_error(save_path, e)
            logger.error(f"Failed to save {file_id} to {save_path}: {error}")
            return Result.fail(f"Failed to save file: {error}")

        logger.info(f"Saved {file_id} to {save_path}")
        return Result.ok(None)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> FileDownloader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


# Function forms taking the client first


def get_file_info(
    client: BotClient, file_id: str, *, http: Optional[httpx.Client] = None
) -> Result[File, str]:
    """Resolve ``file_id``; opens and closes its own httpx client unless ``http`` is given."""
    with FileDownloader(client, http=http) as downloader:
        return downloader.get_file_info(file_id)


def download_file(
    client: BotClient, file_id: str, *, http: Optional[httpx.Client] = None
) -> Result[bytes, str]:
    """Fetch the content of ``file_id``; opens and closes its own httpx client unless ``http`` is given."""
    with FileDownloader(client, http=http) as downloader:
        return downloader.download_file(file_id)


def download_by_path(
    client: BotClient, file_path: str, *, http: Optional[httpx.Client] = None
) -> Result[bytes, str]:
    """Same as ``download_file`` for a known ``file_path``, with its own httpx client unless ``http`` is given."""
    with FileDownloader(client, http=http) as downloader:
        return downloader.download_by_path(file_path)


def download_to_file(
    client: BotClient,
    file_id: str,
    save_path: str,
    *,
    http: Optional[httpx.Client] = None,
    fs: Optional[FileSystem] = None,
) -> Result[None, str]:
    """Download ``file_id`` into ``save_path``.

    A fresh httpx client is opened and closed per call unless ``http`` is given.
    """
    with FileDownloader(client, http=http, fs=fs) as downloader:
        return downloader.download_to_file(file_id, save_path)
