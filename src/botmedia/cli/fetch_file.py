"""One-shot download of a bot API file by file id."""

from __future__ import annotations

import argparse

from loguru import logger

from botmedia.application.use_cases.download_file import FileDownloader, build_file_url
from botmedia.infrastructure import (
    bot_client_from_settings,
    configure_logging,
    get_settings,
    mask_token,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Download a file from the bot API by file id")
    parser.add_argument("file_id", help="File id returned by the bot API")
    parser.add_argument("output", nargs="?", default=None, help="Where to save the file")
    parser.add_argument("--url-only", action="store_true", help="Print the download URL (token masked) and exit")
    parser.add_argument("--log-level", default=None, help="Override BOTMEDIA_LOG_LEVEL")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    settings = get_settings()

    try:
        client = bot_client_from_settings(settings)
    except ValueError as e:
        logger.error(str(e))
        return 1

    with client, FileDownloader(client) as downloader:
        if args.url_only:
            info = downloader.get_file_info(args.file_id)
            if not info.success:
                print(mask_token(info.error, client.token))
                return 1
            if not info.value.file_path:
                print("File path not available")
                return 1
            url = build_file_url(client.api_url, client.token, info.value.file_path)
            print(mask_token(url, client.token))
            return 0

        if not args.output:
            parser.error("output is required unless --url-only is given")

        result = downloader.download_to_file(args.file_id, args.output)

    if not result.success:
        print(f"Download failed: {mask_token(result.error, client.token)}")
        return 1

    print(f"Saved {args.file_id} -> {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
