#!/usr/bin/python3
"""Handlers that consume the audio stream of a downloaded speech."""

import logging
from pathlib import Path
from typing import Optional, Protocol, Union

import requests
from botocore.exceptions import BotoCoreError

import constants
from .errors import SpeechCloudError
from .types import SpeechResult

logger = logging.getLogger(__name__)


class DownloadedSpeechHandler(Protocol):
    """Called once, synchronously, with the result of a speech download.

    The handler should read the stream to the end and close it.
    """

    def __call__(self, result: SpeechResult) -> None:
        ...


class FileSpeechHandler:
    """Write the downloaded audio to a local file."""

    def __init__(self, path: Union[str, Path], chunk_size: int = constants.DEFAULT_CHUNK_SIZE):
        self.path = Path(path)
        self.chunk_size = chunk_size
        self.bytes_written = 0
        self.succeeded = False

    def __call__(self, result: SpeechResult) -> None:
        try:
            with result, open(self.path, "wb") as f:
                for chunk in result.iter_chunks(self.chunk_size):
                    f.write(chunk)
                    self.bytes_written += len(chunk)
            self.succeeded = True
            logger.info(f"Saved {self.bytes_written} bytes to {self.path}")
        except (OSError, BotoCoreError) as e:
            logger.error(f"Cannot write to path '{self.path}' because {e}")


class BytesSpeechHandler:
    """Keep the downloaded audio in memory."""

    def __init__(self):
        self.audio: Optional[bytes] = None

    def __call__(self, result: SpeechResult) -> None:
        with result:
            self.audio = result.read()


def save_url_to_file(
    url: str,
    path: Union[str, Path],
    timeout: float = constants.DEFAULT_READ_TIMEOUT,
    chunk_size: int = constants.DEFAULT_CHUNK_SIZE,
) -> Path:
    """
    Fetch a speech retrieval URL and write the audio to disk.

    Args:
        url: URL returned by create_in_cloud_speech
        path: Destination file
        timeout: Request timeout in seconds
        chunk_size: Size of the chunks streamed to disk

    Returns:
        Path of the written file

    Raises:
        SpeechCloudError: If the service answers with a non-200 status
    """
    path = Path(path)
    logger.info(f"Fetching speech from URL into {path}")
    with requests.get(url, stream=True, timeout=timeout) as response:
        if response.status_code != 200:
            raise SpeechCloudError(
                f"Speech URL returned {response.status_code}: {response.text}"
            )
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            for chunk in response.iter_content(chunk_size=chunk_size):
                f.write(chunk)
    return path
