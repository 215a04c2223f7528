#!/usr/bin/python3
"""Facade over the speech cloud service.

Lists voices and lexicons and creates speech, either as a URL to be fetched
later or as an audio stream handed to a DownloadedSpeechHandler.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

import constants
from .config import SpeechCloudConfig, load_credentials
from .errors import MisconfiguredClientError, UnsupportedEncodingError
from .handlers import DownloadedSpeechHandler
from .params import ParamObserver, resolve_param
from .transport import PollySpeechCloudClient, SpeechCloudTransport
from .types import (
    GetLexiconRequest,
    Lexicon,
    ListVoicesRequest,
    SpeechInput,
    SpeechRequest,
    SpeechResult,
    TextType,
    Voice,
)

logger = logging.getLogger(__name__)


def new_speech_request(speaker_name: str, data: str, **options) -> SpeechRequest:
    """
    Create a SpeechRequest for the given voice and text.

    Neither value is checked here; an unknown voice or empty text is reported
    by the service.

    Args:
        speaker_name: Voice name, see SpeechCloudFacade.list_voices
        data: Text to speak
        **options: output_format, text_type, engine, sample_rate, lexicon_names

    Returns:
        SpeechRequest carrying exactly the given name and text
    """
    speech_input = SpeechInput(data, options.pop("text_type", TextType.TEXT))
    if "lexicon_names" in options:
        options["lexicon_names"] = tuple(options["lexicon_names"])
    return SpeechRequest(voice=Voice(speaker_name), input=speech_input, **options)


class SpeechCloudFacade:
    """Single point of contact with the speech cloud service."""

    def __init__(self, client: SpeechCloudTransport, observer: Optional[ParamObserver] = None):
        """
        Args:
            client: Transport client, e.g. PollySpeechCloudClient
            observer: Optional callable notified when selector arguments are defaulted or dropped

        Raises:
            MisconfiguredClientError: If client is None
        """
        if client is None:
            raise MisconfiguredClientError()
        self._client: Optional[SpeechCloudTransport] = client
        self.observer = observer

    @classmethod
    def from_config(
        cls,
        config_file_location: Optional[str] = constants.DEFAULT_CONFIG_FILE,
        config: Optional[SpeechCloudConfig] = None,
        observer: Optional[ParamObserver] = None,
    ) -> "SpeechCloudFacade":
        """Build a facade with a credentialed client on the default endpoint."""
        logger.info(f"Creating SpeechCloudFacade with config file: {config_file_location}")
        config = config or SpeechCloudConfig.from_env()
        session = load_credentials(config_file_location, region=config.region)
        return cls(PollySpeechCloudClient(session=session, config=config), observer=observer)

    @property
    def client(self) -> Optional[SpeechCloudTransport]:
        return self._client

    def _require_client(self) -> SpeechCloudTransport:
        if self._client is None:
            raise MisconfiguredClientError()
        return self._client

    def list_voices(self, *requests: ListVoicesRequest) -> List[Voice]:
        """
        List available voices.

        Args:
            *requests: Optional selector. Only the first one is used.

        Returns:
            List of voices, possibly empty
        """
        client = self._require_client()
        request = resolve_param(requests, ListVoicesRequest, "list_voices", self.observer)
        return list(client.list_voices(request) or [])

    def list_lexicons_name(self) -> List[str]:
        """Return the names of all stored lexicons, possibly empty."""
        client = self._require_client()
        return list(client.list_lexicons() or [])

    def get_lexicon(self, *requests: GetLexiconRequest) -> Lexicon:
        """
        Fetch a lexicon.

        Args:
            *requests: Optional selector naming the lexicon. Only the first one is used.
        """
        client = self._require_client()
        request = resolve_param(requests, GetLexiconRequest, "get_lexicon", self.observer)
        return client.get_lexicon(request)

    def create_in_cloud_speech(self, name: str, data: str) -> str:
        """
        Create speech in the cloud and return the URL to fetch it from.

        Raises:
            UnsupportedEncodingError: If the text cannot be encoded into the URL
        """
        client = self._require_client()
        request = new_speech_request(name, data)
        try:
            return client.get_create_speech_url(request)
        except UnicodeEncodeError as e:
            raise UnsupportedEncodingError(
                "Cannot create speech URL. Encoding is not supported.", e
            ) from e

    def create_downloaded_speech(
        self, name: str, data: str, handler: DownloadedSpeechHandler
    ) -> SpeechResult:
        """
        Create speech and pass the downloaded result to handler.

        The handler runs once, before this method returns. The stream is
        closed afterwards if the handler left it open. Exceptions from the
        handler propagate to the caller.

        Returns:
            The SpeechResult that was given to the handler
        """
        with self.open_speech(name, data) as result:
            handler(result)
        return result

    @contextmanager
    def open_speech(self, name: str, data: str) -> Iterator[SpeechResult]:
        """Create speech and yield the result, closing its stream on exit."""
        client = self._require_client()
        result = client.create_speech(new_speech_request(name, data))
        try:
            yield result
        finally:
            result.close()

    def close(self) -> None:
        """Release the transport client. Later calls raise MisconfiguredClientError."""
        client, self._client = self._client, None
        close = getattr(client, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "SpeechCloudFacade":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
