#!/usr/bin/python3
"""Transport client for the Polly speech service."""

import dataclasses
import logging
from typing import List, Optional, Protocol
from urllib.parse import quote, urlencode

import boto3
from botocore.auth import SigV4QueryAuth
from botocore.awsrequest import AWSRequest

import constants
from .config import SpeechCloudConfig
from .errors import CredentialsError
from .types import (
    GetLexiconRequest,
    Lexicon,
    ListVoicesRequest,
    SpeechRequest,
    SpeechResult,
    Voice,
)

logger = logging.getLogger(__name__)

SPEECH_PATH = "/v1/speech"


class SpeechCloudTransport(Protocol):
    """Operations the facade needs from a speech service client."""

    def list_voices(self, request: ListVoicesRequest) -> List[Voice]:
        ...

    def list_lexicons(self) -> List[str]:
        ...

    def get_lexicon(self, request: GetLexiconRequest) -> Lexicon:
        ...

    def get_create_speech_url(self, request: SpeechRequest) -> str:
        ...

    def create_speech(self, request: SpeechRequest) -> SpeechResult:
        ...


class PollySpeechCloudClient:
    """Speech service client backed by boto3's Polly client."""

    def __init__(
        self,
        session: Optional[boto3.session.Session] = None,
        config: Optional[SpeechCloudConfig] = None,
        client=None,
    ):
        """
        Initialize the Polly client.

        Args:
            session: boto3 session supplying credentials (default credential chain if None)
            config: Endpoint, timeouts and retries (defaults if None)
            client: Pre-built botocore Polly client; skips client creation when given
        """
        self.config = config or SpeechCloudConfig()
        self.session = session or boto3.session.Session(region_name=self.config.region)
        self.client = client or self._build_client()

    def _build_client(self):
        logger.info(f"Creating Polly client for endpoint: {self.config.endpoint}")
        return self.session.client(
            constants.SERVICE_NAME,
            region_name=self.config.region,
            endpoint_url=self.config.endpoint,
            config=self.config.to_botocore(),
        )

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    def set_endpoint(self, endpoint: str) -> None:
        """Point the client at another regional endpoint."""
        self.config = dataclasses.replace(self.config, endpoint=endpoint)
        self.client = self._build_client()

    def list_voices(self, request: ListVoicesRequest) -> List[Voice]:
        voices = []
        paginator = self.client.get_paginator("describe_voices")
        for page in paginator.paginate(**request.to_params()):
            voices.extend(Voice.from_api(v) for v in page.get("Voices", []))
        logger.debug(f"Listed {len(voices)} voices")
        return voices

    def list_lexicons(self) -> List[str]:
        names = []
        paginator = self.client.get_paginator("list_lexicons")
        for page in paginator.paginate():
            names.extend(lexicon["Name"] for lexicon in page.get("Lexicons", []))
        return names

    def get_lexicon(self, request: GetLexiconRequest) -> Lexicon:
        response = self.client.get_lexicon(**request.to_params())
        return Lexicon.from_api(response)

    def create_speech(self, request: SpeechRequest) -> SpeechResult:
        params = request.to_params()
        logger.debug(f"SynthesizeSpeech: voice={params['VoiceId']}, format={params['OutputFormat']}")
        response = self.client.synthesize_speech(**params)
        return SpeechResult(
            body=response["AudioStream"],
            content_type=response.get("ContentType"),
            request_characters=response.get("RequestCharacters"),
            request=request,
        )

    def get_create_speech_url(self, request: SpeechRequest) -> str:
        """
        Build a signed GET URL that synthesizes the request when fetched.

        Raises:
            UnicodeEncodeError: If the text cannot be encoded as UTF-8
            CredentialsError: If the session has no credentials to sign with
        """
        params = request.to_params()
        # SigV4QueryAuth keeps one value per query key, so a URL can carry one lexicon
        lexicon_names = params.get("LexiconNames", [])
        if len(lexicon_names) > 1:
            logger.warning(
                f"Speech URL supports one lexicon, using {lexicon_names[0]} and ignoring the rest"
            )
            params["LexiconNames"] = lexicon_names[:1]
        query = urlencode(params, doseq=True, quote_via=quote)
        credentials = self.session.get_credentials()
        if credentials is None:
            raise CredentialsError("No credentials available to sign the speech URL")

        aws_request = AWSRequest(method="GET", url=f"{self.endpoint}{SPEECH_PATH}?{query}")
        SigV4QueryAuth(
            credentials.get_frozen_credentials(),
            constants.SERVICE_NAME,
            self.config.region,
            expires=self.config.url_expires,
        ).add_auth(aws_request)
        return aws_request.url

    def close(self) -> None:
        close = getattr(self.client, "close", None)
        if close is not None:
            close()
