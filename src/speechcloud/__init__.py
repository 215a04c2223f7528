#!/usr/bin/python3
"""Speech cloud client API: voices, lexicons and speech generation."""

from .facade import SpeechCloudFacade, new_speech_request
from .transport import PollySpeechCloudClient, SpeechCloudTransport
from .handlers import BytesSpeechHandler, DownloadedSpeechHandler, FileSpeechHandler, save_url_to_file
from .params import ParamDiagnostic, resolve_param
from .config import SpeechCloudConfig, load_credentials
from .errors import CredentialsError, MisconfiguredClientError, SpeechCloudError, UnsupportedEncodingError
from .types import (
    GetLexiconRequest,
    Lexicon,
    ListVoicesRequest,
    OutputFormat,
    SpeechInput,
    SpeechRequest,
    SpeechResult,
    TextType,
    Voice,
)

__all__ = [
    "SpeechCloudFacade",
    "new_speech_request",
    "PollySpeechCloudClient",
    "SpeechCloudTransport",
    "DownloadedSpeechHandler",
    "FileSpeechHandler",
    "BytesSpeechHandler",
    "save_url_to_file",
    "ParamDiagnostic",
    "resolve_param",
    "SpeechCloudConfig",
    "load_credentials",
    "SpeechCloudError",
    "MisconfiguredClientError",
    "UnsupportedEncodingError",
    "CredentialsError",
    "GetLexiconRequest",
    "Lexicon",
    "ListVoicesRequest",
    "OutputFormat",
    "SpeechInput",
    "SpeechRequest",
    "SpeechResult",
    "TextType",
    "Voice",
]
