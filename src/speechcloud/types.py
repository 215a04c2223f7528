#!/usr/bin/python3
"""Type definitions for speech cloud requests and results."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, BinaryIO, Dict, Iterator, Optional, Tuple

import constants

logger = logging.getLogger(__name__)


class OutputFormat(Enum):
    """Supported audio output formats."""
    MP3 = "mp3"
    OGG_VORBIS = "ogg_vorbis"
    PCM = "pcm"


class TextType(Enum):
    """How the service should interpret the input text."""
    TEXT = "text"
    SSML = "ssml"


@dataclass(frozen=True)
class Voice:
    """A synthesis voice, identified by name."""
    name: str
    language_code: Optional[str] = None
    language_name: Optional[str] = None
    gender: Optional[str] = None
    engines: Tuple[str, ...] = ()

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Voice":
        """Build a Voice from a DescribeVoices entry."""
        return cls(
            name=data.get("Id") or data.get("Name", ""),
            language_code=data.get("LanguageCode"),
            language_name=data.get("LanguageName"),
            gender=data.get("Gender"),
            engines=tuple(data.get("SupportedEngines", ())),
        )


@dataclass(frozen=True)
class SpeechInput:
    """Text payload of a speech request."""
    data: str
    text_type: TextType = TextType.TEXT


@dataclass(frozen=True)
class SpeechRequest:
    """A (voice, input) pair submitted for synthesis."""
    voice: Voice
    input: SpeechInput
    output_format: OutputFormat = OutputFormat.MP3
    sample_rate: Optional[str] = None
    engine: Optional[str] = None
    lexicon_names: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.voice is None or self.input is None:
            raise ValueError("SpeechRequest requires both a voice and an input")

    def to_params(self) -> Dict[str, Any]:
        """Service parameters for SynthesizeSpeech."""
        params: Dict[str, Any] = {
            "OutputFormat": self.output_format.value,
            "Text": self.input.data,
            "TextType": self.input.text_type.value,
            "VoiceId": self.voice.name,
        }
        if self.sample_rate:
            params["SampleRate"] = self.sample_rate
        if self.engine:
            params["Engine"] = self.engine
        if self.lexicon_names:
            params["LexiconNames"] = list(self.lexicon_names)
        return params


@dataclass(frozen=True)
class ListVoicesRequest:
    """Selector for listing voices. The default selector lists everything."""
    language_code: Optional[str] = None
    engine: Optional[str] = None
    include_additional_language_codes: bool = False

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.language_code:
            params["LanguageCode"] = self.language_code
        if self.engine:
            params["Engine"] = self.engine
        if self.include_additional_language_codes:
            params["IncludeAdditionalLanguageCodes"] = True
        return params


@dataclass(frozen=True)
class GetLexiconRequest:
    """Selector for fetching a lexicon by name."""
    name: str = ""

    def to_params(self) -> Dict[str, Any]:
        return {"Name": self.name}


@dataclass(frozen=True)
class Lexicon:
    """A named set of pronunciation rules."""
    name: str
    content: str
    alphabet: Optional[str] = None
    language_code: Optional[str] = None
    lexemes_count: Optional[int] = None
    size: Optional[int] = None
    last_modified: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Lexicon":
        """Build a Lexicon from a GetLexicon response."""
        lexicon = data.get("Lexicon", {})
        attributes = data.get("LexiconAttributes", {})
        return cls(
            name=lexicon.get("Name", ""),
            content=lexicon.get("Content", ""),
            alphabet=attributes.get("Alphabet"),
            language_code=attributes.get("LanguageCode"),
            lexemes_count=attributes.get("LexemesCount"),
            size=attributes.get("Size"),
            last_modified=attributes.get("LastModified"),
        )


@dataclass
class SpeechResult:
    """Outcome of a synthesis call, carrying the audio stream.

    Whoever reads the stream owns it. ``close()`` may be called any number of
    times; the underlying stream is closed once.
    """
    body: BinaryIO
    content_type: Optional[str] = None
    request_characters: Optional[int] = None
    request: Optional[SpeechRequest] = None
    _closed: bool = field(default=False, init=False, repr=False)

    @property
    def closed(self) -> bool:
        return self._closed

    def read(self, amt: Optional[int] = None) -> bytes:
        if self._closed:
            raise ValueError("read from a closed speech result")
        return self.body.read() if amt is None else self.body.read(amt)

    def iter_chunks(self, chunk_size: int = constants.DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        """Yield the audio in chunks until the stream is exhausted."""
        while True:
            chunk = self.read(chunk_size)
            if not chunk:
                break
            yield chunk

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self.body.close()
        except OSError as e:
            logger.warning(f"Error closing speech stream: {e}")

    def __enter__(self) -> "SpeechResult":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
