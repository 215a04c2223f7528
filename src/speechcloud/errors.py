#!/usr/bin/python3
"""Exceptions raised by the speech cloud facade."""

from typing import Optional

MISCONFIGURED_MESSAGE = "speech cloud client is not configured."


class SpeechCloudError(RuntimeError):
    """Base class for every error raised by this package.

    Service and transport failures coming from botocore are not wrapped;
    they reach the caller unchanged.
    """

    def __init__(self, message: str = "", cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__


class MisconfiguredClientError(SpeechCloudError):
    """The facade has no transport client to talk to."""

    def __init__(self, message: str = MISCONFIGURED_MESSAGE, cause: Optional[BaseException] = None):
        super().__init__(message, cause)


class UnsupportedEncodingError(SpeechCloudError):
    """The request text could not be encoded into a retrieval URL."""


class CredentialsError(SpeechCloudError):
    """A credentials file exists but could not be used."""
