#!/usr/bin/python3
"""Configuration and credentials for the speech cloud client."""

import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlparse

import boto3
from botocore.config import Config

import constants
from .errors import CredentialsError

logger = logging.getLogger(__name__)

ACCESS_KEY_NAMES = ("accessKey", "aws_access_key_id")
SECRET_KEY_NAMES = ("secretKey", "aws_secret_access_key")


@dataclass
class SpeechCloudConfig:
    """Endpoint, timeouts and retry policy for the speech service."""
    endpoint: str = constants.DEFAULT_ENDPOINT
    connect_timeout: float = constants.DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = constants.DEFAULT_READ_TIMEOUT
    max_attempts: int = constants.DEFAULT_MAX_ATTEMPTS
    url_expires: int = constants.URL_EXPIRES_SECONDS
    region_name: Optional[str] = None

    @classmethod
    def from_env(cls) -> "SpeechCloudConfig":
        """Build a config from SPEECHCLOUD_* environment variables."""
        return cls(
            endpoint=os.getenv("SPEECHCLOUD_ENDPOINT", constants.DEFAULT_ENDPOINT),
            connect_timeout=float(
                os.getenv("SPEECHCLOUD_CONNECT_TIMEOUT", constants.DEFAULT_CONNECT_TIMEOUT)
            ),
            read_timeout=float(
                os.getenv("SPEECHCLOUD_READ_TIMEOUT", constants.DEFAULT_READ_TIMEOUT)
            ),
            max_attempts=int(os.getenv("SPEECHCLOUD_MAX_ATTEMPTS", constants.DEFAULT_MAX_ATTEMPTS)),
            url_expires=int(os.getenv("SPEECHCLOUD_URL_EXPIRES", constants.URL_EXPIRES_SECONDS)),
            region_name=os.getenv("SPEECHCLOUD_REGION"),
        )

    @property
    def region(self) -> str:
        return self.region_name or region_from_endpoint(self.endpoint)

    def to_botocore(self) -> Config:
        return Config(
            region_name=self.region,
            connect_timeout=self.connect_timeout,
            read_timeout=self.read_timeout,
            retries={"max_attempts": self.max_attempts, "mode": "standard"},
        )


def region_from_endpoint(endpoint: str) -> str:
    """Extract the region from a host like polly.eu-west-1.amazonaws.com.

    Service variants such as polly-fips are recognised by their prefix.
    """
    host = urlparse(endpoint).hostname or ""
    parts = host.split(".")
    if len(parts) >= 3 and parts[0].startswith((constants.SERVICE_NAME, "tts")):
        return parts[1]
    return constants.DEFAULT_REGION


def read_properties(path: str) -> Dict[str, str]:
    """Parse a Java-style properties file (key=value, # comments)."""
    properties = {}
    with open(path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith(("#", "!")):
                continue
            for sep in ("=", ":"):
                if sep in line:
                    key, value = line.split(sep, 1)
                    properties[key.strip()] = value.strip()
                    break
    return properties


def resolve_config_path(config_file_location: str) -> str:
    if os.path.isabs(config_file_location):
        return config_file_location
    return os.path.join(constants.KEY_DIR, config_file_location)


def load_credentials(config_file_location: Optional[str] = None, region: Optional[str] = None) -> boto3.session.Session:
    """Create a boto3 session acting as the credentials provider.

    Args:
        config_file_location: Properties file holding accessKey/secretKey, absolute
            or relative to constants.KEY_DIR. If None, boto3's own credential
            chain (environment, shared config, instance role) is used.
        region: Region name for the session

    Returns:
        A boto3 Session

    Raises:
        CredentialsError: If the file is missing, unreadable or incomplete
    """
    region = region or constants.DEFAULT_REGION
    if config_file_location is None:
        logger.info("No credentials file given, using the default credential chain")
        return boto3.session.Session(region_name=region)

    path = resolve_config_path(config_file_location)
    try:
        properties = read_properties(path)
    except OSError as e:
        raise CredentialsError(f"Cannot read credentials file {path}", e) from e

    access_key = _first_of(properties, ACCESS_KEY_NAMES)
    secret_key = _first_of(properties, SECRET_KEY_NAMES)
    if not access_key or not secret_key:
        raise CredentialsError(
            f"Credentials file {path} must define accessKey and secretKey"
        )

    logger.info(f"Loaded credentials from {path}")
    return boto3.session.Session(
        aws_access_key_id=access_key,
        aws_secret_access_key=secret_key,
        region_name=region,
    )


def _first_of(properties: Dict[str, str], names) -> Optional[str]:
    for name in names:
        if properties.get(name):
            return properties[name]
    return None
