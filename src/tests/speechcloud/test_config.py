#!/usr/bin/env python3
"""Tests for configuration and credentials loading."""

import os
import tempfile
import unittest
import sys
from pathlib import Path
from unittest.mock import patch

# Add src directory to path
SPEECHCLOUD_SRC_PATH = str(Path(__file__).parent.parent.parent)
if SPEECHCLOUD_SRC_PATH not in sys.path:
    sys.path.insert(0, SPEECHCLOUD_SRC_PATH)

import constants
from speechcloud.config import (
    SpeechCloudConfig,
    load_credentials,
    read_properties,
    region_from_endpoint,
)
from speechcloud.errors import CredentialsError


class TestSpeechCloudConfig(unittest.TestCase):

    def test_defaults(self):
        config = SpeechCloudConfig()
        self.assertEqual(config.endpoint, constants.DEFAULT_ENDPOINT)
        self.assertEqual(config.region, "eu-west-1")
        self.assertEqual(config.url_expires, 900)

    def test_from_env(self):
        env = {
            "SPEECHCLOUD_ENDPOINT": "https://polly.us-west-2.amazonaws.com",
            "SPEECHCLOUD_CONNECT_TIMEOUT": "2.5",
            "SPEECHCLOUD_READ_TIMEOUT": "30",
            "SPEECHCLOUD_MAX_ATTEMPTS": "1",
            "SPEECHCLOUD_URL_EXPIRES": "60",
        }
        with patch.dict(os.environ, env):
            config = SpeechCloudConfig.from_env()

        self.assertEqual(config.region, "us-west-2")
        self.assertEqual(config.connect_timeout, 2.5)
        self.assertEqual(config.read_timeout, 30.0)
        self.assertEqual(config.max_attempts, 1)
        self.assertEqual(config.url_expires, 60)

    def test_to_botocore(self):
        botocore_config = SpeechCloudConfig(connect_timeout=3, read_timeout=7, max_attempts=5).to_botocore()

        self.assertEqual(botocore_config.region_name, "eu-west-1")
        self.assertEqual(botocore_config.connect_timeout, 3)
        self.assertEqual(botocore_config.read_timeout, 7)
        self.assertEqual(botocore_config.retries, {"max_attempts": 5, "mode": "standard"})

    def test_region_from_endpoint(self):
        self.assertEqual(region_from_endpoint("https://polly.ap-southeast-2.amazonaws.com"), "ap-southeast-2")
        self.assertEqual(region_from_endpoint("https://tts.eu-west-1.ivonacloud.com"), "eu-west-1")
        self.assertEqual(region_from_endpoint("http://localhost:4566"), constants.DEFAULT_REGION)
        self.assertEqual(region_from_endpoint("https://polly-fips.us-east-1.amazonaws.com"), "us-east-1")

    def test_explicit_region_wins(self):
        config = SpeechCloudConfig(endpoint="http://localhost:4566", region_name="ap-south-1")
        self.assertEqual(config.region, "ap-south-1")
        self.assertEqual(config.to_botocore().region_name, "ap-south-1")

    def test_region_from_env(self):
        env = {"SPEECHCLOUD_ENDPOINT": "http://localhost:4566", "SPEECHCLOUD_REGION": "us-west-1"}
        with patch.dict(os.environ, env):
            config = SpeechCloudConfig.from_env()

        self.assertEqual(config.region, "us-west-1")


class TestLoadCredentials(unittest.TestCase):
    """Test properties-file credentials."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write(self, name, content):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w") as f:
            f.write(content)
        return path

    def test_read_properties(self):
        path = self._write("a.properties", "# comment\n\naccessKey = AKID\nsecretKey:SECRET\n! other\n")
        self.assertEqual(read_properties(path), {"accessKey": "AKID", "secretKey": "SECRET"})

    def test_load_from_absolute_path(self):
        path = self._write("speechcloud.properties", "accessKey=AKIDEXAMPLE\nsecretKey=SECRET\n")

        session = load_credentials(path)

        credentials = session.get_credentials()
        self.assertEqual(credentials.access_key, "AKIDEXAMPLE")
        self.assertEqual(credentials.secret_key, "SECRET")
        self.assertEqual(session.region_name, constants.DEFAULT_REGION)

    def test_relative_path_resolved_in_key_dir(self):
        self._write("speechcloud.properties", "aws_access_key_id=AKID2\naws_secret_access_key=S2\n")

        with patch("constants.KEY_DIR", self.tmp.name):
            session = load_credentials("speechcloud.properties", region="us-east-1")

        self.assertEqual(session.get_credentials().access_key, "AKID2")
        self.assertEqual(session.region_name, "us-east-1")

    def test_missing_file(self):
        with self.assertRaises(CredentialsError) as ctx:
            load_credentials(os.path.join(self.tmp.name, "nope.properties"))
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_incomplete_file(self):
        path = self._write("partial.properties", "accessKey=AKID\n")
        with self.assertRaises(CredentialsError):
            load_credentials(path)

    def test_no_file_uses_default_chain(self):
        session = load_credentials(None, region="eu-central-1")
        self.assertEqual(session.region_name, "eu-central-1")


if __name__ == "__main__":
    unittest.main()
