#!/usr/bin/env python3
"""
speechcloud - command line access to the speech cloud facade.

Lists voices and lexicons, prints retrieval URLs for in-cloud speech and
downloads synthesized speech to local files.
"""

import argparse
import logging
import sys
from pathlib import Path

from botocore.exceptions import BotoCoreError, ClientError

# Add src directory to path
SPEECHCLOUD_SRC_PATH = str(Path(__file__).parent.parent)
if SPEECHCLOUD_SRC_PATH not in sys.path:
    sys.path.insert(0, SPEECHCLOUD_SRC_PATH)

import constants
from speechcloud.config import SpeechCloudConfig
from speechcloud.errors import SpeechCloudError
from speechcloud.facade import SpeechCloudFacade
from speechcloud.handlers import FileSpeechHandler, save_url_to_file
from speechcloud.types import GetLexiconRequest, ListVoicesRequest

logger = logging.getLogger(__name__)


def get_argument_parser():
    """Return the argument parser for introspection."""
    parser = argparse.ArgumentParser(description="speechcloud - Speech Cloud client")
    parser.add_argument(
        "--config",
        default=constants.DEFAULT_CONFIG_FILE,
        help="Credentials properties file, absolute or relative to the keys directory",
    )
    parser.add_argument("--endpoint", help="Service endpoint (defaults to SPEECHCLOUD_ENDPOINT)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    voices = subparsers.add_parser("voices", help="List available voices")
    voices.add_argument("--language", help="Only voices for this language code (e.g. en-US)")

    subparsers.add_parser("lexicons", help="List lexicon names")

    lexicon = subparsers.add_parser("lexicon", help="Print a lexicon")
    lexicon.add_argument("name", help="Lexicon name")

    url = subparsers.add_parser("url", help="Print a URL for in-cloud speech")
    url.add_argument("voice", help="Voice name (e.g. Salli)")
    url.add_argument("text", help="Text to speak")
    url.add_argument("--output", help="Also download the speech to this file")

    speak = subparsers.add_parser("speak", help="Download speech to a local file")
    speak.add_argument("voice", help="Voice name (e.g. Salli)")
    speak.add_argument("text", help="Text to speak")
    speak.add_argument(
        "--output",
        default=constants.DEFAULT_DOWNLOADED_FILE,
        help=f"Destination file (default: {constants.DEFAULT_DOWNLOADED_FILE})",
    )

    return parser


def run(args, facade: SpeechCloudFacade) -> int:
    """Execute the parsed command against facade. Returns the exit code."""
    if args.command == "voices":
        selector = ListVoicesRequest(language_code=args.language)
        for voice in facade.list_voices(selector):
            print(f"{voice.name}\t{voice.language_code or ''}\t{voice.gender or ''}")

    elif args.command == "lexicons":
        names = facade.list_lexicons_name()
        if not names:
            logger.info("No lexicons stored")
        for name in names:
            print(name)

    elif args.command == "lexicon":
        lexicon = facade.get_lexicon(GetLexiconRequest(args.name))
        print(lexicon.content)

    elif args.command == "url":
        url = facade.create_in_cloud_speech(args.voice, args.text)
        print(url)
        if args.output:
            save_url_to_file(url, args.output)

    elif args.command == "speak":
        handler = FileSpeechHandler(args.output)
        facade.create_downloaded_speech(args.voice, args.text, handler)
        if not handler.succeeded:
            return 1
        print(handler.path)

    return 0


def main(argv=None) -> int:
    """Main entry point for the speechcloud command."""
    parser = get_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = SpeechCloudConfig.from_env()
    if args.endpoint:
        config.endpoint = args.endpoint

    try:
        with SpeechCloudFacade.from_config(args.config, config=config) as facade:
            return run(args, facade)
    except (SpeechCloudError, BotoCoreError, ClientError) as e:
        logger.error(f"{e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
