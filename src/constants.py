import os

# Get the src directory
SRC_DIR = os.path.dirname(os.path.abspath(__file__))

# Get the project root (top-level directory)
PROJECT_ROOT = os.path.dirname(SRC_DIR)

# Credentials live outside the package, one file per account
KEY_DIR = os.path.join(PROJECT_ROOT, "keys")
DEFAULT_CONFIG_FILE = "speechcloud.properties"

# Speech service endpoint; region is taken from the host name
DEFAULT_ENDPOINT = "https://polly.eu-west-1.amazonaws.com"
DEFAULT_REGION = "eu-west-1"
SERVICE_NAME = "polly"

# Request defaults
DEFAULT_CONNECT_TIMEOUT = 10
DEFAULT_READ_TIMEOUT = 60
DEFAULT_MAX_ATTEMPTS = 3
URL_EXPIRES_SECONDS = 900
DEFAULT_CHUNK_SIZE = 2 * 1024

DEFAULT_DOWNLOADED_FILE = "/tmp/speechcloud_downloaded.mp3"
