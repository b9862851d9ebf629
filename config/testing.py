import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

DIRECTION_MODE = os.getenv("AUB_DIRECTION_MODE", "extras")

DOWNLOAD_FILENAME = "converted_aub_format.txt"
ALLOWED_EXTENSIONS = {".txt"}
MAX_CONTENT_LENGTH = 1024 * 1024

LOG_LEVEL = "WARNING"
LOG_FILE = None
