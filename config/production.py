import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

DIRECTION_MODE = os.getenv("AUB_DIRECTION_MODE", "extras")

DOWNLOAD_FILENAME = "converted_aub_format.txt"
ALLOWED_EXTENSIONS = {".txt"}
MAX_CONTENT_LENGTH = int(os.getenv("MAX_UPLOAD_MB", "16")) * 1024 * 1024

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "logs/aub_converter.log")
