import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY
DATA_DIR = Config.DATA_DIR
PUBLIC_DIR = Config.PUBLIC_DIR
MAX_CONTENT_LENGTH = Config.MAX_CONTENT_LENGTH
CORS_ORIGINS = Config.CORS_ORIGINS
HOST = Config.HOST
PORT = Config.PORT

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
