import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DATA_DIR = Config.DATA_DIR
PUBLIC_DIR = Config.PUBLIC_DIR
MAX_CONTENT_LENGTH = Config.MAX_CONTENT_LENGTH
CORS_ORIGINS = Config.CORS_ORIGINS
HOST = Config.HOST
PORT = Config.PORT

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
