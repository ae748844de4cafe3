import os
import tempfile

from .config import Config

SECRET_KEY = "test-secret"
# Tests normally pass their own DATA_DIR to create_app.
DATA_DIR = os.getenv("DATA_DIR", os.path.join(tempfile.gettempdir(), "face_attendance_test_data"))
PUBLIC_DIR = Config.PUBLIC_DIR
MAX_CONTENT_LENGTH = Config.MAX_CONTENT_LENGTH
CORS_ORIGINS = "*"
HOST = "127.0.0.1"
PORT = Config.PORT

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
