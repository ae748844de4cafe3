import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # Flat-file storage; relative paths resolve against the working directory
    DATA_DIR = os.environ.get("DATA_DIR", "data")
    PUBLIC_DIR = os.environ.get("PUBLIC_DIR", "public")

    # Face descriptor arrays make registration bodies large
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "3000"))
