from __future__ import annotations

import logging

from dotenv import load_dotenv
from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS

from config import load_settings

from .storage.bootstrap import ensure_data_dirs

from .container import build_container
from .attendance.controller import register as register_attendance
from .export.controller import register as register_export
from .students.controller import register as register_students
from .subjects.controller import register as register_subjects

logger = logging.getLogger(__name__)


def create_app(**overrides) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(**overrides)
    settings_module = settings.pop("SETTINGS_MODULE")

    app = Flask(__name__, static_folder=settings.get("PUBLIC_DIR"), static_url_path="")
    app.config.update(settings)

    logging.basicConfig(
        level=str(app.config.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    CORS(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    container = build_container(data_dir=app.config["DATA_DIR"])
    ensure_data_dirs(container.paths)
    app.extensions["face_attendance"] = container

    logger.info("settings=%s data_dir=%s", settings_module, container.paths.data_dir)

    register_students(app, container)
    register_subjects(app, container)
    register_attendance(app, container)
    register_export(app, container)

    @app.route("/api/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/", endpoint="index")
    def index():
        return send_from_directory(app.static_folder, "index.html")

    return app
