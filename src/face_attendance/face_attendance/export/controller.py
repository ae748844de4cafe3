from __future__ import annotations

import logging

from flask import Flask, jsonify, send_file

from ..core.constants import BUNDLE_FILE_NAME
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/export/<subject>", methods=["GET"], endpoint="export_sheet")
    def export_sheet(subject: str):
        try:
            path = container.export_service.sheet_file(subject)
            return send_file(path, mimetype="text/csv", as_attachment=True, download_name=path.name)
        except (ValidationError, NotFoundError) as e:
            return jsonify({"error": str(e)}), 404
        except Exception as e:
            logger.exception("exporting sheet for %r failed", subject)
            return jsonify({"error": str(e)}), 500

    @app.route("/api/export", methods=["GET"], endpoint="export_bundle")
    def export_bundle():
        try:
            buf = container.export_service.build_bundle()
            return send_file(buf, mimetype="application/zip", as_attachment=True, download_name=BUNDLE_FILE_NAME)
        except Exception as e:
            logger.exception("building data bundle failed")
            return jsonify({"error": str(e)}), 500
