from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.request_utils import json_object
from ..core.exceptions import ConflictError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/subjects", methods=["GET"], endpoint="list_subjects")
    def list_subjects():
        try:
            # Sheets found on disk are registered as a side effect of listing.
            result = container.subject_service.reconcile()
            return jsonify([s.to_dict() for s in result.subjects])
        except Exception as e:
            logger.exception("listing subjects failed")
            return jsonify({"error": str(e)}), 500

    @app.route("/api/subjects/reconcile", methods=["POST"], endpoint="reconcile_subjects")
    def reconcile_subjects():
        try:
            result = container.subject_service.reconcile()
            return jsonify({
                "message": f"{len(result.added)} subject(s) registered from attendance files",
                "added": [s.name for s in result.added],
            })
        except Exception as e:
            logger.exception("reconciling subjects failed")
            return jsonify({"error": str(e)}), 500

    @app.route("/api/subjects", methods=["POST"], endpoint="create_subject")
    def create_subject():
        try:
            data = json_object(request)
            subject = container.subject_service.create(data.get("subject"))
            return jsonify({"message": "Subject added successfully", "subject": subject.name}), 201
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except ConflictError as e:
            return jsonify({"error": str(e)}), 409
        except Exception as e:
            logger.exception("creating subject failed")
            return jsonify({"error": str(e)}), 500
