from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.request_utils import json_object
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        try:
            data = json_object(request)
            require_non_empty(data.get("name"), "name")
            container.attendance_service.mark_present(
                subject=data.get("subject"),
                roll=data.get("roll"),
                day=data.get("date"),
            )
            return jsonify({"message": "Attendance marked successfully"}), 201
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            # Existing clients expect an unknown roll to surface as a server error.
            return jsonify({"error": str(e)}), 500
        except Exception as e:
            logger.exception("marking attendance failed")
            return jsonify({"error": str(e)}), 500

    @app.route("/api/attendance/<subject>/<day>", methods=["GET"], endpoint="get_attendance")
    def get_attendance(subject: str, day: str):
        try:
            entries = container.attendance_service.query_by_date(subject=subject, day=day)
            return jsonify([e.to_dict() for e in entries])
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception as e:
            logger.exception("reading attendance for %r on %s failed", subject, day)
            return jsonify({"error": str(e)}), 500

    @app.route("/api/attendance/<subject>/summary", methods=["GET"], endpoint="attendance_summary")
    def attendance_summary(subject: str):
        try:
            summary = container.attendance_service.summary(subject)
            return jsonify(summary.to_dict())
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception as e:
            logger.exception("summarising attendance for %r failed", subject)
            return jsonify({"error": str(e)}), 500

    @app.route("/api/attendance", methods=["DELETE"], endpoint="delete_all_attendance")
    def delete_all_attendance():
        try:
            container.attendance_service.delete_all()
            return jsonify({"message": "All attendance records deleted successfully."})
        except Exception:
            logger.exception("deleting attendance records failed")
            return jsonify({"error": "Failed to delete attendance records."}), 500

    @app.route("/api/attendance/today", methods=["DELETE"], endpoint="delete_today_attendance")
    def delete_today_attendance():
        subject = None
        try:
            subject = json_object(request).get("subject")
            if not subject:
                return jsonify({"error": "Missing subject in request."}), 400

            day = container.attendance_service.delete_today_column(subject)
            return jsonify({"message": f'Today\'s attendance ({day}) deleted for subject "{subject}".'})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("deleting today's attendance column for %r failed", subject)
            return jsonify({"error": "Failed to update attendance file."}), 500
