from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.request_utils import json_object
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        try:
            students = container.student_service.list_students()
            return jsonify([s.to_row() for s in students])
        except Exception as e:
            logger.exception("listing students failed")
            return jsonify({"error": str(e)}), 500

    @app.route("/api/students", methods=["POST"], endpoint="save_student")
    def save_student():
        try:
            data = json_object(request)
            student = container.student_service.upsert(
                name=data.get("name"),
                roll=data.get("roll"),
                descriptors=data.get("descriptors"),
            )
            return jsonify({
                "message": "Student saved successfully",
                "student": {"name": student.name, "roll": student.roll},
            }), 201
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception as e:
            logger.exception("saving student failed")
            return jsonify({"error": str(e)}), 500

    @app.route("/api/students/<roll>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(roll: str):
        try:
            container.student_service.delete(roll)
            return jsonify({"message": "Student removed successfully"})
        except Exception as e:
            logger.exception("removing student %s failed", roll)
            return jsonify({"error": str(e)}), 500

    @app.route("/api/students", methods=["DELETE"], endpoint="clear_students")
    def clear_students():
        try:
            container.student_service.clear()
            return jsonify({"message": "All student registrations cleared successfully"})
        except Exception as e:
            logger.exception("clearing student registrations failed")
            return jsonify({"error": str(e)}), 500
