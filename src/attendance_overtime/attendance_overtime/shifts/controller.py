from __future__ import annotations

from flask import Flask, jsonify

from ..common.request_utils import json_body
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/departments/timings", methods=["GET"], endpoint="department_timings")
    def department_timings():
        timings = container.department_timing_service.list_timings()
        return jsonify({"success": True, "timings": [t.to_dict() for t in timings]}), 200

    @app.route("/api/departments/<department_id>/timing", methods=["GET"], endpoint="department_timing")
    def department_timing(department_id: str):
        try:
            shift = container.department_timing_service.get_timing(department_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        return jsonify({"success": True, "timing": shift.to_dict()}), 200

    @app.route("/api/departments/<department_id>/timing", methods=["PUT"], endpoint="update_department_timing")
    def update_department_timing(department_id: str):
        try:
            shift = container.department_timing_service.update_timing(department_id, json_body())
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "timing": shift.to_dict()}), 200
