from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_datetime
from ..common.logger import get_logger
from ..common.request_utils import json_body
from ..core.enums import OvertimeSessionStatus
from ..core.exceptions import ConfigurationError, NotFoundError, ValidationError
from ..container import Container
from .model import OvertimeSession

logger = get_logger(__name__)


def _timestamp(data: dict, key: str, *, required: bool = True):
    value = data.get(key)
    if value in (None, ""):
        if required:
            raise ValidationError(f"{key} is required")
        return None
    try:
        return parse_iso_datetime(str(value))
    except ValueError as exc:
        raise ValidationError(f"{key} must be an ISO-8601 timestamp") from exc


def _ot_sessions(data: dict) -> list[OvertimeSession]:
    items = data.get("ot_sessions") or []
    if not isinstance(items, list):
        raise ValidationError("ot_sessions must be a list")

    sessions = []
    for i, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            raise ValidationError("each overtime session must be a JSON object")
        try:
            status = OvertimeSessionStatus(item.get("status") or OvertimeSessionStatus.COMPLETED.value)
        except ValueError as exc:
            raise ValidationError(f"unknown overtime session status {item.get('status')!r}") from exc
        sessions.append(
            OvertimeSession(
                session_id=str(item.get("session_id") or i),
                start=_timestamp(item, "start"),
                end=_timestamp(item, "end", required=False),
                status=status,
            )
        )
    return sessions


def register(app: Flask, container: Container) -> None:
    def error_response(exc: Exception):
        if isinstance(exc, ValidationError):
            return jsonify({"success": False, "message": str(exc)}), 400
        if isinstance(exc, NotFoundError):
            return jsonify({"success": False, "message": str(exc)}), 404
        if isinstance(exc, ConfigurationError):
            logger.error("Configuration error: %s", exc)
            return jsonify({"success": False, "message": "department timing is misconfigured"}), 500
        raise exc

    @app.route("/api/working-hours/preview", methods=["POST"], endpoint="working_hours_preview")
    def working_hours_preview():
        """Live breakdown for an open session; ``now`` defaults to the server clock."""
        try:
            data = json_body()
            breakdown = container.working_hours_service.preview(
                str(data.get("department_id") or ""),
                _timestamp(data, "check_in"),
                now=_timestamp(data, "now", required=False),
            )
        except (ValidationError, NotFoundError, ConfigurationError) as e:
            return error_response(e)
        return jsonify({"success": True, "breakdown": breakdown.to_dict()}), 200

    @app.route("/api/working-hours/checkout", methods=["POST"], endpoint="working_hours_checkout")
    def working_hours_checkout():
        try:
            data = json_body()
            record = container.working_hours_service.finalize(
                user_id=str(data.get("user_id") or ""),
                department_id=str(data.get("department_id") or ""),
                check_in=_timestamp(data, "check_in"),
                check_out=_timestamp(data, "check_out"),
                note=data.get("note"),
                ot_sessions=_ot_sessions(data),
            )
        except (ValidationError, NotFoundError, ConfigurationError) as e:
            return error_response(e)
        return jsonify({"success": True, "attendance": record.to_dict()}), 200
