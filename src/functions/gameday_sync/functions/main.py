"""Cloud Function entry points for the injury and weather snapshot syncs.

Both handlers accept GET or POST. A POST body may carry ``{"dry_run": true}``
and, for weather, ``{"week": <int>}`` to override the calculated week.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import flask

from ..core.config import GamedaySyncSettings
from ..core.pipelines import InjurySyncPipeline, JsonFileWriter, PipelineResult, WeatherSyncPipeline
from src.shared.utils import ConfigurationError, setup_logging

logger = logging.getLogger(__name__)


def injuries_handler(request: flask.Request) -> flask.Response:
    """HTTP Cloud Function entry point for the injury sync."""
    if request.method == "OPTIONS":
        return _cors_response({}, status=204)
    if request.method not in ("GET", "POST"):
        return _error_response("Method not allowed. Use GET or POST.", status=405)

    payload = _request_payload(request)
    try:
        settings = _load_settings()
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return _error_response(str(exc), status=500)

    pipeline = InjurySyncPipeline(settings, writer=JsonFileWriter(settings.output_dir))
    return _run(pipeline, dry_run=bool(payload.get("dry_run")))


def weather_handler(request: flask.Request) -> flask.Response:
    """HTTP Cloud Function entry point for the weather sync."""
    if request.method == "OPTIONS":
        return _cors_response({}, status=204)
    if request.method not in ("GET", "POST"):
        return _error_response("Method not allowed. Use GET or POST.", status=405)

    payload = _request_payload(request)
    week: Optional[int] = None
    if payload.get("week") is not None:
        try:
            week = int(payload["week"])
        except (TypeError, ValueError):
            return _error_response(f"Invalid week: {payload['week']!r}", status=400)

    try:
        settings = _load_settings()
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return _error_response(str(exc), status=500)

    pipeline = WeatherSyncPipeline(settings, writer=JsonFileWriter(settings.output_dir), week=week)
    return _run(pipeline, dry_run=bool(payload.get("dry_run")))


def _load_settings() -> GamedaySyncSettings:
    setup_logging()
    return GamedaySyncSettings.from_env()


def _request_payload(request: flask.Request) -> Dict[str, Any]:
    if request.method != "POST":
        return {}
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _run(pipeline: Any, *, dry_run: bool) -> flask.Response:
    try:
        result: PipelineResult = pipeline.run(dry_run=dry_run)
    except Exception as exc:
        logger.exception("Unexpected error in %s sync", pipeline.name)
        return _error_response(f"Internal error: {exc}", status=500)

    if not result.success:
        return _error_response(result.error or "Sync failed", status=500)
    return _cors_response({"status": "success", "result": result.to_dict()})


def _cors_response(body: Dict[str, Any], status: int = 200) -> flask.Response:
    """Create a CORS-enabled response."""
    response = flask.make_response(json.dumps(body, ensure_ascii=False), status)
    response.headers["Content-Type"] = "application/json"
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


def _error_response(message: str, status: int) -> flask.Response:
    """Create an error response."""
    return _cors_response({"status": "error", "message": message}, status=status)
