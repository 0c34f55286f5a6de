from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..commands import dispatch
from ..container import Container
from ..core.enums import ErrorKind
from ..core.exceptions import DomainError, InfrastructureError

logger = logging.getLogger(__name__)

# Business failures come back as 200 responses; only these kinds are raised.
STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INFRASTRUCTURE: 500,
}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/commands/<command>", methods=["POST"], endpoint="run_command")
    def run_command(command: str):
        payload = request.get_json(silent=True)
        if payload is not None and not isinstance(payload, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        try:
            # Business failures still come back as 200 with success=false.
            return jsonify(dispatch(container.auth_service, command, payload))
        except DomainError as e:
            return jsonify({"error": str(e)}), STATUS_BY_KIND.get(e.kind, 400)
        except InfrastructureError as e:
            logger.exception("Command %r failed", command)
            if bool(app.config.get("DEBUG", False)):
                return jsonify({"error": f"Internal error: {e}"}), STATUS_BY_KIND[e.kind]
            return jsonify({"error": "Internal error"}), STATUS_BY_KIND[e.kind]
