"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from blendcalc.core.ping import build_ping
from blendcalc.core.simulation import SimulationOverflowError, simulate
from blendcalc.domain.history import REFERENCE_HOLDINGS
from blendcalc.schemas.simulation import (
    HoldingsResponse,
    ReturnTableResponse,
    SimulationRequest,
    SimulationResponse,
)

logger = logging.getLogger(__name__)

EXTENSION_KEY = "blendcalc"

api_bp = Blueprint("api", __name__)


def _state() -> Dict[str, Any]:
    return current_app.extensions[EXTENSION_KEY]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info(f"Rejected request to {request.path}: {exc.error_count()} validation error(s)")
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False, include_input=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(SimulationOverflowError)
def _handle_overflow(exc: SimulationOverflowError):
    """Report a balance that left the float range as a 422."""
    logger.info(f"Rejected request to {request.path}: {exc}")
    return (
        jsonify({"detail": [{"type": "overflow", "loc": ["initialCapital"], "msg": str(exc)}]}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(build_ping(_state()["table"]).model_dump())


@api_bp.post("/simulate")
def simulation() -> Any:
    """Run the blend engine once for the submitted weight/amount/horizon."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = SimulationRequest.model_validate(raw_payload)

    state = _state()
    result = simulate(
        payload.to_parameters(),
        table=state["table"],
        assumptions=state["assumptions"],
    )
    response = SimulationResponse.from_result(result)
    return current_app.response_class(response.model_dump_json(), mimetype="application/json")


@api_bp.get("/returns")
def returns() -> Any:
    """The yearly return table the engine replays."""
    return jsonify(ReturnTableResponse.from_table(_state()["table"]).model_dump())


@api_bp.get("/holdings")
def holdings() -> Any:
    """Top positions of each fund, for display next to the chart."""
    response = HoldingsResponse(
        holdings={kind: list(rows) for kind, rows in REFERENCE_HOLDINGS.items()}
    )
    return jsonify(response.model_dump())
