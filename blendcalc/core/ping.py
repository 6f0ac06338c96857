"""Health-check payload for the API."""

from blendcalc.domain.history import ReturnTable
from blendcalc.schemas.ping import PingResponse


def get_ping_message() -> str:
    return "pong"


def build_ping(table: ReturnTable) -> PingResponse:
    """Report liveness along with the span of the loaded return table."""
    return PingResponse(
        message=get_ping_message(),
        firstYear=table.first_year,
        lastYear=table.last_year,
    )
