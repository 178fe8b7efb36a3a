"""Health Check: liveness probe with an on-demand simulated failure.

Invariants:
    - GET /health returns 200 {status, time} unless ?fail=500 exactly
    - ?fail=500 returns 500 {error: "Internal error (simulated)", time}
    - Any other value of fail is ignored
"""

from fastapi import APIRouter

from demo_api.core.clock import utc_now_iso
from demo_api.core.errors import SimulatedFailureError

router = APIRouter(tags=["health"])

SIMULATED_FAILURE_FLAG: str = "500"


@router.get("/health")
async def health_check(fail: str | None = None):
    if fail == SIMULATED_FAILURE_FLAG:
        raise SimulatedFailureError(time=utc_now_iso())
    return {"status": "ok", "time": utc_now_iso()}
