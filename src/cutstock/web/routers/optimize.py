"""Bar cutting and panel nesting endpoints.

Handlers are plain functions so FastAPI runs the CPU-bound optimizers in its
thread pool instead of on the event loop.
"""

from fastapi import APIRouter

from cutstock.application.config import config_to_bar_job, config_to_panel_job
from cutstock.web.dependencies import BarsCommandDep, PanelsCommandDep
from cutstock.web.exceptions import OptimizationError
from cutstock.web.schemas.requests import OptimizeBarsRequest, OptimizePanelsRequest
from cutstock.web.schemas.responses import (
    BarOptimizationResponse,
    PanelOptimizationResponse,
)

router = APIRouter(prefix="/optimize", tags=["optimize"])


@router.post("/bars", response_model=BarOptimizationResponse)
def optimize_bars(
    request: OptimizeBarsRequest,
    command: BarsCommandDep,
) -> BarOptimizationResponse:
    """Produce a bar cut list.

    With ``find_optimal`` the best stock length is searched per part number
    and returned in ``optimalBars``. Parts that cannot be placed are listed
    in ``unplaced``; the request still succeeds.
    """
    output = command.execute(config_to_bar_job(request))
    if not output.is_valid:
        raise OptimizationError(output.errors)
    return BarOptimizationResponse.from_output(output, request.find_optimal)


@router.post("/panels", response_model=PanelOptimizationResponse)
def optimize_panels(
    request: OptimizePanelsRequest,
    command: PanelsCommandDep,
) -> PanelOptimizationResponse:
    """Produce a panel nesting layout."""
    output = command.execute(config_to_panel_job(request))
    if not output.is_valid:
        raise OptimizationError(output.errors)
    return PanelOptimizationResponse.from_output(output)
