# api/main.py
"""
FastAPI backend for the scissor-lift designer - exposes scissor_lift as a REST API.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field
from typing import Dict, List, Any, Literal
import logging
import sys
from pathlib import Path

# Add project root to path to import scissor_lift
sys.path.insert(0, str(Path(__file__).parent.parent))

from scissor_lift.config import DEFAULTS
from scissor_lift.export import build_export_payload, design_sheet, pin_table, to_json
from scissor_lift.lift import compute_lift
from scissor_lift.log import setup_logging
from scissor_lift.model import LiftConfig, LiftResult
from scissor_lift.units import to_display, to_mm

logger = logging.getLogger(__name__)

STAGE_MIN, STAGE_MAX = DEFAULTS.stage_count_range


app = FastAPI(
    title="Scissor Lift API",
    description="Scissor-lift stage solver and stack builder",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class LiftParams(BaseModel):
    """Input parameters, lengths in the given display units."""
    units: Literal["mm", "in"] = Field("mm", description="Display units for lengths")
    stage_count: int = Field(DEFAULTS.stage_count, ge=STAGE_MIN, le=STAGE_MAX, description="Number of stages N")
    arm: float = Field(DEFAULTS.arm_length, gt=0, description="Arm length, pin-to-pin")
    base_rail: float = Field(DEFAULTS.base_rail_length, gt=0, description="Base rail length")
    top_rail: float = Field(DEFAULTS.top_rail_length, gt=0, description="Top rail length")
    angle_deg: float = Field(DEFAULTS.angle_deg, description="Arm opening angle from horizontal (deg)")
    preset: str = Field(DEFAULTS.preset, description="classic, mirrored, bothBaseFixed, bothTopFixed")

    def to_config(self) -> LiftConfig:
        return LiftConfig(
            arm_length=to_mm(self.arm, self.units),
            base_rail_length=to_mm(self.base_rail, self.units),
            top_rail_length=to_mm(self.top_rail, self.units),
            angle_deg=self.angle_deg,
            stage_count=self.stage_count,
            preset=self.preset,
        )


class PinData(BaseModel):
    x: float
    y: float


class StageData(BaseModel):
    """One stacked stage, coordinates in display units."""
    index: int
    pins: Dict[str, PinData]


class LiftResponse(BaseModel):
    """Export payload plus every stacked stage."""
    feasible: bool
    payload: Dict[str, Any]
    stages: List[StageData]


# =============================================================================
# Solve
# =============================================================================

def solve_lift(params: LiftParams) -> LiftResult:
    result = compute_lift(params.to_config())
    logger.info(
        "solved lift preset=%s N=%d warnings=%d",
        result.stage.preset, result.config.stage_count, len(result.stage.warnings),
    )
    return result


def build_response(params: LiftParams) -> LiftResponse:
    result = solve_lift(params)
    units = params.units
    stages = [
        StageData(
            index=st.index,
            pins={
                name: PinData(x=round(to_display(p.x, units), 4), y=round(to_display(p.y, units), 4))
                for name, p in st.pins.items()
            },
        )
        for st in result.assembly.stages
    ]
    return LiftResponse(
        feasible=result.stage.feasible,
        payload=build_export_payload(result, units),
        stages=stages,
    )


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "Scissor Lift API"}


@app.post("/api/solve", response_model=LiftResponse)
async def solve(params: LiftParams):
    """Solve one stage, stack it and return the export payload."""
    return build_response(params)


@app.post("/api/export/json")
async def export_json(params: LiftParams):
    """Export payload as a JSON file."""
    result = solve_lift(params)
    return StreamingResponse(
        iter([to_json(build_export_payload(result, params.units))]),
        media_type="application/json",
        headers={"Content-Disposition": "attachment; filename=scissor_lift.json"}
    )


@app.post("/api/export/csv")
async def export_csv(params: LiftParams):
    """Export all stacked pin coordinates (mm) as CSV."""
    result = solve_lift(params)
    return StreamingResponse(
        iter([pin_table(result).to_csv(index=False)]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=scissor_lift_pins.csv"}
    )


@app.post("/api/export/text")
async def export_text(params: LiftParams):
    """Export the plain-text design sheet."""
    result = solve_lift(params)
    return StreamingResponse(
        iter([design_sheet(result, params.units)]),
        media_type="text/plain",
        headers={"Content-Disposition": "attachment; filename=scissor_lift_design_sheet.txt"}
    )


if __name__ == "__main__":
    import uvicorn
    setup_logging("INFO")
    uvicorn.run(app, host="0.0.0.0", port=8000)
