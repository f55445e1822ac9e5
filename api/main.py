# api/main.py
"""
FastAPI backend for A-Tower - exposes the atower engine as a REST API.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Any
import logging
import sys
from pathlib import Path

# Add project root to path to import atower
sys.path.insert(0, str(Path(__file__).parent.parent))

from atower.export import generate_floor_csv, generate_model_json, generate_obj
from atower.generative import generate_floors, generate_sphere_instances, tower_height
from atower.params import TowerParameters, sanitize

logger = logging.getLogger("atower.api")

app = FastAPI(
    title="A-Tower API",
    description="Procedural Tower Geometry Engine",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class TowerParamsPatch(BaseModel):
    """
    Partial tower parameters (wire names).

    Fields are untyped: every value, well-formed or not, is
    handed to sanitize(), which clamps out-of-domain numbers and replaces
    missing or malformed ones with the defaults. Any JSON object therefore
    produces a renderable tower instead of a 422.
    """
    floors: Optional[Any] = Field(None, description="Number of floors [1, 200]")
    floorHeight: Optional[Any] = Field(None, description="Floor spacing (m) [1, 10]")
    baseRadius: Optional[Any] = Field(None, description="Base radius (m) [1, 15]")
    sphereRadius: Optional[Any] = Field(None, description="Sphere radius (m) [0.2, 5]")
    spheresPerFloor: Optional[Any] = Field(None, description="Spheres per floor [1, 12]")
    twistRange: Optional[Any] = Field(None, description="Twist (deg) {min, max} in [-720, 720]")
    scaleRange: Optional[Any] = Field(None, description="Scale {min, max} in [0.1, 3]")
    twistEasing: Optional[Any] = Field(None, description="linear, easeIn, easeOut, easeInOut")
    scaleEasing: Optional[Any] = Field(None, description="linear, easeIn, easeOut, easeInOut")
    bottomColor: Optional[Any] = Field(None, description="Hex color at the base")
    topColor: Optional[Any] = Field(None, description="Hex color at the top")

    def to_params(self) -> TowerParameters:
        return sanitize(self.model_dump(exclude_none=True))


class FloorData(BaseModel):
    """Per-floor transform."""
    y: float
    rotation: float
    scale: float
    color: str


class InstanceData(BaseModel):
    """Sphere instance."""
    position: List[float]
    radius: float
    color: str


class FramingData(BaseModel):
    """Numbers the viewer needs to place the camera."""
    floors: int
    floorHeight: float
    baseRadius: float
    totalHeight: float


class TowerResult(BaseModel):
    """Complete generation result."""
    params: Dict[str, Any]
    floors: List[FloorData]
    instances: List[InstanceData]
    framing: FramingData


# =============================================================================
# Generation
# =============================================================================

def generate_tower(params: TowerParameters) -> TowerResult:
    """Generate floors and instances for a sanitized parameter set."""
    floors = generate_floors(params)
    instances = generate_sphere_instances(params, floors)
    logger.debug("Generated %d floors, %d instances", len(floors), len(instances))
    return TowerResult(
        params=params.to_dict(),
        floors=[FloorData(**f.to_dict()) for f in floors],
        instances=[InstanceData(**inst.to_dict()) for inst in instances],
        framing=FramingData(
            floors=len(floors),
            floorHeight=params.floor_height,
            baseRadius=params.base_radius,
            totalHeight=tower_height(params),
        ),
    )


def _attachment(content: str, media_type: str, filename: str) -> StreamingResponse:
    return StreamingResponse(
        iter([content]),
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "A-Tower API"}


@app.post("/api/generate", response_model=TowerResult)
async def generate(patch: TowerParamsPatch):
    """Sanitize the parameters and generate the tower."""
    return generate_tower(patch.to_params())


@app.post("/api/export/obj")
async def export_obj(patch: TowerParamsPatch, include_slabs: bool = True, include_core: bool = True):
    """Export the tower mesh as OBJ."""
    content = generate_obj(patch.to_params(), include_slabs=include_slabs, include_core=include_core)
    return _attachment(content, "text/plain", "tower.obj")


@app.post("/api/export/json")
async def export_json(patch: TowerParamsPatch):
    """Export the tower model as JSON."""
    content = generate_model_json(patch.to_params())
    return _attachment(content, "application/json", "tower_model.json")


@app.post("/api/export/csv")
async def export_csv(patch: TowerParamsPatch):
    """Export the floor schedule as CSV."""
    content = generate_floor_csv(patch.to_params())
    return _attachment(content, "text/csv", "tower_floors.csv")


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
