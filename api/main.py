import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from api.schemas import (
    SimulationRequest, SimulationResponse, AnalyticalResponse
)

from queuesim.analytical import predict
from queuesim.errors import SimulationError
from queuesim.models import SimulationConfig
from queuesim.render import render_event
from queuesim.simulation import simulate

logger = logging.getLogger(__name__)

app = FastAPI(title="Queue Simulator API", version="1.0")

# allow frontend (React/etc.) to call backend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],   # later restrict to your frontend URL
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def _to_config(req: SimulationRequest) -> SimulationConfig:
    # convert pydantic schema -> core dataclass
    return SimulationConfig(
        seed=req.seed,
        multiplier=req.multiplier,
        increment=req.increment,
        mod=req.mod,
        client_count=req.clients,
        server_count=req.servers,
        arrival_rate=req.arrival_rate,
        service_rate=req.service_rate,
    )

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/simulate", response_model=SimulationResponse)
def simulate_endpoint(req: SimulationRequest):
    try:
        res = simulate(_to_config(req))
    except SimulationError as e:
        logger.error("Rejected simulation request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    # convert dataclasses -> dicts for pydantic response
    return SimulationResponse(
        events=[ev.to_dict() for ev in res.events],
        lines=[render_event(ev) for ev in res.events],
        rows=[r.__dict__ for r in res.rows],
        gantt=[g.__dict__ for g in res.gantt],
        summary=res.summary.__dict__,
    )

@app.post("/analytical", response_model=AnalyticalResponse)
def analytical(req: SimulationRequest):
    try:
        res = predict(_to_config(req))
    except SimulationError as e:
        logger.error("Rejected analytical request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    out = {k: (None if v == float("inf") else v) for k, v in res.__dict__.items()}
    return AnalyticalResponse(**out)
