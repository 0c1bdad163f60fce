"""FastAPI application exposing the visa guide lookups."""

from contextlib import asynccontextmanager
from dataclasses import asdict
import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .config import get_settings
from .countries import COUNTRIES
from .guide import build_guide
from .index import RulesIndex
from .models import visa_rule_to_dict


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("Loading destination rules from %s", settings.rules_root)
    app.state.index = RulesIndex.from_directory(settings.rules_root)
    yield


app = FastAPI(title="Visa Guide", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CountryPayload(BaseModel):
    code: str = Field(..., pattern=r"^[A-Z]{2}$")
    name: str
    region: str


class VisaMatrixRulePayload(BaseModel):
    category: str
    max_stay_days: Optional[Union[int, float]] = Field(None, gt=0)
    raw: Optional[str] = None


def _index(request: Request) -> RulesIndex:
    return request.app.state.index


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/countries")
def list_countries() -> List[CountryPayload]:
    return [CountryPayload(**asdict(country)) for country in COUNTRIES]


@app.get("/guide")
def guide(
    request: Request,
    citizenship: Optional[str] = None,
    destination: Optional[str] = None,
    purpose: str = "tourism",
    stay: Optional[int] = Query(None, ge=1),
    transit: Optional[str] = None,
    transit_hours: Optional[float] = Query(None, alias="transitHours", ge=0),
) -> Dict[str, Any]:
    try:
        result = build_guide(
            _index(request),
            citizenship,
            destination,
            purpose=purpose,
            stay_days=stay,
            transit=transit,
            transit_hours=transit_hours,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return asdict(result)


@app.get("/visa-matrix/{destination}/{citizenship}", response_model_exclude_none=True)
def visa_matrix_rule(
    request: Request, destination: str, citizenship: str
) -> VisaMatrixRulePayload:
    rule = _index(request).find_visa_matrix_rule(citizenship, destination)
    if rule is None:
        raise HTTPException(
            status_code=404,
            detail=f"No visa matrix data for {citizenship.upper()} -> {destination.upper()}.",
        )
    return VisaMatrixRulePayload(**visa_rule_to_dict(rule))
