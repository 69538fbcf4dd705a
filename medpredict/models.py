from datetime import datetime, timezone
from typing import Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, Field

SymptomSeverity = Literal["mild", "moderate", "severe"]
RiskLevel = Literal["low", "medium", "high"]
Gender = Literal["male", "female", "other"]
TimeRange = Literal["week", "month", "year"]
DoctorSort = Literal["rating", "experience", "name"]


def _new_id() -> str:
    return uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── Static reference records ─────────────────────────────────────────────────

class Symptom(BaseModel):
    id: str
    name: str
    category: str
    severity: SymptomSeverity


class Disease(BaseModel):
    id: str
    name: str
    description: str
    symptoms: list[str]
    prevention: list[str]
    severity: RiskLevel
    specialization: str


class Doctor(BaseModel):
    id: str
    name: str
    specialization: str
    city: str
    experience: int
    rating: float
    hospital: str
    phone: str
    email: str


# ── Derived / stored records ─────────────────────────────────────────────────

class PredictionResult(BaseModel):
    disease: str
    confidence: int = Field(ge=0, le=100)
    description: str
    prevention: list[str]
    severity: RiskLevel
    specialization: str


class HealthCheck(BaseModel):
    id: str = Field(default_factory=_new_id)
    symptoms: list[str]
    predictions: list[PredictionResult] = Field(min_length=1)
    timestamp: datetime = Field(default_factory=_utcnow)
    notes: Optional[str] = None


class ProfileData(BaseModel):
    name: str
    email: str
    city: str
    age: int = Field(ge=0)
    gender: Gender


class User(ProfileData):
    id: str = Field(default_factory=_new_id)


# ── API payloads ─────────────────────────────────────────────────────────────

class SymptomsRequest(BaseModel):
    symptoms: list[str] = []
    notes: Optional[str] = None


class PredictResponse(BaseModel):
    predictions: list[PredictionResult]


class RiskSummary(BaseModel):
    total: int
    low: int
    medium: int
    high: int


class ChartSeries(BaseModel):
    labels: list[str]
    values: list[int]


class TrendStats(BaseModel):
    total_checks: int
    avg_symptoms: int
    high_risk_checks: int
    days_since_last_check: int


class TrendReport(BaseModel):
    range: TimeRange
    stats: TrendStats
    checks_over_time: ChartSeries
    risk_distribution: ChartSeries
    common_symptoms: ChartSeries
    insights: list[str]
