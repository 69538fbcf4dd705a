"""FastAPI application: symptom checker, history, trends, doctors, profile + static UI."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse

from medpredict.config import settings
from medpredict.models import (
    Doctor,
    DoctorSort,
    HealthCheck,
    PredictResponse,
    ProfileData,
    RiskSummary,
    Symptom,
    SymptomsRequest,
    TimeRange,
    TrendReport,
    User,
)
from medpredict.reference import CITIES, SYMPTOMS
from medpredict.engine.directory import relevant_doctors, search_doctors, specializations
from medpredict.engine.pipeline import AnalysisPipeline
from medpredict.engine.store import RecordStore, get_store
from medpredict.engine.suggestions import suggest_symptoms
from medpredict.engine.trends import build_trend_report, risk_summary

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def get_pipeline(store: RecordStore = Depends(get_store)) -> AnalysisPipeline:
    return AnalysisPipeline(store)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = get_store()
    profile = store.get_profile()
    logger.info(
        f"Startup complete: profile={'present' if profile else 'absent'}, "
        f"{len(store.get_health_checks())} stored health check(s)."
    )
    yield
    logger.info("Shutting down.")


app = FastAPI(
    title="MedPredict: Health Self-Assessment",
    description="Local symptom checker with history, trends and a doctor directory",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    return {"status": "ok"}


# ── Symptom checker ──────────────────────────────────────────────────────────

@app.get("/symptoms", response_model=list[Symptom])
async def list_symptoms():
    return SYMPTOMS


@app.get("/symptoms/suggestions", response_model=list[str])
async def symptom_suggestions(q: str = ""):
    return suggest_symptoms(q)


@app.post("/predict", response_model=PredictResponse)
async def predict(request: SymptomsRequest, pipeline: AnalysisPipeline = Depends(get_pipeline)):
    """Rank conditions without recording a health check."""
    try:
        return PredictResponse(predictions=pipeline.predict(request.symptoms))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/analyze", response_model=HealthCheck)
async def analyze(request: SymptomsRequest, pipeline: AnalysisPipeline = Depends(get_pipeline)):
    """Rank conditions after the simulated delay and store the result in history."""
    if not any(s.strip() for s in request.symptoms):
        raise HTTPException(status_code=422, detail="symptoms field must not be empty.")
    try:
        return await pipeline.analyze(request.symptoms, notes=request.notes)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception:
        logger.exception("Unhandled error in /analyze")
        raise HTTPException(status_code=500, detail="Internal server error.")


# ── History & trends ─────────────────────────────────────────────────────────

@app.get("/history", response_model=list[HealthCheck])
async def history(store: RecordStore = Depends(get_store)):
    return store.get_health_checks()


@app.get("/history/summary", response_model=RiskSummary)
async def history_summary(store: RecordStore = Depends(get_store)):
    return risk_summary(store.get_health_checks())


@app.get("/trends", response_model=TrendReport)
async def trends(range: TimeRange = "week", store: RecordStore = Depends(get_store)):
    return build_trend_report(store.get_health_checks(), range)


# ── Doctor directory ─────────────────────────────────────────────────────────

@app.get("/doctors", response_model=list[Doctor])
async def doctors(
    city: Optional[str] = None,
    specialization: Optional[str] = None,
    q: Optional[str] = None,
    sort_by: DoctorSort = "rating",
):
    return search_doctors(city=city, specialization=specialization, query=q, sort_by=sort_by)


@app.get("/doctors/relevant", response_model=list[Doctor])
async def doctors_relevant(specialization: str):
    return relevant_doctors(specialization)


@app.get("/doctors/specializations", response_model=list[str])
async def doctor_specializations():
    return specializations()


@app.get("/cities", response_model=list[str])
async def cities():
    return CITIES


# ── Profile ──────────────────────────────────────────────────────────────────

@app.get("/profile", response_model=User)
async def get_profile(store: RecordStore = Depends(get_store)):
    profile = store.get_profile()
    if profile is None:
        raise HTTPException(status_code=404, detail="No profile set up yet.")
    return profile


@app.post("/profile", response_model=User, status_code=201)
async def create_profile(data: ProfileData, store: RecordStore = Depends(get_store)):
    """Onboarding: assign an id and store the new profile."""
    profile = User(**data.model_dump())
    store.save_profile(profile)
    logger.info(f"Profile created: id={profile.id}")
    return profile


@app.put("/profile", response_model=User)
async def update_profile(profile: User, store: RecordStore = Depends(get_store)):
    store.save_profile(profile)
    return profile


@app.delete("/profile", status_code=204)
async def sign_out(store: RecordStore = Depends(get_store)):
    """Sign out: drop the profile and the whole history."""
    store.clear_all()
    return Response(status_code=204)


# Serve prebuilt static UI
static_dir = settings.static_dir
if static_dir.exists():
    if (static_dir / "assets").exists():
        app.mount("/assets", StaticFiles(directory=str(static_dir / "assets")), name="assets")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        # Serve index.html for all non-API routes (SPA fallback)
        index = static_dir / "index.html"
        if index.exists():
            return FileResponse(str(index))
        return {"message": "Frontend not found"}
else:
    logger.warning(f"Static frontend not found at {static_dir}. API only.")

    @app.get("/", include_in_schema=False)
    async def root():
        return {"message": "Backend running. Frontend not built yet."}
