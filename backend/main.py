"""
PickleCoach Backend API

FastAPI application comparing a trainee's pickleball backhand drive
against a pro reference recording.

Run with:
    uvicorn main:app --reload --host 0.0.0.0 --port 8000

API docs available at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router as api_router, API_VERSION
from api.session import session

# =============================================================================
# Logging Configuration
# =============================================================================

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan (startup/shutdown)
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Loads the pro reference and the initial demo comparison before the
    app starts accepting requests.
    """
    # Startup
    logger.info(" PickleCoach API starting up...")
    logger.info(" API docs: http://localhost:8000/docs")

    from core.services import load_reference_frames
    frames = load_reference_frames()
    logger.info(f" Pro reference ready ({len(frames)} frames)")

    session.load_demo()

    yield  # App runs here

    # Shutdown
    logger.info(" PickleCoach API shutting down...")


# =============================================================================
# FastAPI App
# =============================================================================

app = FastAPI(
    title="PickleCoach API",
    description="""
    **Pickleball Backhand Stroke Comparison**

    Compares a trainee's pose recording with a pro reference stroke.

    ## Features

    - **Metric Extraction** (wrist drop, shoulder rotation, weight transfer, arm extension)
    - **Phase Alignment** onto a shared 0-100% stroke axis
    - **Comparison Statistics** (duration, peak rotation, peak extension, wrist drop)
    - **Coaching Report** with priorities, strengths, drills and a score

    ## Endpoints

    - `GET /api/health` - Health check
    - `GET /api/analysis/latest` - Latest comparison
    - `POST /api/analysis/upload` - Compare an uploaded JSON recording
    - `POST /api/analysis/frames` - Compare frames sent as JSON
    - `POST /api/analysis/demo` - Reset to demo data
    - `GET /api/phases` - Stroke phase markers

    ## Upload Format

    A JSON list of frames:
```json
    [
        {
            "frameId": 0,
            "timestamp": 0,
            "primitives": {"people": [{"pose": {"rightWrist": {"x": 352, "y": 310}}}]}
        }
    ]
```
    """,
    version=API_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# =============================================================================
# CORS Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",      # React dev server
        "http://localhost:5173",      # Vite dev server
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Routes
# =============================================================================

# Include REST API routes
app.include_router(api_router, prefix="/api")


# =============================================================================
# Root endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - API information.
    """
    return {
        "name": "PickleCoach API",
        "version": API_VERSION,
        "description": "Pickleball backhand stroke comparison",
        "docs": "/docs",
        "health": "/api/health",
    }


# =============================================================================
# Run directly (for development)
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
