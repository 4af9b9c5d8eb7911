"""
FastAPI Backend dla planszy hexagonalnej.

Endpoints:
    GET  /api/health         - health check
    GET  /api/board          - wszystkie pola planszy
    POST /api/board          - nowa plansza
    POST /api/board/toggle   - przełącz pole wolne/zajęte
    GET  /api/events         - log zdarzeń planszy
    POST /api/path           - ścieżka między polami
    POST /api/line           - dwie wersje linii prostej
    POST /api/los            - linia widoczności
    GET  /api/visible        - pola widoczne z danego pola
    POST /api/pixel-to-hex   - piksel -> hex
    POST /api/hex-to-pixel   - hex -> piksel + wierzchołki
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from api.routers import board


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Komunikaty przy starcie i zatrzymaniu serwera."""
    # Startup
    print("🚀 Hexboard API starting...")
    print(f"📁 Config from: {board.DATA_PATH}")
    yield
    # Shutdown
    print("👋 Hexboard API shutting down...")


app = FastAPI(
    title="Hexboard API",
    description="Hex-grid board queries: paths, lines, line of sight, pixel mapping",
    version="1.0.0",
    lifespan=lifespan,
)

# Frontend planszy może być serwowany z dowolnego originu
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(board.router, prefix="/api", tags=["Board"])


@app.get("/api/health")
async def health():
    """Czy serwer żyje."""
    return {"status": "healthy"}
