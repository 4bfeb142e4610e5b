import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.adapters_routes import router as adapters_routes
from api.solver_routes import router as solver_router
from api.status import router as status_router
from api.capabilities_routes import router as capabilities_router
from config import get_settings
from core.load_plugins import load_plugins
from contextlib import asynccontextmanager

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    load_plugins()
    yield


app = FastAPI(title="Itinerary Optimizer Backend", lifespan=lifespan)

# CORS (adjust for your frontend)
origins = settings.CORS_ALLOW_ORIGINS.split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routes
app.include_router(adapters_routes)
app.include_router(solver_router)
app.include_router(status_router)
app.include_router(capabilities_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
