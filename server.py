"""Quiz Builder Server - Backend HTTP do builder e dos players."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import app_state
from quiz_builder.config import get_config
from quiz_builder.logger import configure_logging, get_logger
from quiz_builder.router import register_exception_handlers, router as quiz_router

config = get_config()
configure_logging(config.log_level)
logger = get_logger("server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa o store no startup e descarta no shutdown."""
    app_state.get_store()
    logger.info(f"Quiz Builder iniciado ({config.environment})")
    yield
    app_state.reset_store()
    logger.info("Quiz Builder finalizado")


app = FastAPI(
    title="Quiz Builder",
    description="Montagem, preview e exportacao de quizzes",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(quiz_router)


# =============================================================================
# HEALTH ENDPOINTS
# =============================================================================


@app.get("/")
async def root():
    """Health check."""
    return {
        "status": "ok",
        "message": "Quiz Builder",
        "environment": config.environment,
    }


@app.get("/health")
async def health():
    store = app_state.get_store()
    return {
        "status": "healthy",
        "quizzes": len(store.list_quizzes()),
        "config": config.to_dict(),
    }


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8001)
