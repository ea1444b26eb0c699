from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shortlink.core.config import settings
from shortlink.core.logging_config import configure_logging
from shortlink.api import shortener

logger = configure_logging(settings.LOG_LEVEL)
logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Hash-based URL shortener with Base62 short codes"
)


@app.get("/health", tags=["health"])
def health_check():
    return {"status": "healthy", "service": "shortlink"}


app.include_router(shortener.router, prefix="")


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
