from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .config import get_settings
from .controllers import submit
from .exceptions import setup_exception_handlers

settings = get_settings()

app = FastAPI(title="Submission API")

# Browser origins allowed to post forms; none configured means same-origin only
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["POST"],
        allow_headers=["*"],
    )

setup_exception_handlers(app)

# Include routers
app.include_router(submit.router, prefix="/api", tags=["submissions"])
