import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import sentry_sdk

from resume_analyzer.api.v1.health import router as health_router
from resume_analyzer.api.v1.analyze import router as analyze_router
from resume_analyzer.core.cors import cors_options
from resume_analyzer.core.config import settings
from dotenv import load_dotenv
from resume_analyzer.core.lifespan import lifespan

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Resume Analyzer API", version="0.1.0", lifespan=lifespan)

app.add_middleware(CORSMiddleware, **cors_options())

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(analyze_router, prefix="/v1", tags=["Analysis"])
