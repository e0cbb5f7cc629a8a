from contextlib import asynccontextmanager
import logging

from resume_analyzer.core.config import get_analysis_config, settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    get_analysis_config()
    logger.info("resume_analyzer_started provider=%s", settings.provider)
    yield
    logger.info("resume_analyzer_stopped")
