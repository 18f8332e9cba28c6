"""
FastAPI application entry point.
"""
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from logging_config import setup_logger
from medvoice.core.application import create_application
from medvoice.core.config import get_settings
from medvoice.routers import chat

settings = get_settings()

logger = setup_logger(
    log_level=settings.LOG_LEVEL,
    log_file=settings.LOG_FILE,
    json_format=settings.LOG_JSON
)

app = create_application(settings)

# Include routers
app.include_router(chat.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
