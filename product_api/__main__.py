import uvicorn

from .config import get_settings
from .log import get_logger, setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    logger = get_logger("product_api")
    logger.info("Server is running on http://localhost:%d", settings.PORT)
    logger.info("Visit http://localhost:%d to see available endpoints", settings.PORT)
    uvicorn.run("product_api.main:app", host=settings.HOST, port=settings.PORT, log_level="warning")


if __name__ == "__main__":
    main()
