import uvicorn

from infrastructure.logging import configure_logging, get_module_logger
from infrastructure.services import get_settings
from server.server import create_app

settings = get_settings()
configure_logging(settings=settings)
logger = get_module_logger()

server_app = create_app(settings=settings)


def main():
    """Main function to start the application."""
    logger.info(
        "application_startup",
        default_locale=settings.lingua.DEFAULT_LOCALE,
        resource_path=settings.lingua.RESOURCE_PATH,
    )
    uvicorn.run(server_app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
