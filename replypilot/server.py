import uvicorn

from replypilot.config import settings


def run():
    """Start the API server on the configured host and port."""
    uvicorn.run(
        "replypilot.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
