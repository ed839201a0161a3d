import uvicorn

from jobtracker.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "jobtracker.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
