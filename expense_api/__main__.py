import uvicorn

from expense_api.core.settings import settings


def run() -> None:
    uvicorn.run(
        "expense_api.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
