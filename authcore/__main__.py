"""Run the API server: ``python -m authcore``."""

import uvicorn

from authcore.infrastructure.config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "authcore.api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
