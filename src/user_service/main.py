"""Process entrypoint: build the application and hand it to uvicorn."""

import uvicorn

from src.user_service.api.http.app import create_app
from src.user_service.api.utils.app_startup import configure_logging
from src.user_service.runtime.config.config_data import ConfigData
from src.user_service.runtime.context import get_config


def serve(
    config: ConfigData | None = None,
    host: str | None = None,
    port: int | None = None,
) -> None:
    config = config or get_config()
    configure_logging(config)
    app = create_app(config)

    # Request logs come from our middleware; uvicorn's lifecycle logs are
    # forwarded to loguru by the InterceptHandler.
    uvicorn.run(
        app,
        host=host or config.app.host,
        port=port or config.app.port,
        access_log=False,
        log_config=None,
    )


def main() -> None:
    serve()


if __name__ == "__main__":
    main()
