import uvicorn

from lotto_partners.server.app import create_app
from lotto_partners.utils.config import get_config


def main() -> None:
    """Entry point for the Lotto Stock Partners server."""
    config = get_config()

    app = create_app()

    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
    )


if __name__ == "__main__":
    main()
