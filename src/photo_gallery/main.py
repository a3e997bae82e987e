"""Run the photo gallery with uvicorn."""

import uvicorn

from photo_gallery.config import Settings


def main() -> None:
    """Serve the ASGI app on the configured port."""
    settings = Settings()
    uvicorn.run(
        "photo_gallery.api.asgi:app",
        host="0.0.0.0",  # noqa: S104
        port=settings.port,
    )


if __name__ == "__main__":
    main()
