"""
Run the API server.
Usage: asset-api  (or: python -m asset_api.run)
"""
import uvicorn

from asset_api.config import settings


def main() -> None:
    uvicorn.run(
        "asset_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.APP_ENV == "local" and settings.APP_DEBUG,
    )


if __name__ == "__main__":
    main()
