import uvicorn

from geoip2ws.config import Settings


def main() -> None:
    """Run the GeoIP2 lookup service with uvicorn, bound per APP_HOST/APP_PORT."""
    settings = Settings.from_env()
    uvicorn.run(
        "geoip2ws.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )


if __name__ == "__main__":
    main()
