from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter

router = APIRouter()

SERVICE_NAME = "laravel-build"


@router.get("/-/health")
def health_check():
    try:
        app_version = version(SERVICE_NAME)
    except PackageNotFoundError:
        app_version = "0.0.0"

    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": app_version,
    }
