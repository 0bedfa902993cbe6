"""
Run the OG image service locally.

Launch: python -m worldmonitor_og
Serves at http://0.0.0.0:8000 (or HOST/PORT env vars)
"""
import uvicorn

from .core.config import settings


def main():
    print("=" * 60)
    print("  WorldMonitor - OG Image Service")
    print(f"  http://{settings.HOST}:{settings.PORT}/api/og-story")
    print("=" * 60)
    uvicorn.run("worldmonitor_og.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
