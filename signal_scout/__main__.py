"""Run the Signal Scout API with uvicorn: ``python -m signal_scout``."""

import os

import uvicorn


def main() -> None:
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("signal_scout.main:app", host=os.getenv("HOST", "127.0.0.1"), port=port)


if __name__ == "__main__":
    main()
