"""Run the student records API with Uvicorn.

Host and port are read from environment variables `HOST` and `PORT`.
Defaults are `0.0.0.0` and `8080`.

Usage:
    python -m student_service
"""
import os

import uvicorn


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    uvicorn.run("student_service.main:app", host=host, port=port, reload=False, log_level="info")


if __name__ == "__main__":
    main()
