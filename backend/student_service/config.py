"""Application settings and validation."""

import os


class Settings:
    ENV: str
    OLLAMA_URL: str
    OLLAMA_MODEL: str
    SUMMARY_TIMEOUT_SECONDS: float
    SEED_DEMO_STUDENTS: bool
    ALLOW_DEV_CORS: bool
    LOG_LEVEL: str

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.OLLAMA_URL = os.getenv("OLLAMA_URL", "http://localhost:11434/api/generate")
        self.OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "llama3.2")
        self.SUMMARY_TIMEOUT_SECONDS = float(os.getenv("SUMMARY_TIMEOUT_SECONDS", "120"))
        self.SEED_DEMO_STUDENTS = os.getenv("SEED_DEMO_STUDENTS", "true").lower() == "true"
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self._validate()

    def _validate(self):
        if self.SUMMARY_TIMEOUT_SECONDS <= 0:
            raise RuntimeError("SUMMARY_TIMEOUT_SECONDS must be a positive number of seconds")
        if not self.OLLAMA_URL.startswith(("http://", "https://")):
            raise RuntimeError("OLLAMA_URL must be an http(s) URL")


settings = Settings()
