# docsearch/config.py

import os
from dataclasses import dataclass


DEFAULT_BACKEND_URL = "https://ir-backend-e4le.onrender.com/search"


@dataclass(frozen=True)
class Settings:
    backend_url: str = os.getenv("DOCSEARCH_BACKEND_URL", DEFAULT_BACKEND_URL)
    timeout: float = float(os.getenv("DOCSEARCH_TIMEOUT", "30"))
    highlight_style: str = os.getenv("DOCSEARCH_HIGHLIGHT_STYLE", "black on #ffe066")
    api_host: str = os.getenv("DOCSEARCH_API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("DOCSEARCH_API_PORT", "8000"))


settings = Settings()
