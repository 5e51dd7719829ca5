from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "unitgraph"
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    # Measurement systems loaded into the API's unit context (System enum names).
    systems: list[str] = [
        "SI", "SI_ACCEPTED", "COMMON", "IMPERIAL", "US",
        "SCIENTIFIC", "ASTRONOMICAL", "NAUTICAL", "TYPOGRAPHY",
    ]
    max_symbol_length: int = 200  # characters

    class Config:
        env_prefix = "UNITGRAPH_"


settings = Settings()
