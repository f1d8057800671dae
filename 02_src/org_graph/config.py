"""Runtime configuration read from the environment and an optional .env file."""

import os
from dataclasses import dataclass, field
from typing import Dict, Tuple

from dotenv import load_dotenv

DEFAULT_DATABASE_IDS: Dict[str, str] = {
    "circles": "2de36f74-3758-8122-ac4a-000b520202bf",
    "people": "c2edc051-62cd-49cb-9805-38fa64d83a4f",
    "roles": "2de36f74-3758-8123-8fda-000b5d5af434",
}

DEFAULT_CORS_ORIGINS: Tuple[str, ...] = (
    "https://ludwa6.github.io",
    "http://localhost:3000",
    "http://localhost:5173",
    "http://localhost:8080",
)


@dataclass(frozen=True)
class Settings:
    notion_api_key: str = ""
    notion_api_url: str = "https://api.notion.com/v1"
    notion_version: str = "2022-06-28"
    notion_page_url: str = "https://notion.so"
    database_ids: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_DATABASE_IDS))
    placeholder_name: str = "Circle [Name]"
    source_label: str = "Notion API - live query"
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS
    cache_max_age: int = 60
    timeout: float = 30.0
    port: int = 3000
    log_level: str = "INFO"


def _split_origins(raw: str) -> Tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


def load_settings() -> Settings:
    load_dotenv()
    database_ids = {
        "circles": os.getenv("NOTION_CIRCLES_DB", DEFAULT_DATABASE_IDS["circles"]),
        "people": os.getenv("NOTION_PEOPLE_DB", DEFAULT_DATABASE_IDS["people"]),
        "roles": os.getenv("NOTION_ROLES_DB", DEFAULT_DATABASE_IDS["roles"]),
    }
    cors_raw = os.getenv("ORG_GRAPH_CORS_ORIGINS")
    return Settings(
        notion_api_key=os.getenv("NOTION_API_KEY", ""),
        notion_api_url=os.getenv("NOTION_API_URL", Settings.notion_api_url).rstrip("/"),
        notion_version=os.getenv("NOTION_VERSION", Settings.notion_version),
        notion_page_url=os.getenv("NOTION_PAGE_URL", Settings.notion_page_url).rstrip("/"),
        database_ids=database_ids,
        placeholder_name=os.getenv("ORG_GRAPH_PLACEHOLDER_NAME", Settings.placeholder_name),
        source_label=os.getenv("ORG_GRAPH_SOURCE_LABEL", Settings.source_label),
        cors_origins=_split_origins(cors_raw) if cors_raw else DEFAULT_CORS_ORIGINS,
        cache_max_age=int(os.getenv("ORG_GRAPH_CACHE_MAX_AGE", str(Settings.cache_max_age))),
        timeout=float(os.getenv("ORG_GRAPH_TIMEOUT", str(Settings.timeout))),
        port=int(os.getenv("PORT", str(Settings.port))),
        log_level=os.getenv("LOG_LEVEL", Settings.log_level).upper(),
    )
