"""
Environment + JSON config loader for competitor scanning.
"""

from __future__ import annotations

import json
from functools import lru_cache

from app.config import get_bool_env, get_float_env, get_str_env, resolve_project_path
from app.scraping.config.models import CompetitorScanSettings, CompetitorTarget

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


@lru_cache(maxsize=1)
def get_competitor_scan_settings() -> CompetitorScanSettings:
    """
    Return cached scanner settings from environment variables.
    """

    config_path = get_str_env(
        "COMPETITOR_SCAN_CONFIG_PATH",
        "app/scraping/config/competitors.json",
    )
    output_dir = get_str_env("COMPETITOR_SCAN_OUTPUT_DIR", "competitor-analysis-results")
    return CompetitorScanSettings(
        config_path=str(resolve_project_path(config_path)),
        output_dir=str(resolve_project_path(output_dir)),
        user_agent=get_str_env("COMPETITOR_SCAN_USER_AGENT", DEFAULT_USER_AGENT),
        navigation_timeout_seconds=max(
            1.0,
            get_float_env("COMPETITOR_SCAN_NAVIGATION_TIMEOUT_SECONDS", 30.0),
        ),
        settle_delay_seconds=max(
            0.0,
            get_float_env("COMPETITOR_SCAN_SETTLE_DELAY_SECONDS", 3.0),
        ),
        delay_between_targets_seconds=max(
            0.0,
            get_float_env("COMPETITOR_SCAN_DELAY_BETWEEN_TARGETS_SECONDS", 2.0),
        ),
        headless=get_bool_env("COMPETITOR_SCAN_HEADLESS", True),
        respect_robots=get_bool_env("COMPETITOR_SCAN_RESPECT_ROBOTS", True),
        allow_when_robots_unreachable=get_bool_env(
            "COMPETITOR_SCAN_ALLOW_WHEN_ROBOTS_UNREACHABLE",
            True,
        ),
    )


def load_competitor_targets(*, config_path: str) -> list[CompetitorTarget]:
    """
    Load competitor targets from a JSON file.
    """

    path = resolve_project_path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Competitor config file not found: {path}")

    raw_data = json.loads(path.read_text(encoding="utf-8"))
    competitors = raw_data.get("competitors", []) if isinstance(raw_data, dict) else None
    if not isinstance(competitors, list):
        raise ValueError("Invalid competitor config: 'competitors' must be a list.")

    parsed: list[CompetitorTarget] = []
    for entry in competitors:
        if not isinstance(entry, dict):
            continue

        name = str(entry.get("name", "")).strip()
        url = str(entry.get("url", "")).strip()
        selector = _normalize_selector(entry.get("selector"))
        if not name or not url.startswith(("http://", "https://")) or not selector:
            continue

        key = str(entry.get("key", "")).strip().lower() or name.lower()
        parsed.append(
            CompetitorTarget(
                key=key,
                name=name,
                url=url,
                selector=selector,
                fallback_selectors=tuple(_normalize_selector_list(entry.get("fallback_selectors"))),
                enabled=_optional_bool(entry.get("enabled"), True),
            )
        )

    return parsed


def _normalize_selector(value: object) -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, list):
        return ", ".join(_normalize_selector_list(value))
    return ""


def _normalize_selector_list(value: object) -> list[str]:
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _optional_bool(value: object, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    return default
