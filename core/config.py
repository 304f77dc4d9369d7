# =============================================================================
# core/config.py  -  Runtime Settings
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the handful of settings the server needs from the environment and
#   packs them into an immutable Settings object.
#
# WHY AN EXPLICIT OBJECT INSTEAD OF os.environ EVERYWHERE?
#   The tools never read the environment themselves.  The entry point loads
#   Settings once and hands them to CatalogClient, and the tools only ever
#   see the client.  Tests build a client (or a fake) directly and never
#   touch the environment.
#
# ENVIRONMENT VARIABLES:
#   BM_API_KEY   (required)  Books Mandala agent API key.
#   BM_API_BASE  (optional)  Override the upstream base URL, e.g. a staging
#                            host.  Defaults to the production API.
#
#   A .env file in the working directory is honoured via python-dotenv.
# =============================================================================

import os
from dataclasses import dataclass

from dotenv import load_dotenv

API_BASE = "https://booksmandala.com/api/agent/v1"


class ConfigError(RuntimeError):
    """Raised when a required setting is missing."""


@dataclass(frozen=True)
class Settings:
    api_key: str
    api_base: str = API_BASE


def load_settings(env: dict[str, str] | None = None) -> Settings:
    """Build Settings from the environment (or from an explicit mapping).

    Args:
        env: Mapping to read instead of os.environ.  When omitted, .env is
             loaded first and os.environ is used.

    Raises:
        ConfigError: if BM_API_KEY is missing or blank.
    """
    if env is None:
        load_dotenv()
        env = dict(os.environ)

    api_key = env.get("BM_API_KEY", "").strip()
    if not api_key:
        raise ConfigError(
            "BM_API_KEY is not set. Add it to your environment or .env file."
        )

    api_base = env.get("BM_API_BASE", "").strip().rstrip("/") or API_BASE
    return Settings(api_key=api_key, api_base=api_base)
