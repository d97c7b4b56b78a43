"""
Process-wide configuration for the PostHog LLM client.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_HOST = "https://us.i.posthog.com"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class PostHogLLMConfig:
    """Configuration for the PostHog LLM client. Built once at startup and never mutated."""
    api_key: Optional[str] = None
    host: str = DEFAULT_HOST
    default_privacy_mode: bool = False
    default_distinct_id: Optional[str] = None
    # Send each event immediately instead of batching
    flush_at: int = 1

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "PostHogLLMConfig":
        """
        Build a configuration from environment variables.

        Reads ``POSTHOG_API_KEY`` (or ``NEXT_PUBLIC_POSTHOG_KEY``),
        ``POSTHOG_HOST`` (or ``NEXT_PUBLIC_POSTHOG_HOST``),
        ``POSTHOG_LLM_PRIVACY_MODE`` and ``POSTHOG_LLM_DISTINCT_ID``.

        Args:
            env_file: Optional dotenv file loaded before reading the environment

        Returns:
            A new configuration
        """
        if env_file:
            load_dotenv(env_file)

        api_key = os.getenv("POSTHOG_API_KEY") or os.getenv("NEXT_PUBLIC_POSTHOG_KEY")
        host = os.getenv("POSTHOG_HOST") or os.getenv("NEXT_PUBLIC_POSTHOG_HOST") or DEFAULT_HOST
        privacy = os.getenv("POSTHOG_LLM_PRIVACY_MODE", "false").strip().lower() in _TRUTHY
        distinct_id = os.getenv("POSTHOG_LLM_DISTINCT_ID") or None

        if not api_key:
            logger.warning("POSTHOG_API_KEY not set")

        return cls(
            api_key=api_key,
            host=host,
            default_privacy_mode=privacy,
            default_distinct_id=distinct_id,
        )
