"""
Configuration — reads all settings from environment variables.
Never hardcodes credentials. Uses python-dotenv for local dev.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Config:
    # Agent platform
    agent_api_url: str
    agent_api_key: str
    agent_id: str

    # Harvest settings
    agent_timeout_seconds: float = 300.0
    success_reset_delay_seconds: float = 2.0

    @classmethod
    def from_env(cls) -> "Config":
        missing = []
        required = [
            "AGENT_API_URL",
            "AGENT_API_KEY",
            "AGENT_ID",
        ]
        for key in required:
            if not os.getenv(key):
                missing.append(key)

        if missing:
            raise EnvironmentError(
                f"Missing required environment variables: {', '.join(missing)}\n"
                f"Copy .env.example to .env and fill in the values."
            )

        return cls(
            agent_api_url=os.environ["AGENT_API_URL"],
            agent_api_key=os.environ["AGENT_API_KEY"],
            agent_id=os.environ["AGENT_ID"],
            agent_timeout_seconds=float(os.getenv("AGENT_TIMEOUT_SECONDS", "300")),
            success_reset_delay_seconds=float(
                os.getenv("SUCCESS_RESET_DELAY_SECONDS", "2.0")
            ),
        )
