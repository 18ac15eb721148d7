import os
from typing import Dict, Optional

from pydantic import BaseModel, Field


ENV_PREFIX = "HELPDESK_"


class ClientSettings(BaseModel):
    """Connection settings for a helpdesk account."""

    base_url: str
    email: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None
    timeout: float = 30.0
    format: str = "json"
    headers: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "ClientSettings":
        """Build settings from ``HELPDESK_*`` environment variables."""
        base_url = os.environ.get(f"{prefix}URL")
        if not base_url:
            raise ValueError(f"{prefix}URL is not set")

        return cls(
            base_url=base_url,
            email=os.environ.get(f"{prefix}EMAIL", None),
            password=os.environ.get(f"{prefix}PASSWORD", None),
            token=os.environ.get(f"{prefix}TOKEN", None),
            timeout=float(os.environ.get(f"{prefix}TIMEOUT", "30.0")),
        )
