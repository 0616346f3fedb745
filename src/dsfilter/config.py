"""
dsfilter settings.

Values come from constructor arguments, falling back to environment
variables:

    DSFILTER_AGENT_ID       agent identifier (generated when unset)
    DSFILTER_AGENT_VERSION  agent release version (package version when unset)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dsfilter import release


@dataclass(frozen=True)
class Settings:
    agent_id: Optional[str] = None
    agent_version: str = release.version()

    @classmethod
    def from_env(cls, agent_id: Optional[str] = None, agent_version: Optional[str] = None) -> "Settings":
        return cls(
            agent_id=agent_id or os.environ.get("DSFILTER_AGENT_ID") or None,
            agent_version=agent_version or os.environ.get("DSFILTER_AGENT_VERSION", release.version()),
        )
