"""Content-addressed name for the agent auto-registration properties."""

import hashlib


def _registration_artifact(agent_config: str) -> str:
    """File name derived from the content, so equal text gives an equal name."""
    digest = hashlib.sha256(agent_config.encode("utf-8")).hexdigest()[:16]
    return f"autoregister-{digest}.properties"
