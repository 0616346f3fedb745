"""Release metadata of the running agent."""

VERSION = "0.1.0"


def version() -> str:
    """Return the release version string."""
    return VERSION
