"""Configuration for resolving symbol identities outside a catalog."""

import os
from dataclasses import dataclass
from urllib.parse import urlsplit

from symdoc.exceptions import ConfigurationError, generate_correlation_id

DEFAULT_BASE_URL = "https://numpy.org/doc/stable/reference/generated/"
DEFAULT_PACKAGE = "numpy"


@dataclass(frozen=True)
class SymdocConfig:
    """Immutable symdoc configuration."""

    base_url: str = DEFAULT_BASE_URL

    # Package prefix stripped when deriving short names ("" disables stripping)
    package: str = DEFAULT_PACKAGE

    def __post_init__(self) -> None:
        """Validate configuration after initialisation."""
        parts = urlsplit(self.base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(
                f"SYMDOC_BASE_URL must be an absolute http(s) URL, got: {self.base_url!r}",
                setting="SYMDOC_BASE_URL",
                correlation_id=generate_correlation_id(),
                context={"base_url": self.base_url},
            )


def load_config() -> SymdocConfig:
    """
    Load configuration from environment variables.

    Unset variables fall back to the numpy documentation defaults.

    Returns:
        SymdocConfig with validated settings.

    Raises:
        ConfigurationError: If a setting is invalid.
    """
    base_url = os.getenv("SYMDOC_BASE_URL") or DEFAULT_BASE_URL
    package = os.getenv("SYMDOC_PACKAGE")
    if package is None:
        package = DEFAULT_PACKAGE

    return SymdocConfig(base_url=base_url, package=package.strip())
