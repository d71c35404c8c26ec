"""
Runtime Configuration

Reads the service settings from MAILRELAY_* environment variables once at import.

Includes:
- Database location
- Local (reserved) service domain used by domain validation
- Logging and CORS settings
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from domain.value_objects import DomainName
from exceptions import ConfigurationError


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


@dataclass(frozen=True)
class AppConfig:
    """Immutable application settings."""

    data_dir: Path
    database_url: str
    local_domain: str
    log_level: str = 'INFO'
    cors_origins: List[str] = field(default_factory=list)

    @property
    def log_dir(self) -> Path:
        return self.data_dir / 'logs'

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith('sqlite')


def load_config() -> AppConfig:
    """
    Build the configuration from the environment.

    Returns:
        AppConfig with defaults filled in for anything not set
    """
    data_dir = Path(os.environ.get('MAILRELAY_DATA_DIR', '~/.mailrelay')).expanduser()
    database_url = os.environ.get('MAILRELAY_DATABASE_URL') or f"sqlite:///{data_dir / 'mailrelay.db'}"

    local_domain = os.environ.get('MAILRELAY_DOMAIN', 'mailrelay.me').strip().lower()
    if not DomainName(local_domain).is_fqdn():
        # Domain validation matches by suffix, so a malformed value would reject everything
        raise ConfigurationError(
            f"MAILRELAY_DOMAIN must be a fully qualified domain name, got {local_domain!r}"
        )

    return AppConfig(
        data_dir=data_dir,
        database_url=database_url,
        local_domain=local_domain,
        log_level=os.environ.get('MAILRELAY_LOG_LEVEL', 'INFO').upper(),
        cors_origins=_split_csv(os.environ.get('MAILRELAY_CORS_ORIGINS', 'http://localhost:3000')),
    )


# Global settings
APP_CONFIG = load_config()
