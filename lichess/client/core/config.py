"""Client configuration and credentials.

Architecture:
    ClientConfig is an immutable bundle of the three base URLs the platform
    uses (primary API, openings explorer, endgame tablebase), an optional
    bearer credential, and the settings handed to the HTTP subsystem. It is
    built once and shared read-only by every call and every task.

Design Decisions:
    - Frozen dataclass: safe to share across tasks without copying
    - Validation in __post_init__: direct construction and build() enforce
      the same rules, and failures surface synchronously
    - SecretStr credential: repr() and logging never reveal the token
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from pydantic import SecretStr
from yarl import URL

from .enums import BaseSelector
from .exceptions import InvalidCredentialError, InvalidOptionError

DEFAULT_PRIMARY_BASE_URL = "https://lichess.org"
DEFAULT_OPENINGS_BASE_URL = "https://explorer.lichess.ovh"
DEFAULT_TABLEBASE_BASE_URL = "https://tablebase.lichess.ovh"
DEFAULT_USER_AGENT = "lichess-client-python/0.1.0"

# Visible ASCII plus space
_CREDENTIAL_MIN = 0x20
_CREDENTIAL_MAX = 0x7E


def _validate_base_url(name: str, value: URL | str) -> URL:
    try:
        url = value if isinstance(value, URL) else URL(value)
    except (TypeError, ValueError) as exc:
        raise InvalidCredentialError(f"{name} is not a valid URL") from exc
    if not url.is_absolute() or url.scheme not in ("http", "https") or not url.host:
        raise InvalidCredentialError(f"{name} must be an absolute http(s) URL")
    return url


def _validate_credential(value: SecretStr | str | None) -> SecretStr | None:
    if value is None:
        return None
    token = value.get_secret_value() if isinstance(value, SecretStr) else value
    if not token:
        raise InvalidCredentialError("credential must not be empty")
    for position, char in enumerate(token):
        if not _CREDENTIAL_MIN <= ord(char) <= _CREDENTIAL_MAX:
            # Position only; the token itself never goes into a message
            raise InvalidCredentialError(
                f"credential contains a forbidden character at position {position}"
            )
    return value if isinstance(value, SecretStr) else SecretStr(token)


@dataclass(frozen=True)
class ClientConfig:
    """Connection parameters and bearer credential.

    Attributes:
        primary_base_url: Base URL of the main API
        openings_base_url: Base URL of the opening explorer
        tablebase_base_url: Base URL of the endgame tablebase
        credential: Optional bearer token
        timeout: Total seconds per request, None to disable (long-lived streams)
        read_timeout: Seconds allowed between two body chunks, None to disable
        max_error_body_bytes: Upper bound when reading a non-2xx body
        user_agent: Value of the User-Agent header
    """

    primary_base_url: URL = field(default=URL(DEFAULT_PRIMARY_BASE_URL))
    openings_base_url: URL = field(default=URL(DEFAULT_OPENINGS_BASE_URL))
    tablebase_base_url: URL = field(default=URL(DEFAULT_TABLEBASE_BASE_URL))
    credential: SecretStr | None = None
    timeout: float | None = 30.0
    read_timeout: float | None = None
    max_error_body_bytes: int = 64 * 1024
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        for name in ("primary_base_url", "openings_base_url", "tablebase_base_url"):
            object.__setattr__(self, name, _validate_base_url(name, getattr(self, name)))
        object.__setattr__(self, "credential", _validate_credential(self.credential))
        if self.max_error_body_bytes <= 0:
            raise InvalidOptionError("max_error_body_bytes must be positive")

    @classmethod
    def build(
        cls,
        primary_base: URL | str = DEFAULT_PRIMARY_BASE_URL,
        openings_base: URL | str = DEFAULT_OPENINGS_BASE_URL,
        tablebase_base: URL | str = DEFAULT_TABLEBASE_BASE_URL,
        credential: SecretStr | str | None = None,
        **http_settings: Any,
    ) -> ClientConfig:
        """Build a validated configuration.

        Args:
            primary_base: Main API base URL
            openings_base: Opening explorer base URL
            tablebase_base: Tablebase base URL
            credential: Optional bearer token
            **http_settings: timeout, read_timeout, max_error_body_bytes, user_agent

        Raises:
            InvalidCredentialError: If the credential holds a character outside
                visible ASCII and space, or a URL does not parse
        """
        return cls(
            primary_base_url=primary_base,  # type: ignore[arg-type]
            openings_base_url=openings_base,  # type: ignore[arg-type]
            tablebase_base_url=tablebase_base,  # type: ignore[arg-type]
            credential=credential,  # type: ignore[arg-type]
            **http_settings,
        )

    @property
    def authenticated(self) -> bool:
        return self.credential is not None

    def with_credential(self, credential: SecretStr | str | None) -> ClientConfig:
        """Return a copy using another credential (validated the same way)."""
        return replace(self, credential=credential)  # type: ignore[arg-type]

    def auth_header(self) -> tuple[str, str] | None:
        """Authorization header for the configured credential, if any."""
        if self.credential is None:
            return None
        return ("Authorization", f"Bearer {self.credential.get_secret_value()}")

    def base_url(self, base: BaseSelector) -> URL:
        if base is BaseSelector.OPENINGS:
            return self.openings_base_url
        if base is BaseSelector.TABLEBASE:
            return self.tablebase_base_url
        return self.primary_base_url

    def resolve_url(self, base: BaseSelector, path: str) -> URL:
        """Join ``path`` onto the selected base URL.

        Example:
            >>> ClientConfig().resolve_url(BaseSelector.PRIMARY, "api/account")
            URL('https://lichess.org/api/account')
        """
        root = self.base_url(base)
        path = path.lstrip("/")
        if not path:
            return root
        return root / path
