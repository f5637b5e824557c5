"""Connection and authentication options DTO."""

from dataclasses import dataclass, field
from typing import Any

from mdbiam.config import Settings
from mdbiam.domain.value_objects import AuthType


@dataclass
class AuthOptions:
    """Options for establishing the audited session."""

    uri: str | None = None
    auth_type: AuthType = AuthType.SCRAM
    tls_certificate_key_file: str | None = None
    tls_ca_file: str | None = None
    app_name: str | None = None
    server_selection_timeout_ms: int | None = None
    client_options: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.auth_type = AuthType.parse(self.auth_type)

    @classmethod
    def from_value(cls, value: "str | AuthOptions | None") -> "AuthOptions":
        """Accept a bare connection string, existing options, or nothing."""
        if isinstance(value, AuthOptions):
            return value
        return cls(uri=value or None)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthOptions":
        return cls(
            uri=settings.mongodb_uri,
            auth_type=AuthType.parse(settings.auth_type),
            tls_certificate_key_file=settings.tls_certificate_key_file,
            tls_ca_file=settings.tls_ca_file,
            app_name=settings.app_name,
            server_selection_timeout_ms=settings.server_selection_timeout_ms,
        )

    def client_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for the driver client; explicit client_options win."""
        kwargs: dict[str, Any] = {}
        mechanism = self.auth_type.mechanism
        if mechanism and "authmechanism=" not in (self.uri or "").lower():
            kwargs["authMechanism"] = mechanism
        if self.tls_certificate_key_file:
            kwargs["tls"] = True
            kwargs["tlsCertificateKeyFile"] = self.tls_certificate_key_file
        if self.tls_ca_file:
            kwargs["tlsCAFile"] = self.tls_ca_file
        if self.app_name:
            kwargs["appname"] = self.app_name
        if self.server_selection_timeout_ms is not None:
            kwargs["serverSelectionTimeoutMS"] = self.server_selection_timeout_ms
        kwargs.update(self.client_options)
        return kwargs
