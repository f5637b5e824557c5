"""Authentication mechanisms the auditor can run under."""

from enum import StrEnum

from mdbiam.domain.exceptions import UnsupportedAuthType


class AuthType(StrEnum):
    """Supported authentication types.

    The type decides where the subject username comes from: the connection
    string credentials, or the principal the server reports for the session.
    """

    GENERIC = "Generic"
    SCRAM = "SCRAM"
    X509 = "X.509"
    AWS_IAM = "AWS.IAM"
    OIDC = "OIDC"
    KERBEROS = "Kerberos"
    LDAP = "LDAP"

    @property
    def mechanism(self) -> str | None:
        """Driver authMechanism implied by this type, None to let the driver negotiate."""
        return _MECHANISMS.get(self)

    @property
    def server_reports_identity(self) -> bool:
        """True when the username must be read from connectionStatus."""
        return self in _SERVER_DERIVED

    @classmethod
    def parse(cls, value: "str | AuthType | None") -> "AuthType":
        """Parse a type name, case-insensitive, with common aliases. None means SCRAM."""
        if isinstance(value, AuthType):
            return value
        if not value:
            return cls.SCRAM
        key = value.strip().upper()
        for member in cls:
            if member.value.upper() == key:
                return member
        alias = _ALIASES.get(key)
        if alias is None:
            raise UnsupportedAuthType(f"Unsupported authentication type: {value!r}")
        return alias


_MECHANISMS: dict[AuthType, str] = {
    AuthType.X509: "MONGODB-X509",
    AuthType.AWS_IAM: "MONGODB-AWS",
    AuthType.OIDC: "MONGODB-OIDC",
    AuthType.KERBEROS: "GSSAPI",
    AuthType.LDAP: "PLAIN",
}

_SERVER_DERIVED = frozenset(
    {AuthType.X509, AuthType.AWS_IAM, AuthType.OIDC, AuthType.KERBEROS}
)

_ALIASES: dict[str, AuthType] = {
    "X509": AuthType.X509,
    "MONGODB-X509": AuthType.X509,
    "AWS": AuthType.AWS_IAM,
    "MONGODB-AWS": AuthType.AWS_IAM,
    "OAUTH": AuthType.OIDC,
    "MONGODB-OIDC": AuthType.OIDC,
    "GSSAPI": AuthType.KERBEROS,
    "PLAIN": AuthType.LDAP,
    "SCRAM-SHA-1": AuthType.SCRAM,
    "SCRAM-SHA-256": AuthType.SCRAM,
}
