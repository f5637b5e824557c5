"""Domain exceptions."""


class IamUtilError(Exception):
    """Base exception for mdbiam."""

    pass


class MissingSubject(IamUtilError):
    """No username available to aggregate roles for."""

    pass


class IdentityUnresolved(IamUtilError):
    """Server reports no authenticated principal and none was supplied or cached."""

    pass


class AggregationFailed(IamUtilError):
    """Could not open the session or enumerate databases."""

    pass


class SessionError(IamUtilError):
    """Driver or transport failure while talking to the cluster."""

    pass


class UnsupportedAuthType(IamUtilError):
    """Authentication type has no registered implementation."""

    pass
