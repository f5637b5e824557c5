"""Identity resolver port - determines the audited username."""

from typing import Protocol


class IdentityResolver(Protocol):
    """Resolve the subject: explicit value, cached value, then the variant's own source."""

    async def resolve(self, username: str | None = None) -> str: ...
