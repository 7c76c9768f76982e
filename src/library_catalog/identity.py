"""
Session and identity handling for the Library Catalog service.

Callers authenticate with ``Authorization: Bearer <token>``. Tokens are
HS256-signed JWTs carrying the user's id and username and no expiry. They
are never stored; each request verifies its token and looks the user up
again, so a token for a deleted user simply resolves to no current user.
"""

import logging
from typing import Any

import jwt

from .config import CatalogConfig, get_config
from .database.store import CatalogStore
from .errors import TokenError
from .models import User

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


class TokenService:
    """Issues and verifies signed bearer tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self._secret = secret
        self.algorithm = algorithm

    @classmethod
    def from_config(cls, config: CatalogConfig | None = None) -> "TokenService":
        config = config or get_config()
        return cls(config.token_secret, config.token_algorithm)

    def issue(self, claims: dict[str, Any]) -> str:
        """Sign *claims*. Equal claims always produce the same token."""
        return jwt.encode(dict(claims), self._secret, algorithm=self.algorithm)

    def issue_for(self, user: User) -> str:
        return self.issue({"id": user.id, "username": user.username})

    def verify(self, token: str) -> dict[str, Any]:
        """
        Decode a token and check its signature.

        Raises:
            TokenError: If the token is malformed, forged, or lacks an id
        """
        try:
            claims = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            raise TokenError(f"invalid token: {e}") from e

        if not isinstance(claims.get("id"), str):
            raise TokenError("invalid token: missing id claim")
        return claims


def parse_bearer(header: str | None) -> str | None:
    """
    Extract the credential from an Authorization header value.

    Returns:
        The token, or None when no header was sent

    Raises:
        TokenError: If the header does not use the Bearer scheme
    """
    if header is None or header.strip() == "":
        return None

    value = header.strip()
    if not value.lower().startswith(BEARER_PREFIX):
        raise TokenError("authorization header must use the Bearer scheme")

    token = value[len(BEARER_PREFIX):].strip()
    if not token:
        raise TokenError("empty bearer token")
    return token


def resolve_caller(
    header: str | None, store: CatalogStore, tokens: TokenService
) -> User | None:
    """
    Resolve the current user for a request.

    Returns:
        The user, or None for anonymous callers and for tokens whose user
        no longer exists

    Raises:
        TokenError: If a credential was sent but does not verify
    """
    token = parse_bearer(header)
    if token is None:
        return None

    claims = tokens.verify(token)
    user = store.find_user_by_id(claims["id"])
    if user is None:
        logger.info("Token for unknown user %s treated as anonymous", claims["id"])
    return user
