"""Bearer-token authentication for the Storefront API.

Token verification is delegated to a ``TokenVerifier``; routes only ever see
the verified subject identifier. ``JWTTokenVerifier`` checks HS256 tokens
signed with ``STOREFRONT_JWT_SECRET``. Tests and deployments backed by another
identity provider override ``get_token_verifier``.
"""

import os
from functools import lru_cache

from fastapi import Depends, Header, HTTPException
from jose import JWTError, jwt

from storefront.exceptions import InvalidTokenError
from storefront.utils.logging import add_context, get_logger

logger = get_logger(__name__)

DEFAULT_JWT_SECRET = "dev-secret-change-me"
DEFAULT_JWT_ALGORITHM = "HS256"


class JWTTokenVerifier:
    def __init__(self, secret=None, algorithm=None):
        self.secret = secret or os.getenv("STOREFRONT_JWT_SECRET", DEFAULT_JWT_SECRET)
        self.algorithm = algorithm or os.getenv("STOREFRONT_JWT_ALGORITHM", DEFAULT_JWT_ALGORITHM)

    def verify(self, token: str) -> str:
        """Return the token's subject, or raise ``InvalidTokenError``."""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidTokenError(str(exc)) from exc

        subject = payload.get("sub") or payload.get("uid")
        if not subject:
            raise InvalidTokenError("Token has no subject")
        return str(subject)

    def issue(self, subject: str, **claims) -> str:
        """Sign a token for ``subject``; used by local tooling and load tests."""
        return jwt.encode({"sub": subject, **claims}, self.secret, algorithm=self.algorithm)


@lru_cache
def get_token_verifier() -> JWTTokenVerifier:
    return JWTTokenVerifier()


def _bearer_token(authorization: str | None) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="Unauthorized: No token provided")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="Unauthorized: Invalid Authorization header")
    return token.strip()


async def get_current_customer(
    authorization: str | None = Header(None),
    verifier=Depends(get_token_verifier),
) -> str:
    """Resolve the authenticated subject for the request."""
    token = _bearer_token(authorization)
    try:
        customer_id = verifier.verify(token)
    except InvalidTokenError as exc:
        logger.warning("authentication_failed", reason=str(exc))
        raise HTTPException(status_code=401, detail="Unauthorized: Invalid token") from exc

    add_context(customer_id=customer_id)
    return customer_id
