"""
JWT token utilities.

Tokens are issued by the identity service; this module only needs to encode
them for tooling and tests and to decode them for request authentication.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

import jwt
import structlog

from recruitai.core.config import Settings, get_settings

logger = structlog.get_logger(__name__)


class TokenManager:
    """JWT token management utilities"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def create_access_token(
        self,
        user_id: str,
        tenant_id: str,
        role: str,
        email: Optional[str] = None,
        expires_in: Optional[timedelta] = None,
    ) -> str:
        """Create JWT access token"""
        now = datetime.now(timezone.utc)
        expires_at = now + (expires_in or timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES))

        payload = {
            "sub": user_id,
            "tenant_id": tenant_id,
            "role": role,
            "email": email,
            "exp": expires_at,
            "iat": now,
            "jti": str(uuid4()),
            "token_type": "access",
        }
        return jwt.encode(payload, self.settings.SECRET_KEY, algorithm=self.settings.JWT_ALGORITHM)

    def verify_token(self, token: str) -> Optional[Dict[str, Any]]:
        """Verify and decode JWT token; ``None`` when invalid or expired."""
        try:
            return jwt.decode(
                token,
                self.settings.SECRET_KEY,
                algorithms=[self.settings.JWT_ALGORITHM],
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Token has expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning("Token validation failed", error=str(e))
            return None


__all__ = ["TokenManager"]
