from datetime import datetime, timedelta, UTC
from typing import Optional

from fastapi import Header, HTTPException
from jose import jwt, JWTError, ExpiredSignatureError
from tasktracker.config import SECRET_KEY, ALGORITHM


def create_token(identity: str) -> str:
    """Sign a token whose ``sub`` claim is the caller identity.

    Identity issuance belongs to the external identity provider; this helper
    exists for tooling and tests that need to act as a given caller.
    """
    # read expiry at call-time so tests (and runtime overrides) that modify
    # tasktracker.config.ACCESS_TOKEN_EXPIRE_MINUTES take effect immediately
    import tasktracker.config as _cfg
    expire = datetime.now(UTC) + timedelta(minutes=_cfg.ACCESS_TOKEN_EXPIRE_MINUTES)
    data = {"sub": identity, "exp": int(expire.timestamp())}  # JWT spec uses Unix timestamp
    return jwt.encode(data, SECRET_KEY, algorithm=ALGORITHM)


def _extract_token(authorization: Optional[str], token_query: Optional[str]) -> Optional[str]:
    """Return token from Authorization header (Bearer ...) or token query param.
    Header has precedence.
    """
    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
    return token_query


def get_caller(authorization: Optional[str] = Header(None), token: Optional[str] = None) -> str:
    """FastAPI dependency resolving the pre-verified caller identity."""
    tok = _extract_token(authorization, token)
    if not tok:
        raise HTTPException(status_code=422, detail="Missing token")
    try:
        # jwt.decode validates exp automatically
        payload = jwt.decode(tok, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token has expired")
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid token")
    identity = payload.get("sub")
    if not identity:
        raise HTTPException(status_code=401, detail="Invalid token: missing identity")
    return identity
