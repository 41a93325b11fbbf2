from fastapi import HTTPException
from tasktracker.errors import ErrorKind, Err, Result

STATUS_CODES = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL_ERROR: 500,
}


def unwrap(result: Result):
    """Return the Ok value or raise the matching HTTPException."""
    if isinstance(result, Err):
        raise HTTPException(
            status_code=STATUS_CODES[result.error.kind],
            detail=result.error.message,
            headers={"X-Error-Kind": result.error.kind.value},
        )
    return result.value
