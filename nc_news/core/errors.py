# nc_news/core/errors.py
"""
Client-facing error types.

Every error the API reports carries an HTTP status and a ``msg`` that is sent
back verbatim as ``{"msg": ...}`` by the handlers registered in ``main``.
"""

INCORRECT_TYPE_MSG = "Incorrect type - this must be a number"
MISSING_FIELDS_MSG = "missing required fields"
INVALID_PATH_MSG = "Invalid path"
BAD_REQUEST_MSG = "Bad request"
INTERNAL_ERROR_MSG = "Internal server error"


class APIError(Exception):
    status_code = 500
    msg = INTERNAL_ERROR_MSG

    def __init__(self, msg: str = None, status_code: int = None):
        if msg is not None:
            self.msg = msg
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.msg)


class InvalidTypeError(APIError):
    """An id or vote delta that is not a number."""
    status_code = 400
    msg = INCORRECT_TYPE_MSG


class MissingFieldError(APIError):
    status_code = 400
    msg = MISSING_FIELDS_MSG


class ArticleNotFoundError(APIError):
    status_code = 404

    def __init__(self, article_id: str):
        self.article_id = article_id
        super().__init__(f"No article found for article_id: {article_id}")
