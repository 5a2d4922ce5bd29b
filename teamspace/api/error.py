from fastapi import status

from teamspace.domain.errors import ErrorCategory, category_for
from teamspace.libs.result import Error

CATEGORY_STATUS = {
    ErrorCategory.validation: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.not_found: status.HTTP_404_NOT_FOUND,
    ErrorCategory.permission: status.HTTP_403_FORBIDDEN,
    ErrorCategory.invariant: status.HTTP_409_CONFLICT,
    ErrorCategory.conflict: status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Raise the transport error matching the category of an engine error code"""
    category = category_for(error.code)
    if category is None:
        raise ServerError(error)
    raise ClientError(error, status_code=CATEGORY_STATUS[category])
