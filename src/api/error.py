from typing import Dict, Optional

from fastapi import status
from libs.result import Error


class ClientError(Exception):
    """Request refused; rendered as {"error": {"code", "message"}} with status_code"""

    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_error = base_error
        self.status_code = status_code
        self.headers = headers
        super().__init__(base_error.message)


class BadTokenError(ClientError):
    """Malformed, unknown or expired token in a reset or activation link"""

    def __init__(self, base_error: Error):
        super().__init__(base_error, status_code=status.HTTP_400_BAD_REQUEST)


class ServerError(Exception):
    """Unexpected use case failure; the client only sees the code"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
