class UserNotFoundError(Exception):
    """Raised when no stored record has the requested id."""

    status_code = 404
    message = "user not found"

    def __init__(self, raw_id: str = None):
        super().__init__(self.message)
        self.raw_id = raw_id
