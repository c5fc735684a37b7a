class ReviewError(Exception):
    """Base for failures reported to the caller as {"error": message}."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ReviewError):
    status_code = 400


class ConfigurationError(ReviewError):
    status_code = 500


class UpstreamError(ReviewError):
    status_code = 500
