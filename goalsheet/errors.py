"""Errors raised while answering goal lookups."""


class GoalSheetError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GoalSheetError):
    """Required input missing or blank."""
    status_code = 400


class NotFoundError(GoalSheetError):
    status_code = 404


class UpstreamError(GoalSheetError):
    """The goals sheet could not be fetched or parsed."""
    status_code = 500
