class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class AlreadyCheckedInError(ValidationError):
    """Today's record already has a check-in."""


class AlreadyCheckedOutError(ValidationError):
    """Today's record already has a check-out."""


class NotCheckedInError(ValidationError):
    """An action needs a check-in (or overtime start) that does not exist."""


class ActionNotAllowedError(ValidationError):
    """The requested action is not the one derived from the record state."""


class ReasonTooShortError(ValidationError):
    """Overtime reason is shorter than the required minimum."""


class ConsentRequiredError(ValidationError):
    """The overtime policy consent was not confirmed."""


class CaptureIncompleteError(ValidationError):
    """Photo or GPS capture is missing for an action that requires it."""


class ApprovalNotAllowedError(AuthorizationError):
    """The approver's role lacks a capability the request needs."""


class RecordNotFoundError(DomainError):
    """Attendance record does not exist."""
