"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.

Messages are fixed per class so two failures of the same kind are
indistinguishable to a caller, and never carry passwords or hashes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""

    code = "domain_error"
    message = "Request could not be completed"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    def __hash__(self):
        return hash((type(self), self.code, self.message))


class ValidationError(DomainError):
    """Input violates a business validation rule."""

    code = "validation_error"
    message = "Invalid input"


class InvalidEmailFormatError(ValidationError):
    code = "invalid_email_format"
    message = "Invalid email format"


class WeakPasswordError(ValidationError):
    code = "weak_password"
    message = "Password must be at least 6 characters"


class PasswordTooLongError(ValidationError):
    code = "password_too_long"
    message = "Password must be at most 72 bytes"


class InvalidNameError(ValidationError):
    code = "invalid_name"
    message = "Name is required"


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""

    code = "duplicate"
    message = "Entity already exists"


class EmailAlreadyInUseError(DuplicateError):
    code = "email_already_in_use"
    message = "Email already in use"


class AuthenticationError(DomainError):
    """Caller could not be authenticated."""

    code = "authentication_failed"
    message = "Authentication failed"


class InvalidCredentialsError(AuthenticationError):
    """Unknown email or wrong password. The two cases are deliberately identical."""

    code = "invalid_credentials"
    message = "Invalid email or password"


class AccountDisabledError(AuthenticationError):
    code = "account_disabled"
    message = "Account disabled. Please contact support"


class InvalidTokenError(AuthenticationError):
    code = "invalid_token"
    message = "Invalid token"


class NotFoundError(DomainError):
    """Requested entity does not exist."""

    code = "not_found"
    message = "Not found"


class RepositoryError(DomainError):
    """The user store failed to complete an operation."""

    code = "repository_error"
    message = "User store unavailable"
