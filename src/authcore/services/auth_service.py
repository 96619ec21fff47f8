"""Auth service — registration, login and token validation business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging
import secrets

from authcore.adapter.security.password_hasher import BcryptPasswordHasher
from authcore.adapter.security.token_service import JoseTokenService
from authcore.config import AuthConfig
from authcore.domain.model.errors import (
    AccountDisabledError,
    DuplicateError,
    EmailAlreadyInUseError,
    InvalidCredentialsError,
    InvalidEmailFormatError,
    InvalidNameError,
    InvalidTokenError,
    NotFoundError,
    PasswordTooLongError,
    WeakPasswordError,
    ValidationError,
)
from authcore.domain.model.user import LoginResult, PublicUserView
from authcore.domain.validation import (
    validate_email_format,
    validate_name,
    validate_password_length,
    validate_password_strength,
)
from authcore.port.password_hasher import PasswordHasher
from authcore.port.token_service import TokenService
from authcore.port.user_repository import UserRepository

logger = logging.getLogger(__name__)


def _check_new_password(password: str) -> None:
    if not validate_password_strength(password):
        raise WeakPasswordError()
    if not validate_password_length(password):
        raise PasswordTooLongError()


class AuthService:
    """Orchestrates register, login and validate_token against a user store.

    Holds no per-request state, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        repo: UserRepository,
        config: AuthConfig,
        hasher: PasswordHasher | None = None,
        tokens: TokenService | None = None,
    ):
        self.repo = repo
        self.config = config
        self.hasher = hasher or BcryptPasswordHasher(rounds=config.hash_cost)
        self.tokens = tokens or JoseTokenService(
            secret_key=config.secret_key,
            ttl=config.token_ttl,
            algorithm=config.algorithm,
        )
        # Verified against when the email is unknown, so both login failures cost one hash check
        self._dummy_hash = self.hasher.hash(secrets.token_urlsafe(16))

    def register(self, name: str, email: str, password: str) -> PublicUserView:
        """Register a new user.

        Raises:
            InvalidEmailFormatError: email is not local@domain.tld
            WeakPasswordError: password shorter than 6 characters
            PasswordTooLongError: password longer than 72 bytes
            InvalidNameError: name is empty
            EmailAlreadyInUseError: email already registered
        """
        if not validate_email_format(email):
            raise InvalidEmailFormatError()
        _check_new_password(password)
        if not validate_name(name):
            raise InvalidNameError()

        if self.repo.get_by_email(email) is not None:
            raise EmailAlreadyInUseError()

        password_hash = self.hasher.hash(password)

        try:
            user = self.repo.create(name=name, email=email, password_hash=password_hash)
        except DuplicateError:
            # Lost a race with a concurrent registration; the store's unique index decided
            raise EmailAlreadyInUseError() from None

        logger.info("User registered", extra={"userId": user.id, "email": email})
        return PublicUserView.from_user(user)

    def login(self, email: str, password: str) -> LoginResult:
        """Authenticate by email and password and issue an access token.

        Unknown email and wrong password raise the same error after the same
        amount of hashing work. The active flag is only checked once the
        password has been confirmed.

        Raises:
            InvalidCredentialsError: unknown email or wrong password
            AccountDisabledError: correct credentials, inactive account
        """
        user = self.repo.get_by_email(email)
        if user is None:
            self.hasher.verify(password, self._dummy_hash)
            raise InvalidCredentialsError()

        if not self.hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        if not user.is_active:
            logger.info("Login rejected: account disabled", extra={"userId": user.id})
            raise AccountDisabledError()

        token = self.tokens.issue(user_id=user.id, email=user.email)

        logger.info("User logged in", extra={"userId": user.id, "email": user.email})
        return LoginResult(user=PublicUserView.from_user(user), token=token)

    def validate_token(self, token: str) -> PublicUserView:
        """Resolve a token to the current view of its subject.

        Does not re-check is_active: a token identifies its subject, account
        status is enforced at login.

        Raises:
            InvalidTokenError: bad signature, malformed, expired, or the
                subject no longer exists
        """
        claims = self.tokens.verify(token)

        user = self.repo.get_by_id(claims.user_id)
        if user is None:
            logger.debug("Token subject not found", extra={"userId": claims.user_id})
            raise InvalidTokenError()

        return PublicUserView.from_user(user)

    def get_profile(self, user_id: str) -> PublicUserView:
        user = self.repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return PublicUserView.from_user(user)

    def update_profile(
        self, user_id: str, name: str | None = None, email: str | None = None
    ) -> PublicUserView:
        """Update the display name and/or email of an authenticated user.

        Raises:
            ValidationError: neither field given
            InvalidNameError: blank name
            InvalidEmailFormatError: email is not local@domain.tld
            NotFoundError: user no longer exists
            EmailAlreadyInUseError: email belongs to another user
        """
        if name is None and email is None:
            raise ValidationError("At least one field must be provided")
        if name is not None:
            if not validate_name(name):
                raise InvalidNameError()
            name = name.strip()
        if email is not None and not validate_email_format(email):
            raise InvalidEmailFormatError()

        user = self.repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        if email is not None and email != user.email:
            owner = self.repo.get_by_email(email)
            if owner is not None and owner.id != user.id:
                raise EmailAlreadyInUseError()

        try:
            updated = self.repo.update_profile(user.id, name=name, email=email)
        except DuplicateError:
            raise EmailAlreadyInUseError() from None
        if updated is None:
            raise NotFoundError("User not found")

        logger.info("Profile updated", extra={"userId": user.id})
        return PublicUserView.from_user(updated)

    def change_password(self, user_id: str, current_password: str, new_password: str) -> None:
        """Replace the password of an authenticated user.

        Raises:
            WeakPasswordError / PasswordTooLongError: new password rejected
            NotFoundError: user no longer exists
            InvalidCredentialsError: current password is wrong
        """
        _check_new_password(new_password)

        user = self.repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        if not self.hasher.verify(current_password, user.password_hash):
            raise InvalidCredentialsError()

        if not self.repo.update_password(user.id, self.hasher.hash(new_password)):
            raise NotFoundError("User not found")

        logger.info("Password changed", extra={"userId": user.id})
