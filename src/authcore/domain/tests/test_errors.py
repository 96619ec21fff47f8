"""Tests for domain error semantics."""

import unittest

from authcore.domain.model.errors import (
    AccountDisabledError,
    AuthenticationError,
    DomainError,
    DuplicateError,
    EmailAlreadyInUseError,
    InvalidCredentialsError,
    InvalidEmailFormatError,
    InvalidTokenError,
    ValidationError,
    WeakPasswordError,
)


class TestDomainErrors(unittest.TestCase):

    def test_hierarchy(self):
        self.assertTrue(issubclass(InvalidEmailFormatError, ValidationError))
        self.assertTrue(issubclass(WeakPasswordError, ValidationError))
        self.assertTrue(issubclass(EmailAlreadyInUseError, DuplicateError))
        for cls in (InvalidCredentialsError, AccountDisabledError, InvalidTokenError):
            self.assertTrue(issubclass(cls, AuthenticationError))
            self.assertTrue(issubclass(cls, DomainError))

    def test_same_kind_errors_are_equal(self):
        self.assertEqual(InvalidCredentialsError(), InvalidCredentialsError())
        self.assertEqual(str(InvalidTokenError()), "Invalid token")

    def test_different_kinds_are_not_equal(self):
        self.assertNotEqual(InvalidCredentialsError(), AccountDisabledError())

    def test_custom_message(self):
        error = DuplicateError("Email already exists")
        self.assertEqual(error.message, "Email already exists")
        self.assertEqual(error.code, "duplicate")

    def test_codes_are_distinct(self):
        codes = {
            cls.code for cls in (
                InvalidEmailFormatError, WeakPasswordError, EmailAlreadyInUseError,
                InvalidCredentialsError, AccountDisabledError, InvalidTokenError,
            )
        }
        self.assertEqual(len(codes), 6)
