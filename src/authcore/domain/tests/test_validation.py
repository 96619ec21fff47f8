"""Tests for registration input validation rules."""

import unittest

from authcore.domain.validation import (
    MIN_PASSWORD_LENGTH,
    validate_email_format,
    validate_name,
    validate_password_length,
    validate_password_strength,
)


class TestValidateEmailFormat(unittest.TestCase):

    def test_valid_emails(self):
        for email in ['joao@teste.com', 'a.b+tag@mail.example.org', 'x@y.io']:
            with self.subTest(email=email):
                self.assertTrue(validate_email_format(email))

    def test_invalid_emails(self):
        cases = [
            'email_invalido',
            '',
            '@teste.com',
            'joao@',
            'joao@teste',
            'jo ao@teste.com',
            'joao@te ste.com',
            'joao@@teste.com',
            'joao@teste.com ',
        ]
        for email in cases:
            with self.subTest(email=email):
                self.assertFalse(validate_email_format(email))

    def test_non_string(self):
        self.assertFalse(validate_email_format(None))


class TestValidatePasswordStrength(unittest.TestCase):

    def test_too_short(self):
        self.assertFalse(validate_password_strength('123'))
        self.assertFalse(validate_password_strength('a' * (MIN_PASSWORD_LENGTH - 1)))

    def test_minimum_length(self):
        self.assertTrue(validate_password_strength('a' * MIN_PASSWORD_LENGTH))

    def test_no_complexity_rules(self):
        self.assertTrue(validate_password_strength('aaaaaa'))
        self.assertTrue(validate_password_strength('111111'))


class TestValidatePasswordLength(unittest.TestCase):

    def test_limit_is_bytes_not_characters(self):
        self.assertTrue(validate_password_length('a' * 72))
        self.assertFalse(validate_password_length('a' * 73))
        # 'é' is two bytes in UTF-8
        self.assertFalse(validate_password_length('é' * 37))


class TestValidateName(unittest.TestCase):

    def test_name(self):
        self.assertTrue(validate_name('João Silva'))
        self.assertFalse(validate_name(''))
        self.assertFalse(validate_name('   '))
