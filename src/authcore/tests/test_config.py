"""Tests for AuthConfig."""

import unittest
from datetime import timedelta
from unittest.mock import patch

from authcore.config import AuthConfig, DEFAULT_TOKEN_TTL


class TestAuthConfig(unittest.TestCase):

    def test_defaults(self):
        config = AuthConfig(secret_key='secret')

        self.assertEqual(config.token_ttl, DEFAULT_TOKEN_TTL)
        self.assertEqual(config.hash_cost, 10)
        self.assertEqual(config.algorithm, 'HS256')

    def test_secret_not_in_repr(self):
        self.assertNotIn('super-secret', repr(AuthConfig(secret_key='super-secret')))

    def test_rejects_empty_secret(self):
        with self.assertRaises(ValueError):
            AuthConfig(secret_key='')

    def test_rejects_out_of_range_cost(self):
        for cost in (3, 32):
            with self.assertRaises(ValueError):
                AuthConfig(secret_key='secret', hash_cost=cost)

    @patch.dict('os.environ', {
        'JWT_SECRET_KEY': 'env-secret',
        'JWT_EXPIRATION_SECONDS': '3600',
        'BCRYPT_ROUNDS': '12',
    })
    def test_from_env(self):
        config = AuthConfig.from_env()

        self.assertEqual(config.secret_key, 'env-secret')
        self.assertEqual(config.token_ttl, timedelta(hours=1))
        self.assertEqual(config.hash_cost, 12)

    @patch.dict('os.environ', {}, clear=True)
    def test_from_env_requires_secret(self):
        with self.assertRaises(ValueError) as ctx:
            AuthConfig.from_env()
        self.assertIn('JWT_SECRET_KEY', str(ctx.exception))

    def test_rejects_non_positive_ttl(self):
        for ttl in (timedelta(0), timedelta(seconds=-1)):
            with self.assertRaises(ValueError):
                AuthConfig(secret_key='secret', token_ttl=ttl)

    @patch.dict('os.environ', {'JWT_SECRET_KEY': 'env-secret', 'JWT_EXPIRATION_SECONDS': '0'})
    def test_from_env_rejects_zero_expiration(self):
        with self.assertRaises(ValueError) as ctx:
            AuthConfig.from_env()
        self.assertIn('token_ttl', str(ctx.exception))
