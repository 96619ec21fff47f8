"""Unit tests for API dependency wiring."""

import unittest
from unittest.mock import patch, MagicMock

from fastapi import HTTPException

from authcore.adapter.mongodb.user_repository import MongoUserRepository
from authcore.api.dependencies import get_auth_config, get_auth_service, get_user_repo
from authcore.services.auth_service import AuthService


class TestGetUserRepo(unittest.TestCase):

    @patch('authcore.api.dependencies.get_mongodb_client')
    def test_returns_mongo_repository_when_connected(self, mock_get_client):
        mock_client = MagicMock()
        mock_client.__getitem__.return_value = MagicMock()
        mock_get_client.return_value = mock_client

        self.assertIsInstance(get_user_repo(), MongoUserRepository)

    @patch('authcore.api.dependencies.get_mongodb_client')
    def test_raises_503_when_mongodb_unavailable(self, mock_get_client):
        mock_get_client.return_value = None

        with self.assertRaises(HTTPException) as context:
            get_user_repo()

        self.assertEqual(context.exception.status_code, 503)
        self.assertEqual(context.exception.detail, "Database unavailable")

    @patch('authcore.api.dependencies.get_mongodb_client')
    def test_uses_correct_database_name(self, mock_get_client):
        mock_client = MagicMock()
        mock_get_client.return_value = mock_client

        get_user_repo()

        from authcore.api.dependencies import DATABASE_NAME
        mock_client.__getitem__.assert_called_with(DATABASE_NAME)


class TestGetAuthService(unittest.TestCase):

    def setUp(self):
        get_auth_config.cache_clear()
        get_auth_service.cache_clear()

    def tearDown(self):
        get_auth_config.cache_clear()
        get_auth_service.cache_clear()

    @patch.dict('os.environ', {'JWT_SECRET_KEY': 'env-secret', 'BCRYPT_ROUNDS': '4'})
    @patch('authcore.api.dependencies.get_mongodb_client')
    def test_builds_service_once(self, mock_get_client):
        mock_get_client.return_value = MagicMock()

        service = get_auth_service()

        self.assertIsInstance(service, AuthService)
        self.assertEqual(service.config.hash_cost, 4)
        self.assertIs(get_auth_service(), service)

    @patch.dict('os.environ', {'JWT_SECRET_KEY': 'env-secret', 'BCRYPT_ROUNDS': '4'})
    @patch('authcore.api.dependencies.get_mongodb_client')
    def test_not_cached_when_database_unavailable(self, mock_get_client):
        mock_get_client.return_value = None
        with self.assertRaises(HTTPException):
            get_auth_service()

        mock_get_client.return_value = MagicMock()
        self.assertIsInstance(get_auth_service(), AuthService)
