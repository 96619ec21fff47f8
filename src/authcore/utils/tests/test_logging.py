"""Tests for structured JSON logging."""

import json
import logging
import unittest

from authcore.utils.logging import JSONFormatter


class TestJSONFormatter(unittest.TestCase):

    def _record(self, **extra):
        record = logging.LogRecord(
            name='authcore.services.auth_service',
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg='User registered',
            args=(),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_formats_as_json(self):
        data = json.loads(JSONFormatter().format(self._record()))

        self.assertEqual(data['level'], 'INFO')
        self.assertEqual(data['logger'], 'authcore.services.auth_service')
        self.assertEqual(data['message'], 'User registered')
        self.assertTrue(data['timestamp'].endswith('Z'))

    def test_includes_extra_fields(self):
        data = json.loads(JSONFormatter().format(self._record(userId='user-123')))
        self.assertEqual(data['userId'], 'user-123')

    def test_non_serializable_extra_is_stringified(self):
        data = json.loads(JSONFormatter().format(self._record(error=ValueError('boom'))))
        self.assertEqual(data['error'], 'boom')
