"""
Speedboat API unit tests for validation and settings
"""

import os
import json
import unittest as _unittest
from unittest import mock

import pydantic

from speedboat_api import settings as _settings
from speedboat_api.misc import validation

from . import utils


class ValidationTests(_unittest.TestCase):
    def test_blank_values(self):
        for value in [None, "", " ", "\t\n"]:
            self.assertTrue(validation.is_blank(value), repr(value))
        for value in ["S100", " x ", 0, 0.0, False, []]:
            self.assertFalse(validation.is_blank(value), repr(value))

    def test_validate_speedboat(self):
        self.assertEqual({}, validation.validate_speedboat({"model_number": "S100"}))
        self.assertEqual({}, validation.validate_speedboat({
            "brand": None,
            "model_number": "S100",
            "image_url": None,
            "wholesale_price": None,
            "retail_price": None,
            "in_stock": None
        }))

        expected = {"model_number": [validation.BLANK_MESSAGE]}
        self.assertEqual(expected, validation.validate_speedboat({}))
        self.assertEqual(expected, validation.validate_speedboat({"brand": "yamaha"}))
        self.assertEqual(expected, validation.validate_speedboat({"model_number": None}))
        self.assertEqual(expected, validation.validate_speedboat({"model_number": "   "}))
        self.assertEqual("can't be blank", validation.BLANK_MESSAGE)

    def test_validate_presence(self):
        self.assertEqual(
            {"a": ["can't be blank"], "c": ["can't be blank"]},
            validation.validate_presence({"a": "", "b": "x"}, ["a", "b", "c"])
        )
        self.assertEqual({}, validation.validate_presence({"a": "", "b": "x"}, []))


class SettingsTests(utils.BaseTest):
    def setUp(self) -> None:
        super().setUp()
        patcher = mock.patch.dict(os.environ)
        patcher.start()
        self.addCleanup(patcher.stop)
        for key in list(os.environ.keys()):
            if key.upper().startswith(("DATABASE", "SERVER", "LOGGING")):
                del os.environ[key]

    def test_defaults_without_config_file(self):
        settings = _settings.Settings()
        self.assertEqual("127.0.0.1", settings.server.host)
        self.assertEqual(8000, settings.server.port)
        self.assertEqual("sqlite://", settings.database.connection)
        self.assertFalse(settings.database.debug_sql)
        self.assertIn("default", settings.logging.handlers)

    def test_config_file(self):
        conf = _settings.get_default_core_config(self.database_url)
        conf.server.port = 9999
        _settings.store_configuration(conf, self.config_file)
        with open(self.config_file) as f:
            self.assertEqual(9999, json.load(f)["server"]["port"])

        settings = _settings.Settings()
        self.assertEqual(9999, settings.server.port)
        self.assertEqual(self.database_url, settings.database.connection)
        self.assertEqual(self.config_file, _settings.find_config_file())

    def test_environment_overrides_config_file(self):
        conf = _settings.get_default_core_config(self.database_url)
        conf.server.port = 9999
        _settings.store_configuration(conf, self.config_file)

        os.environ["SERVER__PORT"] = "8123"
        os.environ["DATABASE__DEBUG_SQL"] = "true"
        settings = _settings.Settings()
        self.assertEqual(8123, settings.server.port)
        self.assertTrue(settings.database.debug_sql)
        self.assertEqual(self.database_url, settings.database.connection)

    def test_database_connection_alias(self):
        os.environ["DATABASE_CONNECTION"] = "sqlite:///foo.db"
        self.assertEqual("sqlite:///foo.db", _settings.Settings().database.connection)
        self.assertEqual("sqlite:///foo.db", _settings.get_db_from_env())
        self.assertEqual("sqlite:///bar.db", _settings.get_db_from_env("sqlite:///bar.db"))

        os.environ["DATABASE__CONNECTION"] = "sqlite:///baz.db"
        self.assertEqual("sqlite:///baz.db", _settings.Settings().database.connection)

    def test_invalid_settings(self):
        os.environ["SERVER__PORT"] = "66666"
        with self.assertRaises(pydantic.ValidationError):
            _settings.Settings()


if __name__ == '__main__':
    _unittest.main()
