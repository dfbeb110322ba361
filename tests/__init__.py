"""
Speedboat API unit tests
"""

import unittest
from .test_api import APITests
from .test_cli import ServerCommandTests, StandaloneCLITests
from .test_misc import SettingsTests, ValidationTests
from .test_persistence import DatabaseRestrictionTests, DatabaseUsabilityTests, PersistenceAdapterTests


TEST_CLASSES = [
    APITests,
    DatabaseRestrictionTests,
    DatabaseUsabilityTests,
    PersistenceAdapterTests,
    ServerCommandTests,
    SettingsTests,
    StandaloneCLITests,
    ValidationTests,
]


def get_suite() -> unittest.TestSuite:
    suite = unittest.TestSuite()
    for cls in TEST_CLASSES:
        for fixture in filter(lambda f: f.startswith("test_"), dir(cls)):
            suite.addTest(cls(fixture))
    return suite
