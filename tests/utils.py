"""
Helper functions to make writing unit tests for the Speedboat API easier
"""

import os
import sys
import random
import string
import secrets
import unittest
from typing import Iterable, List, Mapping, Optional, Tuple, Type, Union

import pydantic
import sqlalchemy.orm
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine as _Engine

from speedboat_api import settings as _settings
from speedboat_api.api.api import create_app
from speedboat_api.persistence import database, models
from speedboat_api.schemas import config as _config

from . import conf


class BaseTest(unittest.TestCase):
    """
    A base class for unit tests which introduces simple setup and teardown of unit tests

    If a subclass needs special setup or teardown functionality, it **MUST**
    call the superclasses setup and teardown methods: the superclass setup
    method at the beginning of the subclass setup method, the superclass
    teardown method at the end of the subclass teardown method.
    """

    config_file: Optional[str] = None
    database_url: Optional[str] = None
    _database_file: Optional[str] = None

    def setUp(self) -> None:
        self.config_file = f"config_{os.getpid()}_{secrets.token_hex(8)}.json"
        _settings.CONFIG_PATHS = [self.config_file]

        if conf.DATABASE_URL is not None:
            self.database_url = conf.DATABASE_URL

        else:
            self._database_file = conf.DATABASE_DEFAULT_FILE_FORMAT.format(
                os.getpid(),
                "".join([random.choice(string.ascii_lowercase) for _ in range(6)])
            )

            try:
                open(self._database_file, "wb").close()
                os.remove(self._database_file)
                self.database_url = conf.DATABASE_URL_FORMAT.format(self._database_file)

            except OSError as exc:
                self.database_url = conf.DATABASE_FALLBACK_URL
                self._database_file = None
                print(
                    f"{exc}: Falling back to in-memory database. This is not recommended!",
                    file=sys.stderr
                )

    def tearDown(self) -> None:
        if self.database_url != conf.DATABASE_FALLBACK_URL and self._database_file:
            if os.path.exists(self._database_file):
                os.remove(self._database_file)

        if self.config_file and os.path.exists(self.config_file):
            os.remove(self.config_file)

    def get_engine(self) -> _Engine:
        opts = {"echo": conf.SQLALCHEMY_ECHOING}
        if self.database_url.startswith("sqlite:"):
            opts["connect_args"] = {"check_same_thread": False}
        return sqlalchemy.create_engine(self.database_url, **opts)


class BasePersistenceTests(BaseTest):
    engine: _Engine
    session: sqlalchemy.orm.Session

    def setUp(self) -> None:
        super().setUp()
        self.engine = self.get_engine()
        self.session = sqlalchemy.orm.sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )()
        models.Base.metadata.create_all(bind=self.engine)

    def tearDown(self) -> None:
        self.session.close()
        self.engine.dispose()
        super().tearDown()

    @staticmethod
    def get_sample_speedboats() -> List[models.Speedboat]:
        return [
            models.Speedboat(brand="yamaha", model_number="S100", wholesale_price=7500.0, retail_price=9999.99),
            models.Speedboat(brand="yamaha", model_number="S200", in_stock=True),
            models.Speedboat(brand="bayliner", model_number="VR5", image_url="https://example.com/vr5.png"),
            models.Speedboat(model_number="X1", in_stock=False),
            models.Speedboat(brand="sea ray", model_number="SPX 190", retail_price=38000.0)
        ]


class BaseAPITests(BaseTest):
    app = None
    client: Optional[TestClient] = None

    def setUp(self) -> None:
        super().setUp()
        database.PRINT_SQLITE_WARNING = False
        settings = _settings.Settings(
            database=_config.DatabaseConfig(connection=self.database_url, debug_sql=conf.SQLALCHEMY_ECHOING)
        )
        self.app = create_app(settings=settings, configure_logging=False)
        self.client = TestClient(self.app, raise_server_exceptions=False)

    def tearDown(self) -> None:
        self.client.close()
        database.get_engine().dispose()
        super().tearDown()

    def assertQuery(
            self,
            endpoint: Tuple[str, str],
            status_code: Union[int, Iterable[int]] = 200,
            json: Optional[Union[dict, list]] = None,
            headers: Optional[dict] = None,
            r_none: bool = False,
            r_is_json: bool = True,
            r_headers: Optional[Union[Mapping, Iterable]] = None,
            r_schema: Optional[Union[pydantic.BaseModel, Type[pydantic.BaseModel]]] = None,
            **kwargs
    ):
        """
        Do a query to the specified endpoint and return the response

        Besides also carrying the optional JSON data, headers and other keyword arguments,
        this function asserts that the response has the specified status code. Furthermore,
        the optional asserted response headers and asserted response schema can be used,
        where the headers are either an iterable to only assert certain keys or a mapping
        to also assert values, and the schema is either a schema class or an instance
        thereof (in the later case, the values will be compared to the response, too).

        :param endpoint: tuple of the method and the path (or full URL) of the endpoint
        :param status_code: asserted status code(s) of the final server's response
        :param json: optional dictionary holding the request data
        :param headers: optional set of headers to sent in the request
        :param r_none: switch to expect no (=empty) result and skip all other response content checks
        :param r_is_json: switch to check that the response contains JSON data
        :param r_headers: optional set of headers which are asserted in the response
        :param r_schema: optional class or instance of a response schema to be asserted
        :param kwargs: dict of any further keyword arguments, passed to ``TestClient.request``
        :return: response to the requested resource
        """

        method, path = endpoint
        headers = headers or {}
        headers.setdefault("Accept", "application/json")
        response = self.client.request(method.upper(), path, json=json, headers=headers, **kwargs)

        if isinstance(status_code, int):
            self.assertEqual(status_code, response.status_code, response.text)
        elif isinstance(status_code, Iterable):
            self.assertTrue(
                response.status_code in status_code,
                (response.text, response.status_code, status_code)
            )

        if r_headers is not None:
            for k in (r_headers if isinstance(r_headers, Iterable) else r_headers.keys()):
                self.assertIsNotNone(response.headers.get(k), response.headers)
                if isinstance(r_headers, Mapping):
                    self.assertEqual(r_headers[k], response.headers.get(k), response.headers)

        if r_none:
            self.assertEqual("", response.text)

        else:
            if r_is_json:
                try:
                    self.assertIsNotNone(response.json())
                except ValueError:
                    self.fail(("No JSON content detected", response.headers, response.text))

            if r_schema and isinstance(r_schema, pydantic.BaseModel):
                self.assertEqual(r_schema, type(r_schema)(**response.json()), response.json())
            elif r_schema and isinstance(r_schema, type) and issubclass(r_schema, pydantic.BaseModel):
                self.assertTrue(r_schema(**response.json()), response.json())

        return response

    def get_db_session(self) -> sqlalchemy.orm.Session:
        return sqlalchemy.orm.sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.get_engine()
        )()
