#!/usr/bin/env python3

import os
import sys
import json
import argparse
import logging.config
from typing import List, Optional

import uvicorn

from speedboat_api import settings as _settings
from speedboat_api.api.api import create_app
from speedboat_api.persistence import database, migrations, models


def get_parser(program: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=program)

    commands = parser.add_subparsers(
        description="Available sub-commands: init, speedboats*, run, auto",
        dest="command",
        required=True,
        metavar="<command>",
        help="the sub-command to be executed (some have their own subcommands, too)"
    )

    parser_init = commands.add_parser(
        "init",
        description="Initialize the project by creating the config file and the database schema"
    )

    parser_speedboats = commands.add_parser(
        "speedboats",
        description="Inspect stored speedboats"
    )
    speedboat_command = parser_speedboats.add_subparsers(
        description="Available actions: show",
        dest="action",
        metavar="<action>",
        required=True,
        help="action to perform for speedboats"
    )
    parser_speedboats_show = speedboat_command.add_parser(
        "show",
        description="Show a list of all speedboats"
    )

    parser_run = commands.add_parser(
        "run",
        description="Run 'uvicorn' ASGI server to serve the Speedboat REST API"
    )

    parser_init.add_argument(
        "--database",
        type=str,
        metavar="url",
        help="Database connection URL including scheme and auth"
    )
    parser_init.add_argument(
        "--no-migrations",
        action="store_true",
        help="Do not apply migrations automatically (not recommended)"
    )

    parser_speedboats_show.add_argument(
        "--json",
        action="store_true",
        help="Print the result in JSON format instead of human-readable text"
    )
    parser_speedboats_show.add_argument(
        "--indent",
        type=int,
        metavar="n",
        help="(JSON-only) Indent the JSON response with n spaces (default: none)"
    )

    parser_run.add_argument(
        "--host",
        type=str,
        metavar="host",
        help="Bind TCP socket to this host (overwrite config)"
    )
    parser_run.add_argument(
        "--port",
        type=int,
        metavar="port",
        help="Bind TCP socket to this port (overwrite config)"
    )
    parser_run.add_argument(
        "--config",
        type=str,
        metavar="config",
        default="config.json",
        help="Overwrite the config file (defaults to 'config.json')"
    )
    parser_run.add_argument(
        "--debug",
        action="store_true",
        help="Enable full debug mode including debug logs (probably insecure)"
    )
    parser_run.add_argument(
        "--debug-sql",
        action="store_true",
        help="Enable echoing of database actions (overwrites config)"
    )
    parser_run.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload"
    )
    parser_run.add_argument(
        "--workers",
        type=int,
        default=None,
        metavar="n",
        help="Number of worker processes (not valid with --reload)",
    )
    parser_run.add_argument(
        "--no-access-log",
        action="store_true",
        help="Disable access logs"
    )
    parser_run.add_argument(
        "--no-migrations",
        action="store_true",
        help="Do not apply migrations before starting the server"
    )
    parser_run.add_argument(
        "--root-path",
        type=str,
        default="",
        metavar="p",
        help="Sub-mount the application below the given path"
    )

    parser_auto = commands.add_parser(
        "auto",
        description="Deploy and start the server in 'auto mode' using environment variables for first configuration"
    )
    parser_auto.add_argument(
        "--host",
        type=str,
        metavar="host",
        help="Bind TCP socket to this host (overwrite config and environment)"
    )
    parser_auto.add_argument(
        "--port",
        type=int,
        metavar="port",
        help="Bind TCP socket to this port (overwrite config and environment)"
    )
    parser_auto.add_argument(
        "--debug-sql",
        action="store_true",
        help="Enable echoing of database actions (overwrite config and environment)"
    )
    parser_auto.add_argument(
        "--root-path",
        type=str,
        default="",
        metavar="p",
        help="Sub-mount the application below the given path"
    )

    return parser


def _serve(
        settings: _settings.Settings,
        host: str,
        port: int,
        migrate: bool,
        import_string: Optional[str] = None,
        **uvicorn_options
) -> int:
    logging.config.dictConfig(settings.logging.model_dump())
    if migrate:
        migrations.upgrade(settings.database.connection)
    else:
        print("Skipping database migrations. Ensure that the schema is up to date!", file=sys.stderr)

    # the schema is owned by alembic, so the app must never create tables itself
    app = create_app(settings=settings, configure_logging=False, create_tables=False)
    logging.getLogger("speedboat_api").info(f"Serving speedboats at host {host} port {port}")
    uvicorn.run(
        import_string or app,
        host=host,
        port=port,
        log_config=settings.logging.model_dump(),
        proxy_headers=True,
        **uvicorn_options
    )
    return 0


def run_server(args: argparse.Namespace) -> int:
    if args.debug:
        print("The debug mode is not suited for production deployments!", file=sys.stderr)

    _settings.CONFIG_PATHS.insert(0, args.config)
    try:
        settings = _settings.Settings()
    except ValueError:
        print(f"The configuration in {args.config!r} is invalid, please fix it first.", file=sys.stderr)
        raise

    if args.debug:
        settings.logging.root["level"] = "DEBUG"
        for handler in settings.logging.handlers.values():
            handler["level"] = "DEBUG"
    settings.database.debug_sql = settings.database.debug_sql or args.debug_sql

    return _serve(
        settings,
        settings.server.host if args.host is None else args.host,
        settings.server.port if args.port is None else args.port,
        not args.no_migrations,
        "speedboat_api.api.api:api.app" if args.reload else None,
        reload=args.reload,
        workers=args.workers,
        log_level="debug" if args.debug else "info",
        access_log=not args.no_access_log,
        root_path=args.root_path
    )


def init_project(args: argparse.Namespace) -> int:
    path = _settings.find_config_file()
    if path is not None:
        print(f"Using the existing config file {path!r}. Remove it and clear the database for a fresh setup.")
    else:
        conf = _settings.get_default_core_config(_settings.get_db_from_env(args.database))
        path = os.path.abspath(_settings.CONFIG_PATHS[0])
        _settings.store_configuration(conf, path)
        print(f"Created a new config file {path!r}.")

    if not args.no_migrations:
        migrations.upgrade(_settings.Settings().database.connection)
    print("Done.")
    return 0


def print_table(rows: List[dict], columns: List[str]):
    widths = {c: max([len(c)] + [len(str(row.get(c))) for row in rows]) for c in columns}
    print(" | ".join(f"{c:<{widths[c]}}" for c in columns))
    print("-+-".join("-" * widths[c] for c in columns))
    for row in rows:
        print(" | ".join(f"{row.get(c)!s:<{widths[c]}}" for c in columns))


def show_speedboats(args: argparse.Namespace) -> int:
    config = _settings.Settings()
    database.PRINT_SQLITE_WARNING = False
    database.init(config.database.connection, config.database.debug_sql, create_all=False)
    with database.get_new_session() as session:
        rows = [
            boat.schema.model_dump()
            for boat in session.query(models.Speedboat).order_by(models.Speedboat.id).all()
        ]

    if args.json:
        print(json.dumps(rows, indent=args.indent))
    else:
        print_table(rows, ["id", "brand", "model_number", "wholesale_price", "retail_price", "in_stock"])
    return 0


def handle_speedboats(args: argparse.Namespace) -> int:
    return {
        "show": show_speedboats
    }[args.action](args)


def run_in_auto_mode(args: argparse.Namespace) -> int:
    db = _settings.get_db_from_env()
    if db is None:
        print(
            "The auto mode requires the database connection URL in the environment "
            "variable 'DATABASE__CONNECTION' or 'DATABASE_CONNECTION'.",
            file=sys.stderr
        )
        return 1

    try:
        settings = _settings.Settings()
    except ValueError as exc:
        print(f"Invalid configuration in auto mode: {exc}", file=sys.stderr)
        return 1
    settings.database.connection = db
    settings.database.debug_sql = settings.database.debug_sql or args.debug_sql

    return _serve(
        settings,
        args.host or settings.server.host,
        args.port or settings.server.port,
        True,
        workers=1,
        root_path=args.root_path
    )


if __name__ == '__main__':
    program_name = sys.argv[0] if not sys.argv[0].endswith("__main__.py") else "speedboat_api"
    namespace = get_parser(program_name).parse_args(sys.argv[1:])

    command_functions = {
        "run": run_server,
        "init": init_project,
        "speedboats": handle_speedboats,
        "auto": run_in_auto_mode
    }
    sys.exit(command_functions[namespace.command](namespace))
