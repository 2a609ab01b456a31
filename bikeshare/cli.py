"""
The entry point for the CLI tool
"""
from argparse import ArgumentParser

import uvloop
from aiohttp import web

from bikeshare import config, logger
from bikeshare.app import build_app
from bikeshare.version import __version__, name


def run(args=None):
    """Serves the api, on uvloop."""
    parser = ArgumentParser(prog=name, description="Serves the bike share api.")
    parser.add_argument("--database", default=config.database_uri,
                        help="The database uri, such as sqlite://db.sqlite3 (default: in memory)")
    parser.add_argument("--port", type=int, default=config.port)
    parser.add_argument("--version", action="version", version=f"{name} {__version__}")
    options = parser.parse_args(args)

    logger.info(f'Starting {name} %s!', __version__)
    web.run_app(build_app(options.database), port=options.port, loop=uvloop.new_event_loop())


if __name__ == '__main__':
    run()
