"""
Application entry point with environment-specific server configuration

Usage:
    python run.py [port] [database_url]
"""
import os
import sys
import logging

from courses_api import create_app
from courses_api.env_config import ENVIRONMENT, HOST, PORT
from courses_api.utils.logger import custom_logger, setup_logging


def parse_args(argv):
    """
    Read the optional positional port and database URL
    @param argv: list - Arguments after the program name
    @returns: tuple - (port, database_url), database_url may be None
    """
    port = PORT
    database_url = None
    if len(argv) > 2:
        raise ValueError("Usage: run.py [port] [database_url]")
    if len(argv) >= 1:
        try:
            port = int(argv[0])
        except ValueError:
            raise ValueError(f"Port must be a number, got {argv[0]!r}")
    if len(argv) == 2:
        database_url = argv[1]
    return port, database_url


@custom_logger.log_function_call
def run_development_server(port=PORT, database_url=None):
    """Run the development server with debug mode, one thread per request"""
    try:
        app = create_app('development', database_url=database_url)
        custom_logger.logger.info(f"Starting development server on {HOST}:{port}...")
        app.run(
            host=HOST,
            port=port,
            debug=True,
            use_reloader=False,
            threaded=True
        )
    except Exception as e:
        custom_logger.logger.error(f"Failed to start development server: {str(e)}")
        sys.exit(1)


def serve_with_gunicorn(app, port):
    """
    Serve an already built app with gunicorn sync workers
    @param app: Flask - Application to serve
    @param port: int - Port to bind on HOST
    """
    from gunicorn.app.base import BaseApplication

    class CoursesApplication(BaseApplication):
        def load_config(self):
            self.cfg.set("bind", f"{HOST}:{port}")
            self.cfg.set("workers", int(os.getenv("WEB_CONCURRENCY", "2")))
            self.cfg.set("worker_class", "sync")

        def load(self):
            return app

    CoursesApplication().run()


@custom_logger.log_function_call
def run_production_server(port=PORT, database_url=None):
    """Run the production server based on the operating system"""
    try:
        app = create_app('production', database_url=database_url)

        if sys.platform == 'win32':
            # Windows: Use waitress
            from waitress import serve
            custom_logger.logger.info("Starting production server with waitress...")
            serve(app, host=HOST, port=port)
        else:
            # Unix/Linux: Use gunicorn
            custom_logger.logger.info("Starting production server with gunicorn...")
            serve_with_gunicorn(app, port)

    except Exception as e:
        custom_logger.logger.error(f"Failed to start production server: {str(e)}")
        sys.exit(1)


def main(argv=None):
    setup_logging(logging.DEBUG if ENVIRONMENT == 'development' else logging.INFO)
    try:
        port, database_url = parse_args(sys.argv[1:] if argv is None else argv)
    except ValueError as e:
        custom_logger.logger.error(str(e))
        sys.exit(2)

    if ENVIRONMENT == 'production':
        run_production_server(port, database_url)
    else:
        run_development_server(port, database_url)


if __name__ == '__main__':
    main()
