import argparse

from catalog.api import create_app, settings
from catalog.api.db.mongo import check_connection, connect_db
from catalog.api.db.repository import CatalogRepository


def main(argv=None):
    parser = argparse.ArgumentParser(description="Launch the library catalog GraphQL server")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=4000, help="Port to run the server on")
    parser.add_argument("--asgi", action="store_true", help="Serve the ASGI app (enables subscriptions)")
    parser.add_argument("--no-debug", action="store_true", help="Disable debug mode")
    args = parser.parse_args(argv)

    debug = settings.DEBUG and not args.no_debug
    # the ASGI factory reads settings when uvicorn calls it
    settings.DEBUG = debug

    connect_db()
    repository = CatalogRepository()
    # a missing database is logged, not fatal
    if check_connection():
        repository.ensure_indexes()

    if args.asgi:
        import uvicorn
        uvicorn.run("catalog.api.asgi:create_asgi_app", factory=True, host=args.host, port=args.port)
        return

    app = create_app(repository=repository, debug=debug)
    app.run(host=args.host, port=args.port, debug=debug)


if __name__ == "__main__":
    main()
