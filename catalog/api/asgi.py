# catalog/api/asgi.py
"""
ASGI entrypoint serving queries, mutations and the bookAdded subscription
(graphql-ws over websockets). Run with:
    uvicorn --factory catalog.api.asgi:create_asgi_app
"""
from ariadne.asgi import GraphQL
from ariadne.asgi.handlers import GraphQLWSHandler

from catalog.api import executable_schema, settings
from catalog.api.context import build_context
from catalog.api.pubsub import EventNotifier


def create_asgi_app(repository=None, notifier=None, debug=None):
    if repository is None:
        from catalog.api.db.mongo import connect_db
        from catalog.api.db.repository import CatalogRepository
        connect_db()
        repository = CatalogRepository()
    notifier = notifier or EventNotifier()

    def get_context_value(request, _data=None):
        return build_context(
            request.headers.get("authorization"),
            repository,
            notifier=notifier,
            request=request,
        )

    return GraphQL(
        executable_schema,
        context_value=get_context_value,
        websocket_handler=GraphQLWSHandler(),
        debug=settings.DEBUG if debug is None else debug,
    )
