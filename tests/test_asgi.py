from ariadne.asgi import GraphQL

from catalog.api.asgi import create_asgi_app


def test_asgi_app_builds_with_injected_repository(repository, notifier):
    app = create_asgi_app(repository=repository, notifier=notifier)

    assert isinstance(app, GraphQL)
