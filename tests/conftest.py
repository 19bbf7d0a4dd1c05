import mongomock
import pytest
from ariadne import graphql_sync
from mongoengine import connect, disconnect

from catalog.api import create_app, executable_schema
from catalog.api.auth.token import sign_token
from catalog.api.context import build_context
from catalog.api.db.repository import CatalogRepository
from catalog.api.pubsub import EventNotifier


@pytest.fixture
def repository():
    connect("library_test", host="mongodb://localhost", mongo_client_class=mongomock.MongoClient)
    repo = CatalogRepository()
    repo.ensure_indexes()
    yield repo
    for document in CatalogRepository.documents:
        document.drop_collection()
    disconnect()


@pytest.fixture
def notifier():
    return EventNotifier()


@pytest.fixture
def user(repository):
    return repository.insert_user("ada", "fantasy")


@pytest.fixture
def token(user):
    return sign_token({"username": user.username, "id": str(user.id)})


@pytest.fixture
def execute(repository, notifier):
    """Run an operation through the executable schema with a context built from a header."""

    def _execute(query, variables=None, auth_header=None):
        context = build_context(auth_header, repository, notifier=notifier)
        _, result = graphql_sync(
            executable_schema,
            {"query": query, "variables": variables or {}},
            context_value=context,
        )
        return result

    return _execute


@pytest.fixture
def client(repository, notifier):
    app = create_app(repository=repository, notifier=notifier)
    app.config["TESTING"] = True
    return app.test_client()
