from flask import Flask, request, jsonify
from flask_cors import CORS
from ariadne import make_executable_schema, graphql_sync
from ariadne.explorer import ExplorerGraphiQL

from . import settings
from .schema import type_defs
from .routes import bindables
from .context import build_context
from .pubsub import EventNotifier

executable_schema = make_executable_schema(type_defs, *bindables)


def create_app(repository=None, notifier=None, debug=None):
    if repository is None:
        from .db.mongo import connect_db
        from .db.repository import CatalogRepository
        connect_db()
        repository = CatalogRepository()
    notifier = notifier or EventNotifier()
    debug = settings.DEBUG if debug is None else debug

    app = Flask(__name__)
    CORS(app)
    app.config["REPOSITORY"] = repository
    app.config["NOTIFIER"] = notifier
    app.config["GRAPHQL_DEBUG"] = debug

    @app.route("/graphql", methods=["GET"])
    def graphql_playground():
        return ExplorerGraphiQL().html(None), 200

    @app.route("/graphql", methods=["POST"])
    def graphql_server():
        data = request.get_json()
        context = build_context(
            request.headers.get("Authorization"),
            repository,
            notifier=notifier,
            request=request,
        )

        success, result = graphql_sync(
            executable_schema,
            data,
            context_value=context,
            debug=app.config["GRAPHQL_DEBUG"],
        )
        status_code = 200 if success else 400
        return jsonify(result), status_code

    return app
