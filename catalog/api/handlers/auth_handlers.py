# catalog/api/handlers/auth_handlers.py
from mongoengine import NotUniqueError, ValidationError

from catalog.api.auth.token import sign_token
from catalog.api.auth.user import authenticate
from catalog.api.errors import InvalidCredentials, InvalidInput
from catalog.api.permissions import current_user, log_mutation
from catalog.api.utils.logger import write_log


# Resolver: me
def resolve_me(_, info):
    return current_user(info)


# Resolver: createUser (open to anonymous callers)
def resolve_create_user(_, info, username: str, favouriteGenre: str):
    repository = info.context["repository"]
    try:
        user = repository.insert_user(username, favouriteGenre)
    except (ValidationError, NotUniqueError) as e:
        log_mutation(username, "createUser", "failed", str(e))
        raise InvalidInput(str(e), invalid_args={"username": username, "favouriteGenre": favouriteGenre})

    log_mutation(user.username, "createUser", "success")
    return user


# Resolver: login
def resolve_login(_, info, username: str, password: str):
    """
    Issue a bearer token. Unknown usernames and wrong passwords produce the same
    error so the response cannot be used to probe for accounts.
    """
    write_log({"event": "login_attempt", "username": username}, stream="auth")
    repository = info.context["repository"]
    verifier = info.context.get("credential_verifier")
    try:
        user = authenticate(repository, username, password, verifier)
    except InvalidCredentials:
        log_mutation(username, "login", "denied", "wrong credentials")
        raise

    log_mutation(user.username, "login", "success")
    return {"value": sign_token({"username": user.username, "id": str(user.id)})}
