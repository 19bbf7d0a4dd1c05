from catalog.api.auth.password import verify_password
from catalog.api.errors import InvalidCredentials
from catalog.api.utils.logger import write_log


def get_user(repository, username: str):
    user = repository.find_user_by_username(username)
    write_log({"event": "user_lookup", "username": username, "found": user is not None}, stream="auth")
    return user


def authenticate(repository, username: str, password: str, verifier=None):
    """Return the user for valid credentials. Unknown user and wrong password fail identically."""
    user = get_user(repository, username)
    if user is None or not verify_password(user, password, verifier):
        raise InvalidCredentials()
    return user
