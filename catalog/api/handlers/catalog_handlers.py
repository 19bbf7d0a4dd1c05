# catalog/api/handlers/catalog_handlers.py
from typing import List, Optional

from mongoengine import NotUniqueError, ValidationError

from catalog.api.errors import InvalidInput
from catalog.api.permissions import require_authenticated, log_mutation
from catalog.api.pubsub import BOOK_ADDED
from catalog.api.utils.logger import write_log


def _repository(info):
    return info.context["repository"]


# ---------- Query ----------
def resolve_book_count(_, info):
    return _repository(info).count_books()


def resolve_author_count(_, info):
    return _repository(info).count_authors()


def resolve_all_books(_, info, author: Optional[str] = None, genre: Optional[str] = None):
    # `author` is part of the schema but does not filter results
    return _repository(info).list_books(genre=genre)


def resolve_all_authors(_, info):
    return _repository(info).list_authors()


# ---------- Book / Author fields ----------
def resolve_book_author(book, info):
    author = _repository(info).author_of(book)
    if author is None:
        write_log({"event": "book_author_missing", "book_id": str(book.id)})
    return author


def resolve_author_book_count(author, info):
    return _repository(info).count_books_by_author(author)


# ---------- Mutation ----------
def resolve_add_book(_, info, title: str, author: str, published: int, genres: List[str]):
    user = require_authenticated(info, "addBook")
    repository = _repository(info)
    args = {"title": title, "author": author, "published": published, "genres": genres}

    # an author created here is kept even if the book insert below fails
    try:
        stored_author = repository.find_or_create_author(author)
        book = repository.insert_book(title, published, stored_author, genres)
    except (ValidationError, NotUniqueError) as e:
        log_mutation(user.username, "addBook", "failed", str(e))
        raise InvalidInput(str(e), invalid_args=args)

    log_mutation(user.username, "addBook", "success")
    notifier = info.context.get("notifier")
    if notifier is not None:
        delivered = notifier.publish(BOOK_ADDED, book)
        write_log({"event": "book_added_published", "book_id": str(book.id), "subscribers": delivered}, stream="pubsub")
    return book


def resolve_edit_author(_, info, name: str, setBornTo: int):
    user = require_authenticated(info, "editAuthor")
    author = _repository(info).set_author_born(name, setBornTo)
    if author is None:
        log_mutation(user.username, "editAuthor", "failed", "author not found")
        return None
    log_mutation(user.username, "editAuthor", "success")
    return author
