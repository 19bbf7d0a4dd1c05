# catalog/api/db/repository.py
"""
CatalogRepository: the persistence interface handed to resolvers through the
request context. Field rules (required, min_length, unique) live on the
mongoengine documents in models.py; save() raises mongoengine's ValidationError
or NotUniqueError when they are violated.
"""
from __future__ import annotations
from typing import List, Optional

from mongoengine import NotUniqueError, ValidationError
from pymongo.errors import PyMongoError

from catalog.api.db.models import Author, Book, User
from catalog.api.utils.logger import write_log


class CatalogRepository:
    documents = (Author, Book, User)

    def ensure_indexes(self) -> bool:
        try:
            for document in self.documents:
                document.ensure_indexes()
        except PyMongoError as e:
            write_log({"event": "indexes_error", "error": str(e)}, stream="system")
            return False
        return True

    # ---------- counts ----------
    def count_books(self) -> int:
        return Book.objects.count()

    def count_authors(self) -> int:
        return Author.objects.count()

    def count_books_by_author(self, author: Author) -> int:
        return Book.objects(author=author).count()

    # ---------- authors ----------
    def list_authors(self) -> List[Author]:
        return list(Author.objects)

    def find_author_by_id(self, author_id) -> Optional[Author]:
        try:
            return Author.objects(pk=author_id).first()
        except ValidationError:
            return None

    def find_author_by_name(self, name: str) -> Optional[Author]:
        return Author.objects(name=name).first()

    def author_of(self, book: Book) -> Optional[Author]:
        # read the stored reference without dereferencing, so a dangling one yields None
        author_id = book.to_mongo().get("author")
        if author_id is None:
            return None
        return self.find_author_by_id(author_id)

    def find_or_create_author(self, name: str) -> Author:
        """Atomic find-or-create keyed on the unique author name."""
        Author(name=name).validate()
        try:
            return Author.objects(name=name).modify(upsert=True, new=True, set_on_insert__name=name)
        except NotUniqueError:
            # lost an upsert race against the unique index; the winner's document exists now
            return Author.objects(name=name).first()

    def set_author_born(self, name: str, born: int) -> Optional[Author]:
        return Author.objects(name=name).modify(new=True, set__born=born)

    # ---------- books ----------
    def list_books(self, genre: Optional[str] = None) -> List[Book]:
        if genre:
            return list(Book.objects(genres=genre))
        return list(Book.objects)

    def insert_book(self, title: str, published: int, author: Author, genres: List[str]) -> Book:
        return Book(title=title, published=published, author=author, genres=list(genres)).save()

    # ---------- users ----------
    def find_user_by_id(self, user_id) -> Optional[User]:
        try:
            return User.objects(pk=user_id).first()
        except ValidationError:
            return None

    def find_user_by_username(self, username: str) -> Optional[User]:
        return User.objects(username=username).first()

    def insert_user(self, username: str, favourite_genre: str) -> User:
        return User(username=username, favourite_genre=favourite_genre).save()
