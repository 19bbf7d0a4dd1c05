# catalog/api/db/models.py
from mongoengine import Document, IntField, ListField, ReferenceField, StringField


class Author(Document):
    name = StringField(required=True, unique=True, min_length=1)
    born = IntField()

    meta = {"collection": "authors"}


class Book(Document):
    title = StringField(required=True, min_length=1)
    published = IntField(required=True)
    author = ReferenceField(Author, required=True)
    genres = ListField(StringField())

    meta = {"collection": "books", "indexes": ["author", "genres"]}


class User(Document):
    username = StringField(required=True, unique=True, min_length=3)
    favourite_genre = StringField(db_field="favouriteGenre", required=True, min_length=3)

    meta = {"collection": "users"}
