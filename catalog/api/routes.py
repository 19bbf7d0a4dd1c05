from ariadne import QueryType, MutationType, SubscriptionType, ObjectType

from catalog.api.handlers import auth_handlers, catalog_handlers, subscription_handlers

query = QueryType()
mutation = MutationType()
subscription = SubscriptionType()
book = ObjectType("Book")
author = ObjectType("Author")
user = ObjectType("User")

query.set_field("bookCount", catalog_handlers.resolve_book_count)
query.set_field("authorCount", catalog_handlers.resolve_author_count)
query.set_field("allBooks", catalog_handlers.resolve_all_books)
query.set_field("allAuthors", catalog_handlers.resolve_all_authors)
query.set_field("me", auth_handlers.resolve_me)

book.set_field("author", catalog_handlers.resolve_book_author)
author.set_field("bookCount", catalog_handlers.resolve_author_book_count)
user.set_alias("favouriteGenre", "favourite_genre")

mutation.set_field("addBook", catalog_handlers.resolve_add_book)
mutation.set_field("editAuthor", catalog_handlers.resolve_edit_author)
mutation.set_field("createUser", auth_handlers.resolve_create_user)
mutation.set_field("login", auth_handlers.resolve_login)

subscription.set_source("bookAdded", subscription_handlers.book_added_source)
subscription.set_field("bookAdded", subscription_handlers.resolve_book_added)

bindables = [query, mutation, subscription, book, author, user]
