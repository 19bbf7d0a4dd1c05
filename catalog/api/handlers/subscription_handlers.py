# catalog/api/handlers/subscription_handlers.py
from catalog.api.pubsub import BOOK_ADDED


async def book_added_source(_, info):
    notifier = info.context["notifier"]
    async for book in notifier.subscribe(BOOK_ADDED):
        yield book


def resolve_book_added(book, info):
    return book
