from bindery.models.author import Author
from bindery.models.book import Book

__all__ = ["Author", "Book"]
