# bookstore/crud.py
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from fastapi import Depends
from sqlalchemy import delete, func, select
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from . import database, models

CENTS = Decimal("0.01")


@dataclass
class CreateBookParams:
    title: str
    isbn: str
    description: Optional[str]
    price: Decimal
    author_id: int
    published_date: date


@dataclass
class UpdateBookParams:
    id: int
    title: str
    isbn: str
    description: Optional[str]
    price: Optional[Decimal]  # None: оставить текущую цену
    author_id: int
    published_date: date


@dataclass
class AuthorStats:
    author_id: int
    name: str
    book_count: int
    average_price: Optional[Decimal]
    first_published: Optional[date]
    last_published: Optional[date]


class Queries:
    """Typed queries over the authors and books tables.

    Lookups that target a single row raise ``NoResultFound`` when the row
    does not exist; every other database failure propagates unchanged as a
    ``SQLAlchemyError``.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_authors(self):
        result = await self.db.execute(select(models.Author).order_by(models.Author.id))
        return result.scalars().all()

    async def get_author_stats(self, author_id: int) -> AuthorStats:
        query = (
            select(
                models.Author.id,
                models.Author.name,
                func.count(models.Book.id),
                func.avg(models.Book.price),
                func.min(models.Book.published_date),
                func.max(models.Book.published_date),
            )
            .outerjoin(models.Book, models.Book.author_id == models.Author.id)
            .where(models.Author.id == author_id)
            .group_by(models.Author.id, models.Author.name)
        )
        row = (await self.db.execute(query)).one()
        average = row[3]
        if average is not None:
            average = Decimal(str(average)).quantize(CENTS)
        return AuthorStats(
            author_id=row[0],
            name=row[1],
            book_count=row[2],
            average_price=average,
            first_published=row[4],
            last_published=row[5],
        )

    async def list_books(self):
        result = await self.db.execute(select(models.Book).order_by(models.Book.id))
        return result.scalars().all()

    async def create_book(self, params: CreateBookParams) -> models.Book:
        db_book = models.Book(
            title=params.title,
            isbn=params.isbn,
            description=params.description,
            price=params.price,
            author_id=params.author_id,
            published_date=params.published_date,
        )
        self.db.add(db_book)
        await self.db.commit()
        await self.db.refresh(db_book)
        return db_book

    async def get_book(self, book_id: int) -> models.Book:
        result = await self.db.execute(
            select(models.Book).where(models.Book.id == book_id)
        )
        return result.scalar_one()

    async def update_book(self, params: UpdateBookParams) -> models.Book:
        book = await self.get_book(params.id)
        book.title = params.title
        book.isbn = params.isbn
        book.description = params.description
        if params.price is not None:
            book.price = params.price
        book.author_id = params.author_id
        book.published_date = params.published_date
        await self.db.commit()
        await self.db.refresh(book)
        return book

    async def delete_book(self, book_id: int) -> None:
        result = await self.db.execute(
            delete(models.Book).where(models.Book.id == book_id)
        )
        if result.rowcount == 0:
            raise NoResultFound("No row was found when one was required")
        await self.db.commit()


async def get_queries(db: AsyncSession = Depends(database.get_db)) -> Queries:
    return Queries(db)
