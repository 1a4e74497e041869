# bookstore/models.py
from sqlalchemy import Column, Integer, String, Text, Numeric, Date, ForeignKey
from .database import Base


class Author(Base):
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    bio = Column(Text, nullable=True)


class Book(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    isbn = Column(String(20), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    # Цена всегда хранится с двумя знаками после запятой
    price = Column(Numeric(10, 2), nullable=False)
    author_id = Column(Integer, ForeignKey("authors.id"), nullable=False, index=True)
    published_date = Column(Date, nullable=False)

