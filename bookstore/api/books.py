# bookstore/api/books.py
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from .. import converters, schemas
from ..crud import CreateBookParams, Queries, UpdateBookParams, get_queries
from ..errors import ConversionError, ValidationError
from ..responses import BadRequestBody, decode_body, respond

router = APIRouter(prefix="/books", tags=["📚 Книги"])


def parse_book_id(raw: str) -> int:
    try:
        return converters.parse_id(raw)
    except ConversionError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid book ID")


async def read_book_request(request: Request, model):
    """Decode and validate the body of a write request."""
    try:
        book_request = await decode_body(request, model)
    except BadRequestBody:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid request format")
    try:
        book_request.validate_fields()
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return book_request


def convert_book_fields(book_request: schemas.BookRequest) -> dict:
    """Turn wire scalars into the column types the queries expect."""
    price = None
    if book_request.price is not None:
        try:
            price = converters.to_price(book_request.price)
        except ConversionError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to convert price",
            )
    try:
        published_date = converters.to_date(book_request.published_date)
    except ConversionError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid date format")
    return {
        "title": book_request.title,
        "isbn": book_request.isbn,
        "description": converters.optional_text(book_request.description),
        "price": price,
        "author_id": book_request.author_id,
        "published_date": published_date,
    }


def storage_failure(exc: SQLAlchemyError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.get(
    "",
    summary="Получить все книги",
    description="""
    Возвращает список всех книг в каталоге.

    **Ответ:** `{"books": [...]}`. Пустой каталог отдаёт пустой список, а не 404.
    Пагинации нет: каждый вызов возвращает всю таблицу.
    """
)
async def list_books(queries: Queries = Depends(get_queries)):
    try:
        books = await queries.list_books()
    except SQLAlchemyError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed fetching list of books",
        )
    return respond(
        status.HTTP_200_OK,
        {"books": [schemas.BookResponse.model_validate(book) for book in books]},
    )


@router.post(
    "",
    summary="Добавить новую книгу",
    description="""
    Создаёт новую запись о книге.

    **Тело запроса:**
    - `title`: название (обязательно)
    - `isbn`: ISBN (обязательно)
    - `description`: описание (пустая строка означает без описания)
    - `price`: цена, неотрицательное число; хранится с двумя знаками после запятой
    - `author_id`: идентификатор существующего автора
    - `published_date`: дата публикации в формате `YYYY-MM-DD`

    **Ответ:** `200` с `{"message": ..., "book": {...}}`.
    """
)
async def create_book(request: Request, queries: Queries = Depends(get_queries)):
    book_request = await read_book_request(request, schemas.CreateBookRequest)
    params = CreateBookParams(**convert_book_fields(book_request))
    try:
        book = await queries.create_book(params)
    except SQLAlchemyError as exc:
        raise storage_failure(exc)
    return respond(status.HTTP_200_OK, {
        "message": "Book created successfully",
        "book": schemas.BookResponse.model_validate(book),
    })


@router.get(
    "/{book_id}",
    summary="Получить книгу",
    description="""
    Возвращает книгу по её идентификатору.

    **Параметры пути:**
    - `book_id`: уникальный идентификатор книги (целое число)

    Если книги нет, возвращается `404` с `{"message": "Failed to find book"}`.
    """
)
async def get_book(book_id: str, queries: Queries = Depends(get_queries)):
    id_ = parse_book_id(book_id)
    try:
        book = await queries.get_book(id_)
    except NoResultFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Failed to find book")
    except SQLAlchemyError as exc:
        raise storage_failure(exc)
    return respond(status.HTTP_200_OK, {"book": schemas.BookResponse.model_validate(book)})


@router.put(
    "/{book_id}",
    summary="Обновить информацию о книге",
    description="""
    Полностью перезаписывает данные существующей книги.

    **Параметры пути:**
    - `book_id`: уникальный идентификатор книги (целое число)

    **Тело запроса:** как при создании, но `price` может быть `null`,
    тогда цена остаётся прежней.

    Любая ошибка хранилища, включая несуществующий `book_id`, возвращает `500`.
    """
)
async def update_book(book_id: str, request: Request, queries: Queries = Depends(get_queries)):
    id_ = parse_book_id(book_id)
    book_request = await read_book_request(request, schemas.UpdateBookRequest)
    params = UpdateBookParams(id=id_, **convert_book_fields(book_request))
    try:
        book = await queries.update_book(params)
    except SQLAlchemyError as exc:
        raise storage_failure(exc)
    return respond(status.HTTP_200_OK, {
        "message": "Book updated successfully",
        "book": schemas.BookResponse.model_validate(book),
    })


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Удалить книгу",
    description="""
    Удаляет книгу по её уникальному идентификатору.

    **Ответ:** `204` без тела. Повторное удаление возвращает `404`.
    """
)
async def delete_book(book_id: str, queries: Queries = Depends(get_queries)):
    id_ = parse_book_id(book_id)
    try:
        await queries.delete_book(id_)
    except NoResultFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    except SQLAlchemyError as exc:
        raise storage_failure(exc)
    return respond(status.HTTP_204_NO_CONTENT)
