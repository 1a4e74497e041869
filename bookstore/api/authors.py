# bookstore/api/authors.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from .. import converters, schemas
from ..crud import Queries, get_queries
from ..errors import ConversionError
from ..responses import respond

router = APIRouter(prefix="/authors", tags=["✍️ Авторы"])


@router.get(
    "",
    summary="Получить всех авторов",
    description="""
    Возвращает список всех авторов.

    **Ответ:** `{"authors": [...]}`.
    """
)
async def list_authors(queries: Queries = Depends(get_queries)):
    try:
        authors = await queries.list_authors()
    except SQLAlchemyError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed fetching list of authors",
        )
    return respond(
        status.HTTP_200_OK,
        {"authors": [schemas.AuthorResponse.model_validate(author) for author in authors]},
    )


@router.get(
    "/{author_id}/stats",
    summary="Статистика автора",
    description="""
    Возвращает сводку по книгам автора: количество, среднюю цену,
    даты первой и последней публикации.

    **Параметры пути:**
    - `author_id`: уникальный идентификатор автора (целое число)

    **Важно:** отсутствие автора не отличается от прочих ошибок и возвращает `500`.
    """
)
async def get_author_stats(author_id: str, queries: Queries = Depends(get_queries)):
    try:
        id_ = converters.parse_id(author_id)
    except ConversionError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid author ID")
    try:
        stats = await queries.get_author_stats(id_)
    except SQLAlchemyError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
    return respond(status.HTTP_200_OK, {"stats": schemas.AuthorStatsResponse.model_validate(stats)})
