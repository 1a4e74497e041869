"""Authors endpoints: listing and per-author statistics."""

import pytest

from bookstore import models


async def test_list_authors(client, author):
    res = await client.get("/api/v1/authors")
    assert res.status_code == 200
    assert res.json() == {"authors": [{
        "id": author.id,
        "name": "Frank Herbert",
        "bio": "American science fiction author",
    }]}


async def test_list_authors_on_empty_table(client):
    res = await client.get("/api/v1/authors")
    assert res.status_code == 200
    assert res.json() == {"authors": []}


async def test_stats_for_author_without_books(client, author):
    res = await client.get(f"/api/v1/authors/{author.id}/stats")
    assert res.status_code == 200
    assert res.json() == {"stats": {
        "author_id": author.id,
        "name": "Frank Herbert",
        "book_count": 0,
        "average_price": None,
        "first_published": None,
        "last_published": None,
    }}


async def test_stats_aggregate_books(client, author, book_payload):
    for title, isbn, price, published in [
        ("Dune", "9780441013593", 10.0, "1965-08-01"),
        ("Children of Dune", "9780593098240", 20.0, "1976-04-01"),
    ]:
        res = await client.post("/api/v1/books", json={
            **book_payload,
            "title": title,
            "isbn": isbn,
            "price": price,
            "published_date": published,
        })
        assert res.status_code == 200

    res = await client.get(f"/api/v1/authors/{author.id}/stats")

    assert res.status_code == 200
    stats = res.json()["stats"]
    assert stats["book_count"] == 2
    assert stats["average_price"] == "15.00"
    assert stats["first_published"] == "1965-08-01"
    assert stats["last_published"] == "1976-04-01"


async def test_stats_ignore_other_authors_books(client, author, book_payload, test_db):
    other = models.Author(name="Brian Herbert")
    test_db.add(other)
    await test_db.commit()
    await test_db.refresh(other)
    await client.post("/api/v1/books", json=book_payload)

    res = await client.get(f"/api/v1/authors/{other.id}/stats")

    assert res.status_code == 200
    assert res.json()["stats"]["book_count"] == 0


async def test_stats_for_missing_author_is_internal_error(client):
    res = await client.get("/api/v1/authors/999999/stats")
    assert res.status_code == 500
    assert res.json()["message"]


@pytest.mark.parametrize("raw_id", ["abc", "1.0", "-"])
async def test_stats_rejects_malformed_id(client, raw_id):
    res = await client.get(f"/api/v1/authors/{raw_id}/stats")
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid author ID"}
