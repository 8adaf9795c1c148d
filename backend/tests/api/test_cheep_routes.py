"""Cheep routes — posting, timelines, removal, page validation."""

from datetime import datetime


async def test_post_cheep_and_read_author_timeline(client, ada):
    res = await client.post("/api/v1/authors/ada/cheeps", json={"text": "  hello  "})
    assert res.status_code == 201
    cheep_id = res.json()["cheep_id"]

    page = (await client.get("/api/v1/authors/ada/cheeps?page=1")).json()
    assert page["page"] == 1
    assert page["page_count"] == 1
    (cheep,) = page["cheeps"]
    assert cheep["cheep_id"] == cheep_id
    assert cheep["author"] == "ada"
    assert cheep["text"] == "hello"
    assert datetime.fromisoformat(cheep["timestamp"]).tzinfo is not None


async def test_post_cheep_for_missing_author_is_404(client):
    res = await client.post("/api/v1/authors/nobody/cheeps", json={"text": "hi"})
    assert res.status_code == 404


async def test_blank_or_long_cheep_is_400(client, ada):
    blank = await client.post("/api/v1/authors/ada/cheeps", json={"text": "   "})
    long = await client.post("/api/v1/authors/ada/cheeps", json={"text": "x" * 161})
    assert blank.status_code == 400
    assert long.status_code == 400


async def test_cheep_length_is_measured_after_stripping(client, ada):
    """Surrounding whitespace does not count toward the 160-character limit."""
    padded = await client.post(
        "/api/v1/authors/ada/cheeps", json={"text": "  " + "x" * 160 + "  "},
    )
    assert padded.status_code == 201

    page = (await client.get("/api/v1/authors/ada/cheeps")).json()
    assert page["cheeps"][0]["text"] == "x" * 160


async def test_page_below_one_is_400(client, ada):
    for url in (
        "/api/v1/cheeps?page=0",
        "/api/v1/authors/ada/cheeps?page=0",
        "/api/v1/authors/ada/timeline?page=-1",
    ):
        res = await client.get(url)
        assert res.status_code == 400, url
        assert res.json()["error"]["category"] == "validation"


async def test_public_timeline_pages(client, ada):
    for i in range(33):
        await client.post("/api/v1/authors/ada/cheeps", json={"text": f"c{i}"})
    first = (await client.get("/api/v1/cheeps")).json()
    second = (await client.get("/api/v1/cheeps?page=2")).json()
    assert first["page_count"] == 2
    assert len(first["cheeps"]) == 32
    assert len(second["cheeps"]) == 1


async def test_followed_timeline(client, ada):
    await client.post("/api/v1/authors", json={"name": "bob", "email": "bob@x.com"})
    await client.post("/api/v1/authors/bob/cheeps", json={"text": "from bob"})
    await client.post("/api/v1/authors/ada/cheeps", json={"text": "from ada"})

    before = (await client.get("/api/v1/authors/ada/timeline")).json()
    assert [c["text"] for c in before["cheeps"]] == ["from ada"]

    await client.post("/api/v1/authors/ada/following", json={"name": "bob"})
    after = (await client.get("/api/v1/authors/ada/timeline")).json()
    assert {c["text"] for c in after["cheeps"]} == {"from ada", "from bob"}


async def test_delete_cheep(client, ada):
    cheep_id = (await client.post(
        "/api/v1/authors/ada/cheeps", json={"text": "oops"},
    )).json()["cheep_id"]
    assert (await client.delete(f"/api/v1/cheeps/{cheep_id}")).status_code == 204
    assert (await client.delete(f"/api/v1/cheeps/{cheep_id}")).status_code == 404
