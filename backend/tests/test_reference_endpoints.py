def test_categories(client):
    res = client.get("/api/v1/categories/")
    assert res.status_code == 200
    assert [c["name"] for c in res.json()] == ["Singers", "Dancers", "Speakers", "DJs"]
    assert res.headers["Cache-Control"] == "public, max-age=3600"


def test_fee_ranges(client):
    res = client.get("/api/v1/reference/fee-ranges")
    assert res.json() == ["$100-$300", "$300-$600", "$600-$1000", "$1000-$2000", "$2000+"]


def test_locations_and_languages(client):
    assert len(client.get("/api/v1/reference/locations").json()) == 8
    languages = client.get("/api/v1/reference/languages").json()
    assert languages[0] == "English"
    assert len(languages) == 12
