"""Filtered, sorted and paginated list views."""


def add_leads(client, lead_payload, count):
    for index in range(count):
        client.post("/api/leads", json={**lead_payload, "name": f"Lead {index:02d}", "status": "Hot" if index % 2 else "New"})


def test_empty_list_has_placeholder(client):
    body = client.get("/api/views/leads").json()
    assert body == {"items": [], "page": 1, "pageCount": 1, "pageSize": 10, "total": 0, "placeholder": "No leads found."}


def test_pages(client, lead_payload):
    add_leads(client, lead_payload, 12)

    first = client.get("/api/views/leads").json()
    second = client.get("/api/views/leads", params={"page": 2}).json()

    assert (first["total"], first["pageCount"], len(first["items"])) == (12, 2, 10)
    assert len(second["items"]) == 2
    assert first["items"][0]["name"] == "Lead 11"
    assert first["placeholder"] is None


def test_out_of_range_page_is_clamped(client, lead_payload):
    add_leads(client, lead_payload, 3)
    assert client.get("/api/views/leads", params={"page": 9}).json()["page"] == 1
    assert client.get("/api/views/leads", params={"page": 0}).json()["page"] == 1


def test_search_status_and_sort(client, lead_payload):
    add_leads(client, lead_payload, 4)

    searched = client.get("/api/views/leads", params={"q": "lead 02"}).json()
    assert [lead["name"] for lead in searched["items"]] == ["Lead 02"]

    hot = client.get("/api/views/leads", params={"status": "Hot", "sortBy": "name", "order": "asc"}).json()
    assert [lead["name"] for lead in hot["items"]] == ["Lead 01", "Lead 03"]

    everything = client.get("/api/views/leads", params={"status": "all"}).json()
    assert everything["total"] == 4


def test_date_range_includes_the_end_day(client, lead_payload):
    add_leads(client, lead_payload, 2)
    today = client.get("/api/leads").json()[0]["createdAt"][:10]

    in_range = client.get("/api/views/leads", params={"start": today, "end": today}).json()
    before = client.get("/api/views/leads", params={"end": "2000-01-01"}).json()

    assert in_range["total"] == 2
    assert before["total"] == 0
    assert before["placeholder"] == "No leads found."


def test_page_size(client, lead_payload):
    add_leads(client, lead_payload, 5)
    body = client.get("/api/views/leads", params={"pageSize": 2, "page": 3}).json()
    assert (body["pageCount"], body["page"], len(body["items"])) == (3, 3, 1)


def test_unknown_list(client):
    assert client.get("/api/views/invoices").status_code == 404
