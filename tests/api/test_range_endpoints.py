# tests/api/test_range_endpoints.py

import pytest


# ------------------------------------------------------------
# Health / discovery
# ------------------------------------------------------------
def test_root_and_health(client):
    assert client.get("/").status_code == 200

    body = client.get("/health").json()
    assert body["status"] == "ok"
    assert body["range_kinds"] == 51
    assert body["selector_kinds"] == 18


def test_list_ranges(client):
    body = client.get("/ranges").json()
    assert len(body["ranges"]) == 51
    assert body["ranges"][0]["name"] == "ALL"


def test_list_ranges_without_future_or_past(client):
    response = client.get(
        "/ranges", params={"exclude_future": "true", "exclude_past": "true"}
    )
    names = [item["name"] for item in response.json()["ranges"]]
    assert names == [
        "ALL",
        "CUSTOM",
        "CURRENT_WEEK",
        "CURRENT_MONTH",
        "CURRENT_QUARTER",
        "CURRENT_HALF",
        "CURRENT_YEAR",
    ]


# ------------------------------------------------------------
# POST /ranges/resolve
# ------------------------------------------------------------
@pytest.mark.parametrize(
    "range_kind, reference_date, expected",
    [
        ("CURRENT_QUARTER", "2020-04-01", {"earliest_date": "2020-04-01", "latest_date": "2020-06-30"}),
        ("LAST_DAYS_7", "2020-03-01", {"earliest_date": "2020-02-24", "latest_date": "2020-03-01"}),
        ("NEXT_MONTHS_12", "2020-02-29", {"earliest_date": "2020-02-29", "latest_date": "2021-02-28"}),
        ("ALL", "2020-03-01", {}),
        ("LAST_EON", "2020-03-01", {}),
    ],
)
def test_resolve_named_range(client, range_kind, reference_date, expected):
    response = client.post(
        "/ranges/resolve",
        json={"range_kind": range_kind, "reference_date": reference_date},
    )

    assert response.status_code == 200
    assert response.json() == {"range_kind": range_kind, "range": expected}


def test_resolve_custom_range_swaps_dates(client):
    response = client.post(
        "/ranges/resolve",
        json={
            "range_kind": "CUSTOM",
            "first_date": "2021-02-12",
            "last_date": "2020-01-23",
        },
    )
    assert response.json()["range"] == {
        "earliest_date": "2020-01-23",
        "latest_date": "2021-02-12",
    }


def test_resolve_ad_hoc_single_date(client):
    range_kind = {
        "relation_kind": "PRECEDING",
        "period_kind": "QUARTER",
        "result_kind": "LATEST_ONLY",
    }
    response = client.post(
        "/ranges/resolve",
        json={"range_kind": range_kind, "reference_date": "2021-04-01"},
    )

    assert response.status_code == 200
    assert response.json() == {"range_kind": range_kind, "date": "2021-03-31"}


def test_week_start_option(client):
    response = client.post(
        "/ranges/resolve",
        json={
            "range_kind": "CURRENT_WEEK",
            "reference_date": "2021-07-14",
            "options": {"week_start": 3},
        },
    )
    assert response.json()["range"] == {
        "earliest_date": "2021-07-14",
        "latest_date": "2021-07-20",
    }


def test_server_default_week_start(client, monkeypatch):
    monkeypatch.setattr("API_LAYER.app.DEFAULT_WEEK_START", 1)

    response = client.post(
        "/ranges/resolve",
        json={"range_kind": "CURRENT_WEEK", "reference_date": "2021-07-14"},
    )
    assert response.json()["range"] == {
        "earliest_date": "2021-07-12",
        "latest_date": "2021-07-18",
    }


def test_reference_date_defaults_to_today(client, fixed_today):
    response = client.post("/ranges/resolve", json={"range_kind": "CURRENT_MONTH"})
    assert response.json()["range"] == {
        "earliest_date": "2021-07-01",
        "latest_date": "2021-07-31",
    }


# ------------------------------------------------------------
# GET /periods/{period_kind}
# ------------------------------------------------------------
def test_period_of_reference_date(client):
    response = client.get("/periods/MONTH", params={"reference_date": "2020-02-10"})

    assert response.status_code == 200
    assert response.json() == {
        "period_kind": "MONTH",
        "offset": 0,
        "earliest_date": "2020-02-01",
        "latest_date": "2020-02-29",
    }


def test_period_with_offset_and_keep_dom(client):
    response = client.get(
        "/periods/MONTH",
        params={"reference_date": "2021-07-31", "offset": -3, "keep_dom": "true"},
    )
    assert response.json()["earliest_date"] == "2021-04-30"


def test_unknown_period_kind_is_empty(client):
    response = client.get("/periods/EON", params={"reference_date": "2021-07-14"})

    assert response.status_code == 200
    assert response.json() == {"period_kind": "EON", "offset": 0}
