import pytest

from marketplace.errors import StorageError
from marketplace.storage import MemoryStore, SqlStore


def _quote(job_request_id, provider_id="p-1", created_at="2026-03-01T09:00:00.000000Z", status="pending"):
    return {
        "job_request_id": job_request_id,
        "provider_id": provider_id,
        "amount": "₹1,000",
        "timeline": "1 week",
        "comments": "ok",
        "status": status,
        "created_at": created_at,
    }


def _provider(user_id):
    return {
        "id": user_id,
        "user_id": user_id,
        "company_name": "Acme Labour",
        "contact_person": "A. Person",
        "phone": "123",
        "email": "acme@example.com",
        "address": "Somewhere",
        "specialization": ["welder"],
        "years_in_business": 2,
        "description": "Welders",
        "created_at": "2026-03-01T09:00:00.000000Z",
    }


def _job(created_at="2026-03-01T09:00:00.000000Z", user_id="u-1", title="Welders"):
    return {
        "title": title,
        "location": "Pune",
        "job_type": "contract",
        "workers": 2,
        "duration": "1 month",
        "description": "Need welders",
        "contact_info": "me@example.com",
        "user_id": user_id,
        "created_at": created_at,
    }


class TestStoreContract:
    def test_insert_assigns_increasing_ids(self, store):
        first = store.insert("job_requests", _job())
        second = store.insert("job_requests", _job())
        assert isinstance(first["id"], int)
        assert second["id"] > first["id"]

    def test_insert_keeps_supplied_id(self, store):
        row = store.insert("providers", _provider("user-7"))
        assert row["id"] == "user-7"
        assert row["specialization"] == ["welder"]

    def test_select_one_and_missing(self, store):
        row = store.insert("job_requests", _job(title="Fitters"))
        assert store.select_one("job_requests", {"id": row["id"]})["title"] == "Fitters"
        assert store.select_one("job_requests", {"id": row["id"] + 100}) is None

    def test_select_all_filters_by_equality(self, store):
        store.insert("job_requests", _job(user_id="a"))
        store.insert("job_requests", _job(user_id="b"))
        store.insert("job_requests", _job(user_id="a"))
        rows = store.select_all("job_requests", {"user_id": "a"})
        assert len(rows) == 2
        assert {r["user_id"] for r in rows} == {"a"}

    def test_select_all_orders_descending_with_id_tiebreak(self, store):
        a = store.insert("job_requests", _job(created_at="2026-03-01T09:00:00.000000Z"))
        b = store.insert("job_requests", _job(created_at="2026-03-02T09:00:00.000000Z"))
        c = store.insert("job_requests", _job(created_at="2026-03-02T09:00:00.000000Z"))
        rows = store.select_all("job_requests", order_by="created_at")
        assert [r["id"] for r in rows] == [c["id"], b["id"], a["id"]]

        rows = store.select_all("job_requests", order_by="created_at", descending=False)
        assert [r["id"] for r in rows] == [a["id"], b["id"], c["id"]]

    def test_update_applies_patch(self, store):
        store.insert("providers", _provider("user-1"))
        row = store.update("providers", {"id": "user-1"}, {"phone": "999"})
        assert row["phone"] == "999"
        assert store.select_one("providers", {"id": "user-1"})["phone"] == "999"

    def test_update_missing_returns_none(self, store):
        assert store.update("providers", {"id": "nobody"}, {"phone": "999"}) is None

    def test_count(self, store):
        job = store.insert("job_requests", _job())
        store.insert("providers", _provider("p-1"))
        store.insert("quotes", _quote(job["id"]))
        store.insert("quotes", _quote(job["id"], status="accepted"))
        assert store.count("quotes") == 2
        assert store.count("quotes", {"job_request_id": job["id"], "status": "accepted"}) == 1
        assert store.count("quotes", {"job_request_id": job["id"] + 1}) == 0

    def test_unknown_table(self, store):
        with pytest.raises(StorageError):
            store.select_all("invoices")

    def test_duplicate_primary_key_is_storage_error(self, store):
        store.insert("providers", _provider("user-1"))
        with pytest.raises(StorageError):
            store.insert("providers", _provider("user-1"))
        # The store stays usable afterwards
        assert store.count("providers") == 1


class TestMemoryStore:
    def test_returned_rows_are_copies(self):
        store = MemoryStore()
        row = store.insert("providers", _provider("user-1"))
        row["specialization"].append("fitter")
        fetched = store.select_one("providers", {"id": "user-1"})
        assert fetched["specialization"] == ["welder"]


class TestSqlStore:
    def test_foreign_keys_enforced(self, session_factory):
        db = session_factory()
        try:
            store = SqlStore(db)
            with pytest.raises(StorageError):
                store.insert("quotes", _quote(job_request_id=999, provider_id="ghost"))
            assert store.count("quotes") == 0
        finally:
            db.close()
