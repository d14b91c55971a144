import pytest

from marketplace.errors import Conflict, NotFound, ValidationError

PROVIDER = {
    "user_id": "user-2",
    "company_name": "Smith Industries",
    "contact_person": "Jane Smith",
    "phone": "9876543211",
    "email": "provider@example.com",
    "address": "Industrial Area, Sector 5, Mumbai",
    "specialization": ["welder", "fitter", "electrician"],
    "years_in_business": 8,
    "description": "Industrial labor provider.",
}


class TestCreateProvider:
    def test_id_is_user_id(self, providers):
        provider = providers.create(PROVIDER)
        assert provider.id == "user-2"
        assert provider.user_id == "user-2"
        assert provider.specialization == ["welder", "fitter", "electrician"]
        assert provider.created_at == "2026-03-01T09:00:00.000000Z"

    def test_second_profile_for_same_user_conflicts(self, providers):
        providers.create(PROVIDER)
        with pytest.raises(Conflict):
            providers.create({**PROVIDER, "company_name": "Another Name"})
        assert providers.get_by_id("user-2").company_name == "Smith Industries"

    @pytest.mark.parametrize("field", [
        "company_name", "contact_person", "phone", "email", "address", "description", "user_id",
    ])
    @pytest.mark.parametrize("value", ["", "   "])
    def test_required_fields(self, providers, field, value):
        with pytest.raises(ValidationError):
            providers.create({**PROVIDER, field: value})

    def test_specialization_required(self, providers):
        with pytest.raises(ValidationError):
            providers.create({**PROVIDER, "specialization": []})
        with pytest.raises(ValidationError):
            providers.create({**PROVIDER, "specialization": ["astronaut"]})

    def test_specialization_deduplicated(self, providers):
        provider = providers.create({**PROVIDER, "specialization": ["welder", "fitter", "welder"]})
        assert provider.specialization == ["welder", "fitter"]

    def test_negative_years_rejected(self, providers):
        with pytest.raises(ValidationError):
            providers.create({**PROVIDER, "years_in_business": -1})


class TestReadProvider:
    def test_get_missing(self, providers):
        with pytest.raises(NotFound):
            providers.get_by_id("user-404")

    def test_exists(self, providers):
        assert providers.exists("user-2") is False
        providers.create(PROVIDER)
        assert providers.exists("user-2") is True
        assert providers.exists("user-1") is False

    def test_list(self, providers):
        assert providers.list() == []
        providers.create(PROVIDER)
        providers.create({**PROVIDER, "user_id": "user-3", "company_name": "Patel Staffing"})
        assert {p.company_name for p in providers.list()} == {"Smith Industries", "Patel Staffing"}


class TestUpdateProvider:
    def test_update_is_reflected(self, providers):
        providers.create(PROVIDER)
        updated = providers.update("user-2", {"phone": "1112223333", "years_in_business": 9})
        assert updated.phone == "1112223333"
        assert updated.years_in_business == 9
        fetched = providers.get_by_id("user-2")
        assert fetched.phone == "1112223333"
        assert fetched.company_name == "Smith Industries"

    def test_update_specialization(self, providers):
        providers.create(PROVIDER)
        assert providers.update("user-2", {"specialization": ["plumber"]}).specialization == ["plumber"]

    def test_update_missing(self, providers):
        with pytest.raises(NotFound):
            providers.update("user-404", {"phone": "1"})

    @pytest.mark.parametrize("field", ["id", "user_id"])
    def test_identity_cannot_change(self, providers, field):
        providers.create(PROVIDER)
        with pytest.raises(ValidationError):
            providers.update("user-2", {field: "user-9"})
        assert providers.get_by_id("user-2").user_id == "user-2"

    def test_update_cannot_blank_field(self, providers):
        providers.create(PROVIDER)
        with pytest.raises(ValidationError):
            providers.update("user-2", {"company_name": "  "})
        with pytest.raises(ValidationError):
            providers.update("user-2", {"specialization": []})

    def test_empty_patch_returns_current(self, providers):
        providers.create(PROVIDER)
        assert providers.update("user-2", {}) == providers.get_by_id("user-2")
