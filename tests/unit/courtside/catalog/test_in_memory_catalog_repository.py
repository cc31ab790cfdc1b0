from decimal import Decimal

from courtside.catalog.domain import CourtId, DisplayName, Sport, SportId
from courtside.shared.domain import Money, Repository


class TestInMemoryCatalogRepository:
    def test_default_catalog_courts(self, catalog):
        courts = catalog.list_courts()
        assert [str(c.id) for c in courts] == ["court-a", "court-b"]
        assert str(courts[0].display_name) == "Court A"

    def test_default_catalog_sports(self, catalog):
        cricket = catalog.find_sport(SportId("cricket"))
        football = catalog.find_sport(SportId("football"))
        assert cricket.price_per_hour == Money.pkr(2000)
        assert football.price_per_hour == Money.pkr(2500)

    def test_find_unknown_court_returns_none(self, catalog):
        assert catalog.find_court(CourtId("court-z")) is None

    def test_find_by_id_resolves_court(self, catalog):
        assert isinstance(catalog, Repository)
        assert catalog.find_by_id(CourtId("court-b")) == catalog.find_court(
            CourtId("court-b")
        )
        assert catalog.find_by_id(CourtId("court-z")) is None

    def test_save_sport_replaces_price(self, catalog):
        catalog.save_sport(
            Sport(SportId("cricket"), DisplayName("Cricket"), Money.pkr(3000))
        )

        sport = catalog.find_sport(SportId("cricket"))
        assert sport.price_per_hour.amount == Decimal("3000")
        assert len(catalog.list_sports()) == 2

    def test_price_for_hours(self, catalog):
        sport = catalog.find_sport(SportId("cricket"))
        assert sport.price_for(2) == Money.pkr(4000)
