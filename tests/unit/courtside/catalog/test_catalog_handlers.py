import json

from courtside.catalog.handlers import list_courts, list_sports


class TestCatalogHandlers:
    def test_list_courts(self, api_event, lambda_context):
        response = list_courts.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == {
            "courts": [
                {"court_id": "court-a", "name": "Court A"},
                {"court_id": "court-b", "name": "Court B"},
            ]
        }

    def test_list_sports(self, api_event, lambda_context):
        response = list_sports.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 200
        sports = json.loads(response["body"])["sports"]
        assert [(s["sport_id"], s["price_per_hour"]) for s in sports] == [
            ("cricket", "2000"),
            ("football", "2500"),
        ]
        assert {s["currency"] for s in sports} == {"PKR"}
