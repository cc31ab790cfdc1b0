from pydantic import BaseModel

from courtside.catalog.domain import Court, Sport


class CourtData(BaseModel):
    """コートのレスポンスモデル"""

    court_id: str
    name: str


class SportData(BaseModel):
    """競技のレスポンスモデル"""

    sport_id: str
    name: str
    price_per_hour: str
    currency: str


def to_court_data(court: Court) -> CourtData:
    return CourtData(court_id=str(court.id), name=str(court.display_name))


def to_sport_data(sport: Sport) -> SportData:
    return SportData(
        sport_id=str(sport.id),
        name=str(sport.display_name),
        price_per_hour=str(sport.price_per_hour.amount),
        currency=str(sport.price_per_hour.currency),
    )
