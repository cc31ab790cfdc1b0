from .court_id import CourtId
from .display_name import DisplayName
from .sport_id import SportId

__all__ = ["CourtId", "SportId", "DisplayName"]
