from .api import Api
from .database import Database
from .functions import Functions

__all__ = ["Api", "Database", "Functions"]
