from .entity import Court as Court
from .entity import Sport as Sport
from .repository import CatalogRepository as CatalogRepository
from .value_object import CourtId as CourtId
from .value_object import DisplayName as DisplayName
from .value_object import SportId as SportId
