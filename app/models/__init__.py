# Office floor-plan inventory: Database Models
# Import all models here for SQLAlchemy discovery

from app.models.office import Office                   # noqa
from app.models.floor import Floor                     # noqa
from app.models.layer import Layer                     # noqa
from app.models.zone import Zone                       # noqa
from app.models.catalog_item import CatalogItem        # noqa
from app.models.floor_stock import FloorStock          # noqa
from app.models.zone_allocation import ZoneAllocation  # noqa
from app.models.zone_object import ZoneObject          # noqa
from app.models.alert import InventoryAlert            # noqa
