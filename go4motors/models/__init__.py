# Go4Motors: Database Models
# Import all models here for SQLAlchemy discovery

from go4motors.models.user import Role, User                                        # noqa
from go4motors.models.brand import Brand, BrandTranslation                          # noqa
from go4motors.models.category import Category, CategoryTranslation                 # noqa
from go4motors.models.supplier import Supplier, SupplierTranslation                 # noqa
from go4motors.models.vehicle import Vehicle, VehicleImage, VehicleTranslation      # noqa
from go4motors.models.transaction import Transaction, VehicleTransaction            # noqa
