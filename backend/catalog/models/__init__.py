from catalog.models.product import Product
from catalog.models.color import Color
from catalog.models.storage_option import StorageOption
from catalog.models.feature import Feature
from catalog.models.specification import Specification

# Creation order for the installer: root table first.
INSTALL_ORDER = [Product, Color, StorageOption, Feature, Specification]

__all__ = ["Product", "Color", "StorageOption", "Feature", "Specification", "INSTALL_ORDER"]
