# unit_manager/__init__.py

from .catalog import CATALOG, UNKNOWN, Dimension, Unit, UnitCatalog, resolve
from .converter import (
    convert,
    convert_length,
    convert_temperature,
    convert_weight,
    from_canonical,
    to_canonical,
)

__all__ = [
    "CATALOG",
    "UNKNOWN",
    "Dimension",
    "Unit",
    "UnitCatalog",
    "resolve",
    "convert",
    "convert_length",
    "convert_weight",
    "convert_temperature",
    "to_canonical",
    "from_canonical",
]
