from .atomtype import AtomType, DEFAULT_ATOM_TYPES
from .catalog import AtomTypeCatalog, get_default_catalog
from .matcher import AtomContext, AtomTypeMatcher, perceive_carbon
