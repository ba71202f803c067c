from .atom import Atom
from .connectivity import Bond
from .molecule import Molecule
