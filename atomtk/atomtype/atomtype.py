from dataclasses import dataclass
from typing import Optional
from atomtk.topology import Atom, Bond


@dataclass(frozen=True)
class AtomType:
    '''
    Reference record of an atom type.

    Atom types are created once when the :class:`~atomtk.atomtype.AtomTypeCatalog` is built.
    They are immutable, so that they can be shared between threads and typing engines.
    Typing engines look them up by name, but never construct them.

    Parameters
    ----------
    name : str
        The name of this atom type, e.g. C.sp3
    symbol : str
        Atomic symbol of the element
    hybridization : int or None
        See :class:`~atomtk.topology.Atom.Hybridization`
    formal_charge : int
    formal_neighbour_count : int
        Expected number of neighbours, hydrogen atoms included
    max_bond_order : int
        See :class:`~atomtk.topology.Bond.Order`
    bond_order_sum : int
        Expected sum of the orders of the bonds
    lone_pair_count : int
    '''
    name: str
    symbol: str
    hybridization: Optional[int] = None
    formal_charge: int = 0
    formal_neighbour_count: int = 0
    max_bond_order: int = Bond.Order.SINGLE
    bond_order_sum: int = 0
    lone_pair_count: int = 0

    def __repr__(self):
        return f'<AtomType: {self.name}>'


_H = Atom.Hybridization
_O = Bond.Order

#: name, symbol, hybridization, formal_charge, formal_neighbour_count, max_bond_order, bond_order_sum, lone_pair_count
DEFAULT_ATOM_TYPES = (
    AtomType('H', 'H', _H.S, 0, 1, _O.SINGLE, 1, 0),
    AtomType('C.sp', 'C', _H.SP, 0, 2, _O.TRIPLE, 4, 0),
    AtomType('C.sp2', 'C', _H.SP2, 0, 3, _O.DOUBLE, 4, 0),
    AtomType('C.sp3', 'C', _H.SP3, 0, 4, _O.SINGLE, 4, 0),
    AtomType('N.sp', 'N', _H.SP, 0, 1, _O.TRIPLE, 3, 1),
    AtomType('N.sp2', 'N', _H.SP2, 0, 2, _O.DOUBLE, 3, 1),
    AtomType('N.sp3', 'N', _H.SP3, 0, 3, _O.SINGLE, 3, 1),
    AtomType('N.planar3', 'N', _H.PLANAR3, 0, 3, _O.SINGLE, 3, 1),
    AtomType('O.sp2', 'O', _H.SP2, 0, 1, _O.DOUBLE, 2, 2),
    AtomType('O.sp3', 'O', _H.SP3, 0, 2, _O.SINGLE, 2, 2),
)
