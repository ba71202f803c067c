import functools
from types import MappingProxyType
from .atomtype import AtomType, DEFAULT_ATOM_TYPES


class AtomTypeCatalog:
    '''
    Read-only table of atom types, looked up by name.

    The table is built once in the constructor and never modified afterwards.
    Therefore one catalog can be shared by multiple typing engines, also between threads.

    Parameters
    ----------
    atom_types : list of AtomType
    '''

    def __init__(self, atom_types):
        table = {}
        for atom_type in atom_types:
            if not isinstance(atom_type, AtomType):
                raise TypeError(f'AtomType expected, got {atom_type!r}')
            if atom_type.name in table:
                raise ValueError(f'Duplicated atom type: {atom_type.name}')
            table[atom_type.name] = atom_type
        self._table = MappingProxyType(table)

    def __repr__(self):
        return f'<AtomTypeCatalog: {len(self._table)} atom types>'

    def __len__(self):
        return len(self._table)

    def __contains__(self, name):
        return name in self._table

    def __iter__(self):
        return iter(self._table)

    @property
    def names(self):
        '''
        Names of all the atom types in this catalog

        Returns
        -------
        names : list of str
        '''
        return list(self._table)

    def lookup(self, name):
        '''
        Find the atom type by its name.

        Parameters
        ----------
        name : str

        Returns
        -------
        atom_type : AtomType or None
            None if the name is not in this catalog
        '''
        return self._table.get(name)


@functools.lru_cache(maxsize=None)
def get_default_catalog():
    '''
    The catalog of built-in atom types.

    It is built at the first call, and the same instance is returned afterwards.

    Returns
    -------
    catalog : AtomTypeCatalog
    '''
    return AtomTypeCatalog(DEFAULT_ATOM_TYPES)
