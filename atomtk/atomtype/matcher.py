from atomtk import logger
from atomtk.errors import AtomTypeNotFoundError
from atomtk.topology import Atom, Bond
from .catalog import get_default_catalog


class AtomContext:
    '''
    Snapshot of the local environment of an atom, which is all that typing rules are allowed to look at.

    The orders of the connected bonds are read once at construction.
    Later modification of the molecule will not affect this context.

    Parameters
    ----------
    symbol : str
    hybridization : int or None
    formal_charge : int or None
    bond_orders : list of int
        Orders of all the bonds connected to this atom
    '''

    def __init__(self, symbol, hybridization=None, formal_charge=None, bond_orders=()):
        self.symbol = symbol
        self.hybridization = hybridization
        self.formal_charge = formal_charge
        self._bond_orders = tuple(bond_orders)

    def __repr__(self):
        return f'<AtomContext: {self.symbol} {self.hybridization} {self.formal_charge} {self._bond_orders}>'

    @staticmethod
    def from_molecule(molecule, atom):
        '''
        Take the snapshot of an atom in a molecule.

        Parameters
        ----------
        molecule : Molecule
        atom : Atom

        Returns
        -------
        context : AtomContext
        '''
        bonds = molecule.get_connected_bonds(atom)
        return AtomContext(atom.symbol, atom.hybridization, atom.formal_charge, [b.order for b in bonds])

    @property
    def degree(self):
        return len(self._bond_orders)

    @property
    def max_bond_order(self):
        '''
        Maximum order of the connected bonds. None if there is no bond.

        Raises BondOrderUndefinedError if any of the bond orders is unspecified.
        '''
        return Bond.get_maximum_order(self._bond_orders)

    @property
    def n_double_bond(self):
        '''
        Number of connected double bonds.

        Raises BondOrderUndefinedError if any of the bond orders is unspecified.
        '''
        Bond.get_maximum_order(self._bond_orders)  # raise if unspecified
        return self._bond_orders.count(Bond.Order.DOUBLE)


def perceive_carbon(context):
    '''
    Typing rule for carbon atoms.

    The checks are performed in order, and the first one matched determines the result.
    The declared hybridization is trusted more than formal charge, which is trusted more than bond orders.
    An explicit SP hybridization is not perceived.

    Parameters
    ----------
    context : AtomContext

    Returns
    -------
    name : str or None
        Name of the atom type. None if not perceived
    '''
    if context.hybridization is not None:
        if context.hybridization == Atom.Hybridization.SP2:
            return f'{context.symbol}.sp2'
        if context.hybridization == Atom.Hybridization.SP3:
            return f'{context.symbol}.sp3'
        return None

    # charged carbons are not perceived yet
    if context.formal_charge is not None and context.formal_charge != 0:
        return None

    # hypervalent carbons are not perceived yet
    if context.degree > 4:
        return None

    if context.degree == 0:
        return f'{context.symbol}.sp3'

    max_order = context.max_bond_order
    if max_order > Bond.Order.TRIPLE:
        return None
    if max_order == Bond.Order.TRIPLE:
        return f'{context.symbol}.sp'
    if max_order == Bond.Order.DOUBLE:
        n_double = context.n_double_bond
        # cumulated double bonds, e.g. the center of allene
        if n_double == 2:
            return f'{context.symbol}.sp'
        if n_double == 1:
            return f'{context.symbol}.sp2'
        return None
    return f'{context.symbol}.sp3'


class AtomTypeMatcher:
    '''
    AtomTypeMatcher perceives the atom type of an atom from its local environment.

    The typing rules are registered by element.
    A rule is a function taking an :class:`AtomContext` and returning the name of the atom type, or None if not perceived.
    The name is then resolved into :class:`~atomtk.atomtype.AtomType` by the catalog.
    Elements without registered rule are never perceived.

    Atoms and molecules are never modified by the matcher.
    Therefore, unlike typing engines in force field packages, the perceived atom types are returned instead of assigned.

    Parameters
    ----------
    catalog : AtomTypeCatalog, optional
        If not provided, the default catalog will be used.

    Examples
    --------
    >>> matcher = AtomTypeMatcher()
    >>> mol = Molecule.from_smiles('C=C=C')
    >>> [t.name for t in matcher.find_matching_atom_types(mol)[:3]]
    ['C.sp2', 'C.sp', 'C.sp2']

    To perceive another element, register a rule for it

    >>> matcher.register('O', lambda context: 'O.sp3' if context.max_bond_order == Bond.Order.SINGLE else None)
    '''

    _default_rules = {
        'C': perceive_carbon,
    }

    def __init__(self, catalog=None):
        self.catalog = catalog if catalog is not None else get_default_catalog()
        self._rules = dict(self._default_rules)

    def __repr__(self):
        return f'<AtomTypeMatcher: {" ".join(sorted(self._rules))}>'

    @property
    def elements(self):
        '''
        The elements which have typing rules registered

        Returns
        -------
        symbols : list of str
        '''
        return sorted(self._rules)

    def register(self, symbol, rule):
        '''
        Register the typing rule for an element.
        The rule already registered for this element will be replaced.

        Rules should be registered before the matcher is shared between threads.

        Parameters
        ----------
        symbol : str
        rule : callable
            Takes an AtomContext and returns the name of atom type or None
        '''
        if not callable(rule):
            raise TypeError('Typing rule should be callable')
        self._rules[symbol] = rule

    def find_matching_atom_type(self, molecule, atom):
        '''
        Perceive the atom type of an atom in a molecule.

        Parameters
        ----------
        molecule : Molecule
        atom : Atom

        Returns
        -------
        atom_type : AtomType or None
            None if this atom can not be perceived by the registered rules

        Raises
        ------
        PerceptionError
            If the local environment of this atom can not be read
        AtomTypeNotFoundError
            If the perceived atom type is not in the catalog
        '''
        rule = self._rules.get(atom.symbol)
        if rule is None:
            logger.debug(f'No typing rule for {atom}')
            return None

        context = AtomContext.from_molecule(molecule, atom)
        name = rule(context)
        if name is None:
            logger.debug(f'{atom} not perceived from {context}')
            return None

        atom_type = self.catalog.lookup(name)
        if atom_type is None:
            raise AtomTypeNotFoundError(f'Atom type {name} perceived for {atom} not found in {self.catalog}')
        return atom_type

    def find_matching_atom_types(self, molecule):
        '''
        Perceive the atom types of all atoms in a molecule.

        Atoms with a registered typing rule but not perceived are reported in one warning.
        Elements without typing rule are never perceived, so they are not reported.

        Parameters
        ----------
        molecule : Molecule

        Returns
        -------
        atom_types : list of [AtomType, None]
            Same order as the atoms in the molecule
        '''
        atom_types = [self.find_matching_atom_type(molecule, atom) for atom in molecule.atoms]
        _undefined = [atom.name for atom, atom_type in zip(molecule.atoms, atom_types)
                      if atom_type is None and atom.symbol in self._rules]
        if _undefined != []:
            logger.warning('Atom type not perceived for %i atoms in %s: %s' % (
                len(_undefined), molecule, ' '.join(_undefined)))
        return atom_types
