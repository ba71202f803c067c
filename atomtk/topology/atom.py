class Atom():
    '''
    An atom in a molecular graph.

    Parameters
    ----------
    name : str

    Attributes
    ----------
    id_in_mol : int
        Index of this atom in molecule. -1 means this atom haven\'t been added into a molecule
    name : str
        Name of this atom, not necessarily unique
    symbol : str
        Atomic symbol
    formal_charge : int or None
        Formal charge calculated from valence bond theory.
        None means the formal charge is unset, which is different from zero.
    hybridization : int or None
        Declared hybridization. See :class:`Atom.Hybridization`.
        None means the hybridization is unset and should be inferred from the bonds.
    '''

    class Hybridization:
        '''
        Enumerator of hybridization states
        '''

        #: s orbital only, e.g. hydrogen
        S = 0
        #: linear
        SP = 1
        #: trigonal planar
        SP2 = 2
        #: tetrahedral
        SP3 = 3
        #: trigonal bipyramidal
        SP3D = 4
        #: octahedral
        SP3D2 = 5
        #: planar nitrogen with three neighbours, e.g. amide
        PLANAR3 = 6

    def __init__(self, name='UNK'):
        self.id_in_mol = -1
        self.name = name
        self.symbol = 'UNK'
        self.formal_charge = None
        self.hybridization = None

        self._molecule = None
        self._bonds = []

    def __repr__(self):
        return f'<Atom: {self.name} {self.id_in_mol} {self.symbol}>'

    @property
    def molecule(self):
        '''
        The molecule this atom belongs to

        Returns
        -------
        molecule : Molecule
        '''
        return self._molecule

    @property
    def bonds(self):
        '''
        All the bonds involving this atom.

        Returns
        -------
        bonds : list of Bond
        '''
        return self._bonds

    @property
    def bond_partners(self):
        '''
        All the bond partners of this atom.

        Returns
        -------
        partners : list of Atom
        '''
        return [bond.atom2 if bond.atom1 is self else bond.atom1 for bond in self._bonds]

