from atomtk import logger
from atomtk.chem.rdkit import create_mol_from_smiles
from atomtk.errors import PerceptionError
from .atom import Atom
from .connectivity import *


class Molecule():
    '''
    A molecule is defined as atoms and the bonds between them.

    Atom types are perceived from the local environment of each atom in a molecule,
    therefore the molecule serves as the graph view for typing engines and descriptors.

    Parameters
    ----------
    name : str

    Attributes
    ----------
    name : str
        Name of the molecule, not necessarily unique
    '''

    def __init__(self, name='UNK'):
        self.name = name
        self._atoms: [Atom] = []
        self._bonds: [Bond] = []

    def __repr__(self):
        return f'<Molecule: {self.name}>'

    @staticmethod
    def from_smiles(smiles):
        '''
        Initialize a molecule from SMILES string.

        RDKit is used for parsing SMILES. The Hydrogen atoms will be created.
        The SMILES string can contain the name of the molecule at the end, e.g. 'CCCC butane'.

        Parameters
        ----------
        smiles : str

        Returns
        -------
        molecule : Molecule
        '''
        words = smiles.strip().split()
        if not words:
            raise Exception('Invalid SMILES string')

        smiles = words[0]
        if len(words) > 1:
            name = words[1]
        else:
            name = None

        rdmol = create_mol_from_smiles(smiles)
        mol = Molecule.from_rdmol(rdmol, name)

        return mol

    @staticmethod
    def from_rdmol(rdmol, name=None):
        '''
        Initialize a molecule from a RDKit Mol object.

        Elements are taken by symbol from RDKit, so that any element can be loaded.
        The formal charge of every atom is set explicitly, zero for neutral atoms.
        The hybridization is left unset, so that it will be inferred from the bond orders by typing engine.

        Parameters
        ----------
        rdmol : rdkit.Chem.Mol
        name : str
            The name of the molecule. If not provided, the formula will be used as the name.

        Returns
        -------
        molecule : Molecule
        '''
        try:
            from rdkit import Chem
            from rdkit.Chem.rdMolDescriptors import CalcMolFormula
        except ImportError:
            raise ImportError('RDKit not found')

        rdmol = Chem.Mol(rdmol)
        # don't set aromaticity, kekulized bonds are required for typing
        Chem.Kekulize(rdmol, clearAromaticFlags=True)
        mol = Molecule()
        for i, a in enumerate(rdmol.GetAtoms()):
            atom = Atom()
            atom.symbol = a.GetSymbol()
            atom.name = atom.symbol + str(i + 1)
            atom.formal_charge = a.GetFormalCharge()
            mol.add_atom(atom)
        d_bond_order = {
            Chem.rdchem.BondType.UNSPECIFIED: Bond.Order.UNSPECIFIED,
            Chem.rdchem.BondType.SINGLE     : Bond.Order.SINGLE,
            Chem.rdchem.BondType.DOUBLE     : Bond.Order.DOUBLE,
            Chem.rdchem.BondType.TRIPLE     : Bond.Order.TRIPLE,
            Chem.rdchem.BondType.QUADRUPLE  : Bond.Order.QUADRUPLE,
        }
        for b in rdmol.GetBonds():
            atom1 = mol.atoms[b.GetBeginAtomIdx()]
            atom2 = mol.atoms[b.GetEndAtomIdx()]
            try:
                order = d_bond_order[b.GetBondType()]
            except KeyError:
                logger.warning('Only single/double/triple/quadruple bond supported. Will discard bond order')
                order = Bond.Order.UNSPECIFIED
            mol.add_bond(atom1, atom2, order)

        if name is not None:
            mol.name = name
        else:
            mol.name = CalcMolFormula(rdmol)

        return mol

    def add_atom(self, atom):
        '''
        Add an atom to this molecule.

        Parameters
        ----------
        atom : Atom
        '''
        atom._molecule = self
        self._atoms.append(atom)
        atom.id_in_mol = len(self._atoms) - 1

    def add_bond(self, atom1, atom2, order=Bond.Order.UNSPECIFIED, check_existence=False):
        '''
        Add a bond between two atoms.

        Make sure that both these two atoms belong to this molecule.
        For performance issue, this is not checked.

        Parameters
        ----------
        atom1 : Atom
        atom2 : Atom
        order : int
        check_existence : bool
            If set to True and there is already bond between these two atoms, then do nothing and return None

        Returns
        -------
        bond : [Bond, None]
        '''
        bond = Bond(atom1, atom2, order)
        if check_existence and any(b.equals(bond) for b in self._bonds):
            return None

        self._bonds.append(bond)
        atom1._bonds.append(bond)
        atom2._bonds.append(bond)

        return bond

    def remove_bond(self, bond):
        '''
        Remove a bond from this molecule.

        Parameters
        ----------
        bond : Bond
        '''
        self._bonds.remove(bond)
        bond.atom1._bonds.remove(bond)
        bond.atom2._bonds.remove(bond)

    @property
    def n_atom(self):
        return len(self._atoms)

    @property
    def n_bond(self):
        return len(self._bonds)

    @property
    def atoms(self):
        '''
        List of atoms belong to this molecule

        Returns
        -------
        atoms: list of Atom
        '''
        return self._atoms

    @property
    def bonds(self):
        '''
        List of bonds belong to this molecule

        Returns
        -------
        bonds : list of Bond
        '''
        return self._bonds

    def _check_atom(self, atom):
        if atom.molecule is not self:
            raise PerceptionError(f'{atom} does not belong to {self}')

    def get_connected_bonds(self, atom):
        '''
        Get all the bonds connected to an atom.

        A new list is returned, so that it will not be affected by later modification of the molecule.

        Parameters
        ----------
        atom : Atom

        Returns
        -------
        bonds : list of Bond
        '''
        self._check_atom(atom)
        return list(atom.bonds)

    def get_connected_bonds_count(self, atom):
        '''
        Get the number of bonds connected to an atom, i.e. the degree of this atom in the graph.

        Parameters
        ----------
        atom : Atom

        Returns
        -------
        count : int
        '''
        self._check_atom(atom)
        return len(atom.bonds)

    def get_maximum_bond_order(self, atom):
        '''
        Get the maximum order of the bonds connected to an atom.

        Parameters
        ----------
        atom : Atom

        Returns
        -------
        order : int or None
            None if this atom is not bonded to any atom

        Raises
        ------
        BondOrderUndefinedError
            If the order of any connected bond is unspecified
        '''
        return Bond.get_maximum_order(bond.order for bond in self.get_connected_bonds(atom))

    def count_hydrogens(self, atom):
        '''
        Count the hydrogen atoms bonded to an atom.

        Only explicit hydrogen atoms in the molecule are counted.

        Parameters
        ----------
        atom : Atom

        Returns
        -------
        count : int
        '''
        self._check_atom(atom)
        return sum(1 for partner in atom.bond_partners if partner.symbol == 'H')
