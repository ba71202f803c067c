#!/usr/bin/env python3

import pytest
from atomtk.topology import Molecule, Atom, Bond
from atomtk.errors import BondOrderUndefinedError, PerceptionError, RDKitError


def test_smiles():
    ethanol = Molecule.from_smiles('CCO ethanol')
    assert ethanol.name == 'ethanol'
    assert ethanol.n_atom == 9
    assert ethanol.n_bond == 8
    assert [atom.symbol for atom in ethanol.atoms] == ['C', 'C', 'O'] + ['H'] * 6
    assert ethanol.atoms[2].name == 'O3'
    assert all(atom.formal_charge == 0 for atom in ethanol.atoms)
    assert all(atom.hybridization is None for atom in ethanol.atoms)

    bf4 = Molecule.from_smiles('[B-](F)(F)(F)F')
    assert bf4.n_atom == 5
    assert bf4.name == 'BF4-'
    assert bf4.atoms[0].formal_charge == -1

    with pytest.raises(RDKitError):
        Molecule.from_smiles('C1CC')
    with pytest.raises(Exception):
        Molecule.from_smiles('  ')


def test_smiles_any_element():
    dimethylmercury = Molecule.from_smiles('C[Hg]C')
    assert [atom.symbol for atom in dimethylmercury.atoms[:3]] == ['C', 'Hg', 'C']
    assert dimethylmercury.atoms[1].name == 'Hg2'
    assert dimethylmercury.get_connected_bonds_count(dimethylmercury.atoms[1]) == 2

    gold = Molecule.from_smiles('[Au]')
    assert gold.n_atom == 1
    assert gold.atoms[0].symbol == 'Au'


def test_kekulize():
    benzene = Molecule.from_smiles('c1ccccc1')
    orders = [bond.order for bond in benzene.bonds if bond.atom2.symbol == 'C']
    assert sorted(orders) == [Bond.Order.SINGLE] * 3 + [Bond.Order.DOUBLE] * 3


def test_graph_view():
    acetonitrile = Molecule.from_smiles('CC#N')
    C1, C2, N3 = acetonitrile.atoms[:3]
    assert acetonitrile.get_connected_bonds_count(C1) == 4
    assert acetonitrile.get_connected_bonds_count(C2) == 2
    assert acetonitrile.get_maximum_bond_order(C1) == Bond.Order.SINGLE
    assert acetonitrile.get_maximum_bond_order(C2) == Bond.Order.TRIPLE
    assert acetonitrile.count_hydrogens(C1) == 3
    assert acetonitrile.count_hydrogens(C2) == 0
    assert acetonitrile.count_hydrogens(N3) == 0
    assert set(C2.bond_partners) == {C1, N3}

    bonds = acetonitrile.get_connected_bonds(C2)
    assert bonds == C2.bonds
    assert bonds is not C2.bonds


def test_manual():
    mol = Molecule('CH2')
    C = Atom('C1')
    C.symbol = 'C'
    H2, H3 = Atom('H2'), Atom('H3')
    H2.symbol = H3.symbol = 'H'
    for atom in (C, H2, H3):
        mol.add_atom(atom)
    assert [atom.id_in_mol for atom in mol.atoms] == [0, 1, 2]
    assert C.formal_charge is None
    assert mol.get_maximum_bond_order(C) is None

    bond = mol.add_bond(C, H2)
    assert mol.add_bond(H2, C, check_existence=True) is None
    mol.add_bond(C, H3, Bond.Order.SINGLE)
    assert mol.n_bond == 2
    assert bond.name == 'C1-H2'
    with pytest.raises(BondOrderUndefinedError):
        mol.get_maximum_bond_order(C)

    mol.remove_bond(bond)
    assert mol.n_bond == 1
    assert H2.bonds == []
    assert mol.get_maximum_bond_order(C) == Bond.Order.SINGLE

    with pytest.raises(PerceptionError):
        mol.count_hydrogens(Atom())
