#!/usr/bin/env python3

import dataclasses
import pytest
from atomtk.topology import Atom, Bond
from atomtk.atomtype import AtomType, AtomTypeCatalog, get_default_catalog


def test_default_catalog():
    catalog = get_default_catalog()
    assert catalog is get_default_catalog()
    assert {'C.sp', 'C.sp2', 'C.sp3', 'H'} <= set(catalog.names)
    assert 'C.sp3' in catalog
    assert 'C.sp4' not in catalog

    csp3 = catalog.lookup('C.sp3')
    assert csp3.symbol == 'C'
    assert csp3.hybridization == Atom.Hybridization.SP3
    assert csp3.formal_neighbour_count == 4
    assert csp3.max_bond_order == Bond.Order.SINGLE
    assert catalog.lookup('C.sp').max_bond_order == Bond.Order.TRIPLE
    assert catalog.lookup('C.sp4') is None


def test_immutable():
    catalog = get_default_catalog()
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog.lookup('C.sp3').hybridization = Atom.Hybridization.SP2
    with pytest.raises(TypeError):
        catalog._table['C.sp4'] = AtomType('C.sp4', 'C')


def test_custom_catalog():
    catalog = AtomTypeCatalog([AtomType('C.sp3', 'C', Atom.Hybridization.SP3), AtomType('H', 'H')])
    assert len(catalog) == 2
    assert list(catalog) == ['C.sp3', 'H']
    assert catalog.lookup('H').hybridization is None

    with pytest.raises(ValueError):
        AtomTypeCatalog([AtomType('H', 'H'), AtomType('H', 'H')])
    with pytest.raises(TypeError):
        AtomTypeCatalog(['H'])
