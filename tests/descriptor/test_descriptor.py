#!/usr/bin/env python3

import math
import pytest
from atomtk.topology import Molecule, Atom, Bond
from atomtk.atomtype import AtomTypeMatcher, AtomTypeCatalog, AtomType
from atomtk.descriptor import KierHallElectronegativityDescriptor, AtomHybridizationDescriptor, DescriptorValue
from atomtk.errors import DescriptorError, BondOrderUndefinedError, AtomTypeNotFoundError


def test_kier_hall():
    descriptor = KierHallElectronegativityDescriptor()

    methanol = Molecule.from_smiles('CO')
    C1, O2 = methanol.atoms[:2]
    assert descriptor.calculate(C1, methanol).values == pytest.approx((0.,))
    assert descriptor.calculate(O2, methanol).values == pytest.approx((1.0,))
    assert descriptor.calculate(methanol.atoms[-1], methanol).values == (0.,)

    chloromethane = Molecule.from_smiles('CCl')
    value = descriptor.calculate(chloromethane.atoms[1], chloromethane)
    assert value.names == ('KierHallElectronegativity',)
    assert value.exception is None
    assert value.values[0] == pytest.approx((7 / 9 - 1) / 9)

    water = Molecule.from_smiles('O')
    assert descriptor.calculate(water.atoms[0], water).to_dict() == pytest.approx({'KierHallElectronegativity': 1.0})


def test_kier_hall_failure():
    mol = Molecule()
    iron = Atom('Fe1')
    iron.symbol = 'Fe'
    mol.add_atom(iron)
    value = KierHallElectronegativityDescriptor().calculate(iron, mol)
    assert math.isnan(value.values[0])
    assert isinstance(value.exception, DescriptorError)

    iron.symbol = 'Xx'
    value = KierHallElectronegativityDescriptor().calculate(iron, mol)
    assert math.isnan(value.values[0])
    assert isinstance(value.exception, DescriptorError)


def test_kier_hall_molecule():
    df = KierHallElectronegativityDescriptor().calculate_molecule(Molecule.from_smiles('CO'))
    assert list(df.columns) == ['KierHallElectronegativity']
    assert list(df.index) == ['C1', 'O2', 'H3', 'H4', 'H5', 'H6']
    assert df.loc['O2', 'KierHallElectronegativity'] == pytest.approx(1.0)


def test_hybridization():
    descriptor = AtomHybridizationDescriptor()
    propene = Molecule.from_smiles('C=CC')
    values = [descriptor.calculate(atom, propene).values[0] for atom in propene.atoms[:3]]
    assert values == [Atom.Hybridization.SP2, Atom.Hybridization.SP2, Atom.Hybridization.SP3]

    # hydrogen is not perceived
    value = descriptor.calculate(propene.atoms[-1], propene)
    assert math.isnan(value.values[0])
    assert value.exception is None

    df = descriptor.calculate_molecule(Molecule.from_smiles('C#C'))
    assert df['AtomHybridization'].tolist()[:2] == [Atom.Hybridization.SP] * 2
    assert df['AtomHybridization'].isna().sum() == 2


def test_hybridization_failure():
    mol = Molecule()
    C, H = Atom('C1'), Atom('H2')
    C.symbol, H.symbol = 'C', 'H'
    mol.add_atom(C)
    mol.add_atom(H)
    mol.add_bond(C, H)
    value = AtomHybridizationDescriptor().calculate(C, mol)
    assert math.isnan(value.values[0])
    assert isinstance(value.exception, BondOrderUndefinedError)

    mol.bonds[0].order = None
    value = AtomHybridizationDescriptor().calculate(C, mol)
    assert math.isnan(value.values[0])
    assert isinstance(value.exception, BondOrderUndefinedError)

    mol.bonds[0].order = Bond.Order.SINGLE
    matcher = AtomTypeMatcher(AtomTypeCatalog([AtomType('C.sp2', 'C', Atom.Hybridization.SP2)]))
    value = AtomHybridizationDescriptor(matcher).calculate(C, mol)
    assert math.isnan(value.values[0])
    assert isinstance(value.exception, AtomTypeNotFoundError)


def test_descriptor_value():
    with pytest.raises(ValueError):
        DescriptorValue(['a', 'b'], [1.0])
