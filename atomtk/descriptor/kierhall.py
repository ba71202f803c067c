from atomtk.chem.element import Element
from atomtk.errors import DescriptorError
from .descriptor import AtomicDescriptor


class KierHallElectronegativityDescriptor(AtomicDescriptor):
    '''
    Kier-Hall relative electronegativity of an atom.

    With `Z` the atomic number, `Zv` the number of valence electrons and `nH` the number of bonded hydrogen atoms:

    * delta = degree - nH
    * deltaV = (Zv - nH) / (Z - Zv - 1)
    * KierHallElectronegativity = (deltaV - delta) / period^2

    It is zero for hydrogen atoms.
    All the hydrogen atoms must be explicit in the molecule.
    '''
    names = ('KierHallElectronegativity',)

    def _calculate(self, atom, molecule):
        try:
            element = Element(atom.symbol)
        except KeyError:
            raise DescriptorError(f'Unknown element {atom.symbol}')

        if element.number == 1:
            return (0.,)

        z_valence = element.valence_electrons
        period = element.period
        if z_valence is None or period is None:
            raise DescriptorError(f'Valence electrons not available for element {element.symbol}')

        n_hydrogen = molecule.count_hydrogens(atom)
        delta = molecule.get_connected_bonds_count(atom) - n_hydrogen
        delta_v = (z_valence - n_hydrogen) / (element.number - z_valence - 1)

        return ((delta_v - delta) / period ** 2,)
