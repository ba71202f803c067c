import math
from atomtk.atomtype import AtomTypeMatcher
from .descriptor import AtomicDescriptor


class AtomHybridizationDescriptor(AtomicDescriptor):
    '''
    Hybridization of an atom, taken from the atom type perceived by :class:`~atomtk.atomtype.AtomTypeMatcher`.

    The value is the integer code in :class:`~atomtk.topology.Atom.Hybridization`.
    It is NaN if the atom is not perceived, or the perceived atom type has no hybridization.

    Parameters
    ----------
    matcher : AtomTypeMatcher, optional
        If not provided, a matcher with the default catalog will be used.
    '''
    names = ('AtomHybridization',)

    def __init__(self, matcher=None):
        self.matcher = matcher if matcher is not None else AtomTypeMatcher()

    def _calculate(self, atom, molecule):
        atom_type = self.matcher.find_matching_atom_type(molecule, atom)
        if atom_type is None or atom_type.hybridization is None:
            return (math.nan,)
        return (float(atom_type.hybridization),)
