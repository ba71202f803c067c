import math
import pandas as pd
from atomtk import logger
from atomtk.errors import AtomTkError


class DescriptorValue:
    '''
    The values calculated by an atomic descriptor.

    Attributes
    ----------
    names : tuple of str
    values : tuple of float
    exception : Exception or None
        The error which prevented the calculation. In this case, all values are NaN
    '''

    def __init__(self, names, values, exception=None):
        self.names = tuple(names)
        self.values = tuple(values)
        self.exception = exception
        if len(self.names) != len(self.values):
            raise ValueError('Number of descriptor names and values does not match')

    def __repr__(self):
        return '<DescriptorValue: %s>' % ' '.join(f'{k}={v}' for k, v in zip(self.names, self.values))

    def to_dict(self):
        return dict(zip(self.names, self.values))


class AtomicDescriptor:
    '''
    Base class for descriptors of an atom in a molecule.

    Subclasses should define `names` and implement :func:`_calculate`.

    An atomic descriptor always returns a value for each name.
    If the calculation fails, all values will be NaN, and the error will be kept in the returned :class:`DescriptorValue`.
    '''
    names = ()

    def __repr__(self):
        return f'<{self.__class__.__name__}>'

    def calculate(self, atom, molecule):
        '''
        Calculate the descriptor values for an atom.

        Parameters
        ----------
        atom : Atom
        molecule : Molecule

        Returns
        -------
        value : DescriptorValue
        '''
        try:
            values = self._calculate(atom, molecule)
        except (AtomTkError, ArithmeticError) as e:
            logger.warning(f'{self.__class__.__name__} failed for {atom}: {e}')
            return DescriptorValue(self.names, [math.nan] * len(self.names), e)

        return DescriptorValue(self.names, values)

    def calculate_molecule(self, molecule):
        '''
        Calculate the descriptor values for all the atoms in a molecule.

        Parameters
        ----------
        molecule : Molecule

        Returns
        -------
        table : pandas.DataFrame
            Each row for an atom, indexed by atom name. Each column for a descriptor name
        '''
        rows = [self.calculate(atom, molecule).values for atom in molecule.atoms]
        return pd.DataFrame(rows, index=[atom.name for atom in molecule.atoms], columns=list(self.names))

    def _calculate(self, atom, molecule):
        '''
        Calculate the descriptor values.
        This method should be implemented by subclasses.

        Parameters
        ----------
        atom : Atom
        molecule : Molecule

        Returns
        -------
        values : tuple of float
            Same length as `names`
        '''
        raise NotImplementedError('This method haven\'t been implemented')
