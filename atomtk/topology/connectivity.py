from atomtk.errors import BondOrderUndefinedError

__all__ = [
    'Bond',
]


class Bond():
    '''
    A bond between two atoms.

    The atoms are not sorted, because the sequence is irrelevant for typing.

    Parameters
    ----------
    atom1 : Atom
    atom2 : Atom
    order : int, Optional

    Attributes
    ----------
    atom1 : Atom
    atom2 : Atom
    order : int
        The integer bond order. See :class:`Bond.Order`
    '''

    class Order:
        '''
        Enumerator of integer bond orders

        The bonds in aromatic rings are in kekulized form.
        '''

        #: unspecified bond order
        UNSPECIFIED = 0
        #: order of single bond
        SINGLE = 1
        #: order of double bond
        DOUBLE = 2
        #: order of triple bond
        TRIPLE = 3
        #: order of quadruple bond. Anything above triple is not supported by typing
        QUADRUPLE = 4

    def __init__(self, atom1, atom2, order=Order.UNSPECIFIED):
        self.atom1 = atom1
        self.atom2 = atom2
        self.order = order

    def __repr__(self):
        return f'<Bond: {self.name} {self.order}>'

    def equals(self, other):
        '''
        Check if two bonds represent the same connectivity.
        Return True if they contain the identical atoms, regardless of the sequence and bond order.

        Parameters
        ----------
        other : Bond

        Returns
        -------
        equal : bool
        '''
        if type(other) != Bond:
            return False
        return {self.atom1, self.atom2} == {other.atom1, other.atom2}

    @property
    def name(self):
        '''
        Name of this bond

        Returns
        -------
        name : str
        '''
        return '%s-%s' % (self.atom1.name, self.atom2.name)

    @property
    def atoms(self):
        '''
        The atoms forming this bond

        Returns
        -------
        atoms : tuple of Atom
        '''
        return self.atom1, self.atom2

    @staticmethod
    def get_maximum_order(orders):
        '''
        Get the maximum of a set of bond orders.

        Parameters
        ----------
        orders : list of int

        Returns
        -------
        order : int or None
            None if there is no bond at all

        Raises
        ------
        BondOrderUndefinedError
            If any of the bond orders is unspecified or is not a value of :class:`Bond.Order`
        '''
        defined = (Bond.Order.SINGLE, Bond.Order.DOUBLE, Bond.Order.TRIPLE, Bond.Order.QUADRUPLE)
        orders = list(orders)
        for order in orders:
            if order not in defined:
                raise BondOrderUndefinedError(f'Bond order is not specified: {order!r}')
        return max(orders, default=None)
