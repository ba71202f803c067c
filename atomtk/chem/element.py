_atomic_number = {'H': 1, 'He': 2, 'Li': 3, 'Be': 4, 'B': 5,
                  'C': 6, 'N': 7, 'O': 8, 'F': 9, 'Ne': 10,
                  'Na': 11, 'Mg': 12, 'Al': 13, 'Si': 14, 'P': 15,
                  'S': 16, 'Cl': 17, 'Ar': 18, 'K': 19, 'Ca': 20,
                  'Ti': 22, 'Fe': 26, 'Zn': 30, 'Ge': 32, 'As': 33,
                  'Se': 34, 'Br': 35, 'Kr': 36, 'Mo': 42, 'Ru': 44,
                  'Sn': 50, 'Te': 52, 'I': 53, 'Xe': 54, 'UNK': -1}

# only main group elements. transition metals are not supported
_valence_electrons = {'H': 1, 'He': 2, 'Li': 1, 'Be': 2, 'B': 3,
                      'C': 4, 'N': 5, 'O': 6, 'F': 7, 'Ne': 8,
                      'Na': 1, 'Mg': 2, 'Al': 3, 'Si': 4, 'P': 5,
                      'S': 6, 'Cl': 7, 'Ar': 8, 'K': 1, 'Ca': 2,
                      'Ge': 4, 'As': 5, 'Se': 6, 'Br': 7, 'Kr': 8,
                      'Sn': 4, 'Te': 6, 'I': 7, 'Xe': 8}

# atomic number of the last element in each period
_period_ends = [2, 10, 18, 36, 54, 86, 118]

_atomic_symbol = {v: k for k, v in _atomic_number.items()}


class Element():
    '''
    A chemical element.

    Parameters
    ----------
    arg : int or str
        Atomic number or symbol

    Attributes
    ----------
    number : int
    symbol : str
    valence_electrons : int or None
        Number of valence electrons. None if not available for this element
    '''

    def __init__(self, arg):
        if isinstance(arg, int):
            self.number = arg
            self.symbol = _atomic_symbol[arg]
        elif isinstance(arg, str):
            self.symbol = arg
            self.number = _atomic_number[arg]
        else:
            raise Exception('Element should be initiated with atomic number or symbol')

        self.valence_electrons = _valence_electrons.get(self.symbol)

    def __repr__(self):
        return f'<Element: {self.symbol}>'

    @property
    def period(self):
        '''
        The period (row) of this element in the periodic table.

        Returns
        -------
        period : int or None
            None for unknown element
        '''
        if self.number < 1:
            return None
        for i, end in enumerate(_period_ends):
            if self.number <= end:
                return i + 1
        return None
