from atomtk.errors import RDKitError

try:
    from rdkit.Chem import AllChem as Chem
except ImportError:
    RDKIT_FOUND = False
else:
    RDKIT_FOUND = True


def create_mol_from_smiles(smiles):
    '''
    Create a RDKit molecule object from SMILES string.

    Hydrogen atoms are added explicitly.

    Parameters
    ----------
    smiles : str

    Returns
    -------
    rdmol : rdkit.rdchem.Mol
    '''
    if not RDKIT_FOUND:
        raise ImportError('RDKit is required for parsing SMILES')

    rdmol = Chem.MolFromSmiles(smiles)
    if rdmol is None:
        raise RDKitError(f'Invalid SMILES: {smiles}')

    rdmol = Chem.AddHs(rdmol)

    return rdmol
