from atomtk.atomtype import AtomTypeMatcher
from atomtk.topology import Molecule, Bond

# Construct a matcher with the default atom type catalog
matcher = AtomTypeMatcher()

# Create a molecule from SMILES string
acrylonitrile = Molecule.from_smiles('C=CC#N')

# Perceive atom types from bond orders
for atom, atom_type in zip(acrylonitrile.atoms, matcher.find_matching_atom_types(acrylonitrile)):
    print(atom.name, atom_type.name if atom_type else '-')


# Register a rule for nitrogen
def perceive_nitrogen(context):
    if context.formal_charge:
        return None
    return {Bond.Order.SINGLE: 'N.sp3', Bond.Order.DOUBLE: 'N.sp2', Bond.Order.TRIPLE: 'N.sp'}.get(context.max_bond_order)


matcher.register('N', perceive_nitrogen)
print(matcher.find_matching_atom_type(acrylonitrile, acrylonitrile.atoms[3]))
