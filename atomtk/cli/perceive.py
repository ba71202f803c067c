import argparse
from atomtk.topology import Molecule
from atomtk.atomtype import AtomTypeMatcher


def add_subcommand(subparsers):
    parser = subparsers.add_parser('perceive', help='Perceive atom types for molecules',
                                   formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('smiles', nargs='+', type=str,
                        help='SMILES strings. Name of the molecule can be appended after a space, e.g. "CC ethane"')

    parser.set_defaults(func=main)


def main(args):
    matcher = AtomTypeMatcher()
    for smiles in args.smiles:
        mol = Molecule.from_smiles(smiles)
        print(mol.name)
        for atom, atom_type in zip(mol.atoms, matcher.find_matching_atom_types(mol)):
            print('%8s %8s' % (atom.name, atom_type.name if atom_type is not None else '-'))
