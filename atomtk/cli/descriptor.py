import argparse
import pandas as pd
from atomtk.topology import Molecule
from atomtk.descriptor import KierHallElectronegativityDescriptor, AtomHybridizationDescriptor


def add_subcommand(subparsers):
    parser = subparsers.add_parser('descriptor', help='Calculate atomic descriptors for molecules',
                                   formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('smiles', nargs='+', type=str,
                        help='SMILES strings. Name of the molecule can be appended after a space, e.g. "CC ethane"')
    parser.add_argument('--precision', type=int, default=4, help='number of decimals to print')

    parser.set_defaults(func=main)


def main(args):
    descriptors = [KierHallElectronegativityDescriptor(), AtomHybridizationDescriptor()]
    for smiles in args.smiles:
        mol = Molecule.from_smiles(smiles)
        df = pd.concat([d.calculate_molecule(mol) for d in descriptors], axis=1)
        print(mol.name)
        print(df.round(args.precision).to_string())
