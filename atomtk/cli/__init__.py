import argparse
from . import descriptor, perceive


def main(argv=None):
    parser = argparse.ArgumentParser(prog="atomtk", description="Atom type perception toolkit",
                                     formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Add subcommands
    perceive.add_subcommand(subparsers)
    descriptor.add_subcommand(subparsers)

    args = parser.parse_args(argv)
    args.func(args)  # Call the function associated with the subcommand
