class AtomTkError(Exception):
    pass


class RDKitError(AtomTkError):
    pass


class PerceptionError(AtomTkError):
    '''
    The local context of an atom cannot be read, or the perceived atom type is inconsistent with the catalog.

    This is different from an atom that is not perceived, which is a valid result.
    '''
    pass


class BondOrderUndefinedError(PerceptionError):
    pass


class AtomTypeNotFoundError(PerceptionError):
    pass


class DescriptorError(AtomTkError):
    pass
