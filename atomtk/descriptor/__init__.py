from .descriptor import AtomicDescriptor, DescriptorValue
from .kierhall import KierHallElectronegativityDescriptor
from .hybridization import AtomHybridizationDescriptor
