"""
variantkit: sdk-range targeting for multi-variant packages.

Resolves which module splits are delivered to which device variant and
collapses overlapping variant sdk ranges into a disjoint partition.
"""
