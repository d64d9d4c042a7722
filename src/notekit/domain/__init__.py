"""Pure domain layer: labels, values, types, definitions, notes and collections.

Nothing in this package touches the filesystem, the terminal or the network.
"""
