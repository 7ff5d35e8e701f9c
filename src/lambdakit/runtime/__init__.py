"""
lambdakit Collection Engine.

One module per element shape, each exposing the same algorithm family:

    sequences: items of any iterable (lists, tuples, numpy arrays, ...)
    mappings:  (key, value) entries of a mapping
    strings:   characters of a string

The modules shadow builtins such as ``filter`` and ``map``; import the
modules, not their functions:

    from lambdakit.runtime import sequences
    sequences.group_by([1, 2, 3], lambda n: n % 2)
"""

from lambdakit.runtime import mappings, sequences, sources, strings

__all__ = [
    "mappings",
    "sequences",
    "sources",
    "strings",
]
