"""CLI layer — console output, user input, dispatch, and the crash boundary.

This package is the outermost layer of the toolkit.  It may import from
``core`` and ``infra``, but no other layer may import from ``cli``.
"""
