"""
ptfs Testing Helpers

Reusable conformance checks for filesystem wrappers.
"""

from .suite import WrapperSuite, SCRATCH_DIR

__all__ = [
    'WrapperSuite',
    'SCRATCH_DIR',
]
