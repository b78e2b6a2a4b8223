class AVLTreeError(Exception):
    """base"""


class InvariantViolation(AVLTreeError):
    """tree order, balance or height cache is broken"""


class RotationError(AVLTreeError):
    """rotation attempted without a pivot child"""
