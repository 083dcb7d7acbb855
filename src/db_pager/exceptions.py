"""
Exceptions raised by the pager.

Errors coming from a row source are never wrapped: they propagate as the
source raised them.
"""

from db_pager.constants import ERROR_INVALID_PARAM, ERROR_NOT_BUILT


class PagerError(Exception):
    """Base exception for pagination errors."""

    pass


class InvalidParameterError(PagerError, ValueError):
    """A paging parameter cannot produce a descriptor."""

    def __init__(self, param: str):
        self.param = param
        super().__init__(ERROR_INVALID_PARAM.format(param=param))


class PagerNotBuiltError(PagerError, RuntimeError):
    """Rows were requested from a pager without a descriptor."""

    def __init__(self):
        super().__init__(ERROR_NOT_BUILT)
