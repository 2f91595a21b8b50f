import logging
logger = logging.getLogger(__name__)


__all__ = [
    'ClkResetError',
    'ShapeError',
    'FrequencyOverflowError',
    'InvalidDividerError',
    'GlobalBypassUnsupported',
    'DumpLoadError',
    'XtalRateError',
]


class ClkResetError(Exception):
    '''
    Base type for all errors raised while loading or decoding a CLKRESET
    register dump.  Any extra keyword arguments are saved so the caller can
    report which register/field caused the problem.
    '''
    def __init__(self, message=None, **kwargs):
        super().__init__(message)
        self.kwargs = kwargs


class ShapeError(ClkResetError, ValueError):
    pass


class FrequencyOverflowError(ClkResetError, OverflowError):
    pass


class InvalidDividerError(ClkResetError, ArithmeticError):
    pass


class GlobalBypassUnsupported(ClkResetError):
    pass


class DumpLoadError(ClkResetError, IOError):
    pass


class XtalRateError(ClkResetError, ValueError):
    pass
