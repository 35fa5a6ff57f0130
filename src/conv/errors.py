"""Errors raised by kernel preparation and convolution engines."""


class ConvolutionError(ValueError):
    """Base class for configuration errors caught by precondition checks."""


class InvalidKernel(ConvolutionError):
    """Kernel is empty, not two-dimensional or not square."""


class BufferSizeMismatch(ConvolutionError):
    """Pixel buffer length disagrees with width * height * 4."""


class ZeroDivisor(ConvolutionError):
    """Divisor of zero passed to an engine."""


class InvalidDimensions(ConvolutionError):
    """Frame is not larger than the kernel in both directions."""
