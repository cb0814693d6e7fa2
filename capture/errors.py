class SourceOpenError(RuntimeError):
    """Video file or camera could not be opened."""


class OutputOpenError(RuntimeError):
    """Output video could not be opened for writing."""


class FrameSizeError(ValueError):
    """Frame does not match the size the output video was opened with."""
