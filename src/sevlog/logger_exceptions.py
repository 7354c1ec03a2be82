class LoggerError(Exception):
    def __init__(self, reason, path=None, details=None):
        self.reason = reason
        self.path = path
        self.details = details
        super().__init__(reason if path is None else f"{reason}: {path}")

class LoggerConfigError(LoggerError, ValueError):
    pass

class LoggerInitError(LoggerError):
    """Directory or file creation failed. Not meant to be caught."""
    pass

class LogWriteError(LoggerError, OSError):
    pass

class LoggerStateError(LoggerError, RuntimeError):
    pass
