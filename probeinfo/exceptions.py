"""Custom exceptions for probeinfo"""

class ProbeError(Exception):
    """Base exception for all probeinfo errors"""
    def __init__(self, message: str, module: str = None):
        self.message = message
        self.module = module or "unknown"
        super().__init__(f"[{self.module}] {self.message}")

class LaunchError(ProbeError):
    """The probing executable could not be started"""
    def __init__(self, message: str, module: str = None):
        super().__init__(f"Launch error: {message}", module)

class ConfigurationError(ProbeError):
    """Error in configuration/setup"""
    def __init__(self, message: str, module: str = None):
        super().__init__(f"Configuration error: {message}", module)

class ProbeIOError(ProbeError):
    """Reading the probe output failed"""
    def __init__(self, message: str, module: str = None):
        super().__init__(f"I/O error: {message}", module)

class ExitError(ProbeError):
    """The probing process exited with a failure status

    Attributes:
        returncode: Exit status; negative when the process was killed by a signal
        result: The ProbeResult parsed before the failure was detected, if any
    """
    def __init__(self, returncode: int, result=None, module: str = None):
        self.returncode = returncode
        self.result = result
        if returncode < 0:
            detail = f"process killed by signal {-returncode}"
        else:
            detail = f"process exited with status {returncode}"
        super().__init__(f"Exit error: {detail}", module)

class MetadataError(ProbeError):
    """Raised when a probed stream or option does not exist"""
    def __init__(self, message: str, option: str = None, module: str = None):
        self.option = option
        super().__init__(f"Metadata error: {message}", module)

class StructuralError(ProbeError):
    """Base class for probe output that violates the section grammar"""
    def __init__(self, message: str, module: str = None):
        super().__init__(f"Structural error: {message}", module)

class DuplicateOptionError(StructuralError):
    """An option appears twice in one section"""
    def __init__(self, option: str, module: str = None):
        self.option = option
        super().__init__(f"duplicate option: {option}", module)

class MissingSeparatorError(StructuralError):
    """A line inside a section has no '=' separator"""
    def __init__(self, line: str, module: str = None):
        self.line = line
        super().__init__(f"missing '=' in line: {line!r}", module)

class UnknownSectionError(StructuralError):
    """A top-level line is not a recognized section marker"""
    def __init__(self, line: str, module: str = None):
        self.line = line
        super().__init__(f"unknown section: {line!r}", module)

class StreamsUnorderedError(StructuralError):
    """A stream section carries a missing, invalid or out-of-order index"""
    def __init__(self, expected: int, found: str = None, module: str = None):
        self.expected = expected
        self.found = found
        super().__init__(
            f"streams unordered: expected index {expected}, got {found!r}", module
        )

class UnterminatedSectionError(StructuralError):
    """The output ended before a section's close marker"""
    def __init__(self, end: str, module: str = None):
        self.end = end
        super().__init__(f"unterminated section: missing {end}", module)
