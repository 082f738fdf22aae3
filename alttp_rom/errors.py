class RomError(Exception):
    """Base class for errors that abort a patching session"""
    pass


class SourceUnreadable(RomError):
    """Raised when the source ROM or a patch file cannot be opened"""
    pass


class OutOfRange(RomError):
    """Raised when a read or write falls outside of the image"""
    pass


class SizeMismatch(RomError):
    """Raised when the image is not the size an operation expects"""
    pass


class CapacityExceeded(RomError):
    """Raised when a bounded table is given more entries than it can hold"""
    pass


class UnknownToken(Warning):
    """Collected when an item name has no equipment encoding"""
    pass


class InvalidConfiguration(Warning):
    """Collected when a setting value is unknown and its default is used instead"""
    pass
