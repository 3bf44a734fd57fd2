"""Error type raised while reading, writing or scanning class files."""


class ClassFileError(Exception):
    """Raised when class file data cannot be read, written or interpreted."""

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = str(msg)

    def __str__(self):
        return self.msg