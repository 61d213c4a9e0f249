class OleMimeException(Exception):
    '''Base class to extend in order to throw exception in olemime.

    It takes as first argument the chain of the region/field that
    caused the exception, e.g. ['header', 'file_identifier'].

    The reader sets "phase" to the last phase reached before failing.
    '''

    def __init__(self, chain, message=None):
        self.chain = chain
        self.message = message
        self.phase = None
        super().__init__(message or '.'.join(chain))

    def __str__(self):
        where = '.'.join(self.chain)
        if self.message:
            return f'{where}: {self.message}' if where else self.message
        return where


class SourceUnreadableException(OleMimeException):
    '''The underlying source failed to open, seek or read.'''
    pass


class TruncatedRegionException(OleMimeException):
    '''Less data than the region needs.'''
    pass


class MagicException(OleMimeException):
    pass


class InvalidFileIdentifierException(MagicException):
    pass


class InvalidRootDirectoryTypeException(MagicException):
    pass


class UnknownFieldException(OleMimeException, KeyError):
    '''A schema has been asked for a field it doesn't define: this is
    a bug in the caller, not a problem with the data.'''

    def __str__(self):
        return OleMimeException.__str__(self)
