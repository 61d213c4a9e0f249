"""
# olemime: MIME type of legacy Office documents

The documents produced by the old versions of Word and Excel are Compound
Files (OLE2): the kind of document is not written anywhere in clear, but
the root storage of the file carries the CLSID of the application that
created it.

Identifying a file means

 1. reading the 512 bytes header and checking the file identifier
 2. locating the sector containing the directory and reading its first
    entry, that must be the root storage
 3. decoding the CLSID of the root storage and looking it up in a table
    of known applications

    >>> from olemime import CompoundFile
    >>> CompoundFile('report.doc').get_mime_type()
    'application/msword'

Nothing else of the file is read: the allocation tables, the directory tree
and the streams are never touched.
"""
from .core import CompoundFile, CompoundFileInfo, ReaderPhase, identify
from .mime import DEFAULT_MIME_TYPE, MIME_TYPES, resolve_mime_type
