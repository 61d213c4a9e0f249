'''
Mapping between the CLSID of the root storage and the MIME type of the document.

Many legitimate compound files carry a CLSID not listed here, so a missing
entry is never an error: it degrades to the generic binary MIME type.
'''
import logging
from types import MappingProxyType


logger = logging.getLogger(__name__)


DEFAULT_MIME_TYPE = 'application/octet-stream'

MIME_TYPES = MappingProxyType({
    '00020906-0000-0000-c000-000000000046': 'application/msword',        # Word.Document.8
    '00020820-0000-0000-c000-000000000046': 'application/vnd.ms-excel',  # Excel.Sheet.8
    '00020810-0000-0000-c000-000000000046': 'application/vnd.ms-excel',  # Excel.Sheet.5
})


def resolve_mime_type(clsid: str, table=MIME_TYPES) -> str:
    mime_type = table.get(clsid.lower()) if isinstance(clsid, str) else None

    if mime_type is None:
        logger.debug('no MIME type for CLSID %s, falling back to %s' % (clsid, DEFAULT_MIME_TYPE))
        return DEFAULT_MIME_TYPE

    return mime_type
