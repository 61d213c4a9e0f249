#!/usr/bin/env python3
'''
Print the MIME type and the main header information of compound files.

 $ cfbinfo.py /temp/CV.doc
'''
import os
import sys
import logging

from olemime import CompoundFile
from olemime.exceptions import OleMimeException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print('usage: %s <compound file> [<compound file> ...]' % progname)
    sys.exit(1)


def dump_info(info):
    print(f'''FileIdentifier = {info.file_identifier.hex(' ')}
Filename = {info.filename}
UUIDOfFile = {info.file_uuid}
RevisionNumber = 0x{info.revision_number:04x}
VersionNumber = 0x{info.version_number:04x}
LittleEndian = {info.little_endian}
SectorSize = {info.sector_size}
Type = {info.root_entry_type!r}
RootEntryName = {info.root_entry_name}
CLSID = {info.clsid}''')


def main(argv):
    if len(argv) < 2:
        usage(argv[0])

    status = 0
    for path in argv[1:]:
        try:
            cfile = CompoundFile(path)
        except OleMimeException as e:
            logger.error(f'failed to handle file at path \'{path}\': {e}')
            status = 1
            continue

        print('Mime type of the file = ' + cfile.get_mime_type())
        dump_info(cfile.describe())

    return status


if __name__ == '__main__':
    sys.exit(main(sys.argv))
