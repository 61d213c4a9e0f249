from pathlib import Path

import pytest


WORD_CLSID = bytes.fromhex('0609020000000000c000000000000046')
EXCEL_CLSID = bytes.fromhex('2008020000000000c000000000000046')
CFB_MAGIC = bytes.fromhex('d0cf11e0a1b11ae1')


def build_compound_file(
        magic=CFB_MAGIC,
        clsid=WORD_CLSID,
        entry_type=0x05,
        little_endian=True,
        sector_exponent=9,
        first_sector_id=0,
        file_uuid=b'\x00' * 16,
        revision=0x003e,
        version=0x0003,
        name='Root Entry'):
    '''Build the minimal compound file: a header followed by the sectors
    up to the one containing the root directory entry.'''
    order = 'little' if little_endian else 'big'

    header = bytearray(512)
    header[0:8] = magic
    header[8:24] = file_uuid
    header[24:26] = revision.to_bytes(2, order)
    header[26:28] = version.to_bytes(2, order)
    header[28:30] = b'\xfe\xff' if little_endian else b'\xff\xfe'
    header[30:32] = sector_exponent.to_bytes(2, order)
    header[32:34] = (6).to_bytes(2, order)
    header[48:52] = first_sector_id.to_bytes(4, order)

    raw_name = (name + '\x00').encode('utf-16-le')
    entry = bytearray(128)
    entry[0:len(raw_name)] = raw_name
    entry[64:66] = len(raw_name).to_bytes(2, order)
    entry[66] = entry_type
    entry[67] = 0x01
    entry[68:72] = b'\xff' * 4
    entry[72:76] = b'\xff' * 4
    entry[76:80] = b'\xff' * 4
    entry[80:96] = clsid

    sector_size = 2 ** sector_exponent
    padding = bytes(first_sector_id * sector_size)

    return bytes(header) + padding + bytes(entry) + bytes(max(sector_size - 128, 0))


@pytest.fixture
def test_root_dir():
    return Path(__file__).parent


@pytest.fixture
def compound_file():
    return build_compound_file


@pytest.fixture
def compound_file_path(tmp_path):
    def _write(filename='document.doc', **kwargs):
        path = tmp_path / filename
        path.write_bytes(build_compound_file(**kwargs))
        return path

    return _write
