import struct

import pytest

from lowkit.elfheader import (
    ElfFormatError,
    ElfHeader,
    format_header,
    parse_header,
    swap_uint16,
    swap_uint32,
)


def build(bits=64, big=False, osabi=0, type_=2, machine=62, entry=0x401000,
          phoff=64, shoff=4096, flags=0, phnum=9, shnum=30, shstrndx=29):
    ident = bytes([0x7F, ord("E"), ord("L"), ord("F"),
                   2 if bits == 64 else 1, 2 if big else 1, 1, osabi]) + bytes(8)
    order = ">" if big else "<"
    if bits == 64:
        fields = struct.pack(order + "HHIQQQIHHHHHH", type_, machine, 1, entry,
                             phoff, shoff, flags, 64, 56, phnum, 64, shnum, shstrndx)
    else:
        fields = struct.pack(order + "HHIIIIIHHHHHH", type_, machine, 1, entry,
                             phoff, shoff, flags, 52, 32, phnum, 40, shnum, shstrndx)
    return ident + fields


def test_swap_uint16_value():
    assert swap_uint16(0x1234) == 0x3412


def test_swap_uint32_value():
    assert swap_uint32(0x12345678) == 0x78563412


@pytest.mark.parametrize("val", [0, 1, 0xFF, 0xABCD, 0xFFFF])
def test_swap_uint16_round_trip(val):
    assert swap_uint16(swap_uint16(val)) == val


@pytest.mark.parametrize("val", [0, 1, 0xDEADBEEF, 0xFFFFFFFF, 0x00FF00FF])
def test_swap_uint32_round_trip(val):
    assert swap_uint32(swap_uint32(val)) == val


def test_parse_64_little_endian():
    header = parse_header(build(bits=64, entry=0x401000, phnum=9, shnum=30))
    assert header.bits == 64
    assert header.entry == 0x401000
    assert header.phnum == 9
    assert header.shnum == 30
    assert header.big_endian is False


def test_parse_32_big_endian():
    header = parse_header(build(bits=32, big=True, machine=2, entry=0x10074, shoff=5000))
    assert header.bits == 32
    assert header.big_endian is True
    assert header.machine == 2
    assert header.entry == 0x10074
    assert header.shoff == 5000


def test_big_and_little_endian_agree():
    little = parse_header(build(bits=32, big=False))
    big = parse_header(build(bits=32, big=True))
    assert little.type == big.type
    assert little.machine == big.machine
    assert little.entry == big.entry
    assert little.shstrndx == big.shstrndx


def test_short_data_raises():
    with pytest.raises(ElfFormatError):
        parse_header(build(bits=64)[:40])


def test_too_short_for_ident_raises():
    with pytest.raises(ElfFormatError):
        parse_header(b"\x7fELF")


def test_unknown_class_raises():
    data = bytearray(build(bits=64))
    data[4] = 7
    with pytest.raises(ElfFormatError):
        parse_header(bytes(data))


def test_format_64_header():
    text = format_header(parse_header(build(bits=64, entry=0x401000)))
    lines = text.splitlines()
    assert lines[0] == "ELF Header:"
    assert lines[1] == "  Magic:   7f 45 4c 46 02 01 01 00 00 00 00 00 00 00 00 00 "
    assert "  Class:                             ELF64" in lines
    assert "  Data:                              2's complement, little endian" in lines
    assert "  Type:                              EXEC (Executable file)" in lines
    assert "  Machine:                           Advanced Micro Devices X86-64" in lines
    assert "  OS/ABI:                            UNIX - System V" in lines
    assert any(line.endswith(hex(0x401000)) for line in lines if "Entry point" in line)
    assert len(lines) == 20


def test_format_32_big_endian_header():
    text = format_header(parse_header(build(bits=32, big=True, machine=3, type_=3)))
    assert "  Class:                             ELF32\n" in text
    assert "  Data:                              2's complement, big endian\n" in text
    assert "  Machine:                           Intel 80386\n" in text
    assert "  Type:                              DYN (Shared object file)\n" in text


def test_format_unknown_values():
    text = format_header(parse_header(build(machine=999, type_=77, osabi=0xAB)))
    assert "<unknown: 999>" in text
    assert "<unknown: 77>" in text
    assert "<unknown: ab>" in text


def test_header_counts_in_output():
    header = parse_header(build(phnum=9, shnum=30, shstrndx=29))
    text = format_header(header)
    assert f"  Number of section headers:         {header.shnum}\n" in text
    assert f"  Section header string table index: {header.shstrndx}\n" in text
    assert isinstance(header, ElfHeader) and header.shstrndx == 29