"""Parsing and printing of ELF file headers."""

from __future__ import annotations

import struct
from dataclasses import dataclass

EI_NIDENT = 16
EI_CLASS = 4
EI_DATA = 5
EI_VERSION = 6
EI_OSABI = 7
EI_ABIVERSION = 8

ELFCLASS32 = 1
ELFCLASS64 = 2
ELFDATA2LSB = 1
ELFDATA2MSB = 2

_LAYOUTS = {
    ELFCLASS32: "HHIIIIIHHHHHH",
    ELFCLASS64: "HHIQQQIHHHHHH",
}

_DATA_NAMES = {
    ELFDATA2LSB: "2's complement, little endian",
    ELFDATA2MSB: "2's complement, big endian",
}

_OSABI_NAMES = {
    0: "UNIX - System V",
    2: "UNIX - NetBSD",
    3: "UNIX - Linux",
    6: "UNIX - Solaris",
}

_TYPE_NAMES = {
    0: "No file type",
    1: "REL (Relocatable file)",
    2: "EXEC (Executable file)",
    3: "DYN (Shared object file)",
    4: "CORE (Core file)",
}

_MACHINE_NAMES = {
    0: "No machine",
    2: "Sparc",
    3: "Intel 80386",
    18: "Sun SPARC 32+",
    43: "SPARC V9",
    62: "Advanced Micro Devices X86-64",
    224: "AMD 64",
}


class ElfFormatError(ValueError):
    """Raised when bytes cannot be read as an ELF header."""


def swap_uint16(val: int) -> int:
    """Reverse the byte order of a 16-bit value."""
    return ((val >> 8) | (val << 8)) & 0xFFFF


def swap_uint32(val: int) -> int:
    """Reverse the byte order of a 32-bit value."""
    return (
        ((val >> 24) & 0xFF)
        | ((val << 8) & 0xFF0000)
        | ((val >> 8) & 0xFF00)
        | ((val << 24) & 0xFF000000)
    )


@dataclass(frozen=True)
class ElfHeader:
    """The fields of an ELF file header, in host byte order."""

    ident: bytes
    type: int
    machine: int
    version: int
    entry: int
    phoff: int
    shoff: int
    flags: int
    ehsize: int
    phentsize: int
    phnum: int
    shentsize: int
    shnum: int
    shstrndx: int

    @property
    def elf_class(self) -> int:
        return self.ident[EI_CLASS]

    @property
    def bits(self) -> int:
        return 64 if self.elf_class == ELFCLASS64 else 32

    @property
    def data(self) -> int:
        return self.ident[EI_DATA]

    @property
    def big_endian(self) -> bool:
        return self.data == ELFDATA2MSB


def parse_header(data: bytes) -> ElfHeader:
    """Decode an ELF32 or ELF64 header from the start of ``data``."""
    data = bytes(data)
    if len(data) < EI_NIDENT:
        raise ElfFormatError("Error reading ELF header: too short for identification")
    elf_class = data[EI_CLASS]
    layout = _LAYOUTS.get(elf_class)
    if layout is None:
        raise ElfFormatError(f"Error: unsupported ELF class {elf_class}")
    order = ">" if data[EI_DATA] == ELFDATA2MSB else "<"
    record = struct.Struct(f"{order}{EI_NIDENT}s{layout}")
    if len(data) < record.size:
        raise ElfFormatError(
            f"Error reading ELF header: need {record.size} bytes, got {len(data)}"
        )
    return ElfHeader(*record.unpack_from(data))


def _line(label: str, value: object) -> str:
    return f"  {label:<35}{value}"


def format_header(header: ElfHeader) -> str:
    """Render a header as the text report of the original tool."""
    ident = header.ident
    osabi = ident[EI_OSABI]
    lines = [
        "ELF Header:",
        "  Magic:   " + "".join(f"{byte:02x} " for byte in ident),
        _line("Class:", f"ELF{header.bits}"),
        _line("Data:", _DATA_NAMES.get(header.data, f"<unknown: {header.data:x}>")),
        _line("Version:", f"{ident[EI_VERSION]} (current)"),
        _line("OS/ABI:", _OSABI_NAMES.get(osabi, f"<unknown: {osabi:x}>")),
        _line("ABI Version:", ident[EI_ABIVERSION]),
        _line("Type:", _TYPE_NAMES.get(header.type, f"<unknown: {header.type}>")),
        _line(
            "Machine:",
            _MACHINE_NAMES.get(header.machine, f"<unknown: {header.machine}>"),
        ),
        _line("Version:", f"0x{header.version:x}"),
        _line("Entry point address:", f"0x{header.entry:x}"),
        _line("Start of program headers:", f"{header.phoff} (bytes into file)"),
        _line("Start of section headers:", f"{header.shoff} (bytes into file)"),
        _line("Flags:", f"0x{header.flags:x}"),
        _line("Size of this header:", f"{header.ehsize} (bytes)"),
        _line("Size of program headers:", f"{header.phentsize} (bytes)"),
        _line("Number of program headers:", header.phnum),
        _line("Size of section headers:", f"{header.shentsize} (bytes)"),
        _line("Number of section headers:", header.shnum),
        _line("Section header string table index:", header.shstrndx),
    ]
    return "\n".join(lines) + "\n"