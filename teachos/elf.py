"""ELF64 executable header and program header parsing."""

from __future__ import annotations

import struct
from dataclasses import dataclass

ELF_MAGIC = 0x464C457F  # "\x7FELF" read as a little-endian word

ELF_PROG_LOAD = 1

ELF_PROG_FLAG_EXEC = 1
ELF_PROG_FLAG_WRITE = 2
ELF_PROG_FLAG_READ = 4

_ELFHDR = struct.Struct("<I12sHHIQQQIHHHHHH")
_PROGHDR = struct.Struct("<IIQQQQQQ")


class ElfFormatError(ValueError):
    """The data is not a well-formed ELF image."""


@dataclass(frozen=True)
class ProgramHeader:
    type: int
    flags: int
    off: int
    vaddr: int
    paddr: int
    filesz: int
    memsz: int
    align: int

    @classmethod
    def parse(cls, data: bytes) -> ProgramHeader:
        """Decode one program header from the start of data."""
        if len(data) < _PROGHDR.size:
            raise ElfFormatError("truncated program header")
        return cls(*_PROGHDR.unpack_from(data, 0))

    @property
    def loadable(self) -> bool:
        return self.type == ELF_PROG_LOAD


@dataclass(frozen=True)
class ElfHeader:
    magic: int
    elf: bytes
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

    @classmethod
    def parse(cls, data: bytes) -> ElfHeader:
        """Decode the file header at the start of data."""
        if len(data) < _ELFHDR.size:
            raise ElfFormatError("truncated ELF header")
        header = cls(*_ELFHDR.unpack_from(data, 0))
        if header.magic != ELF_MAGIC:
            raise ElfFormatError("bad ELF magic")
        return header

    def program_headers(self, data: bytes) -> list[ProgramHeader]:
        """Decode the program headers this header points to within data."""
        headers = []
        for index in range(self.phnum):
            start = self.phoff + index * _PROGHDR.size
            headers.append(ProgramHeader.parse(data[start:start + _PROGHDR.size]))
        return headers