# teachos

Pieces of a small teaching operating system as a plain Python package:

* **Kernel side**: RISC-V Sv39 paging arithmetic and system limits, and
  ELF64 header parsing.
* **User side**: a minimal `printf`, string helpers, a first-fit heap
  allocator, a tiny regular-expression `grep`, the utilities `cat`, `echo`,
  `wc`, `find` and a prime sieve, and a Park-Miller random number generator.

It has no runtime dependencies and runs on Python 3.10 or later.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module            | What it holds                                                                   |
|-------------------|---------------------------------------------------------------------------------|
| `teachos.riscv`   | Limits (`NPROC`, `MAXPATH`, ...), register bits, `PGSIZE`, `PTE_*`, `MAXVA`; `pg_round_up`, `pg_round_down`, `pa2pte`, `pte2pa`, `pte_flags`, `px_shift`, `px`, `make_satp` |
| `teachos.elf`     | `ElfHeader.parse`, `ElfHeader.program_headers`, `ProgramHeader.parse`, `ElfFormatError` |
| `teachos.printf`  | `xformat` and `fprintf` with `%d %l %x %p %s %c %%`                              |
| `teachos.ulib`    | `atoi`, `strcmp`, `gets`                                                         |
| `teachos.umalloc` | `Heap` with `sbrk`, `malloc` and `free`                                          |
| `teachos.grep`    | `match` (supports `^ . * $`), `grep`, `main`                                     |
| `teachos.cat`     | `cat`, `main`                                                                    |
| `teachos.echo`    | `echo`, `main`                                                                   |
| `teachos.wc`      | `wc` returning `(lines, words, characters)`, `main`                              |
| `teachos.find`    | `name_matches`, `find` (a generator of matching paths), `main`                   |
| `teachos.primes`  | `primes(limit)` generator, `main`                                                |
| `teachos.rand`    | `ParkMiller`, the minimal-standard generator                                     |

## Examples

Paging arithmetic:

```python
from teachos.riscv import pg_round_up, pg_round_down, px

pg_round_up(1)        # 4096
pg_round_down(8191)   # 4096
px(0, 0x1000)         # 1
```

Pattern matching:

```python
from teachos.grep import match

match("^ab*c$", "abbbc")   # True
match("x.z", "axyzb")      # True
```

Formatting:

```python
from teachos.printf import xformat

xformat("%d items at %p", 3, 0x1000)   # '3 items at 0x0000000000001000'
```

Heap allocation over a bounded break:

```python
from teachos.umalloc import Heap

heap = Heap(1 << 20)
block = heap.malloc(100)
heap.free(block)
```

Counting and random numbers:

```python
import io
from teachos.wc import wc
from teachos.rand import ParkMiller

wc(io.StringIO("a b\nc\n"))   # (2, 3, 6)
ParkMiller(1).next()          # 33613
```

## Commands

Installing the package adds these commands:

```
teachos-cat [FILE...]
teachos-echo [ARG...]
teachos-grep PATTERN [FILE...]
teachos-wc [FILE...]
teachos-find PATH NAME
teachos-primes
```

With no file arguments, `teachos-cat`, `teachos-grep` and `teachos-wc` read
standard input. A file that cannot be opened is reported and the command
exits with status 1.

## What is not included

The package does not simulate physical memory or page tables: `teachos.riscv`
only computes addresses, indices and PTE values. It has no shell: there is no
command-line parser or runner. There are no commands for linking files,
making directories, removing files or killing processes.