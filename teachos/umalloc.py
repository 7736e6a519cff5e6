"""First-fit free-list allocator over a growable heap break."""

from __future__ import annotations

HEADER_SIZE = 16  # bytes per block header and allocation unit
MIN_CORE_UNITS = 4096  # smallest growth requested from the break
HEAP_START = 0x1000
_BASE = 0  # address of the sentinel header, below the heap


class Heap:
    """A circular, address-ordered free list with coalescing on free."""

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError("limit must not be negative")
        self.start = HEAP_START
        self.limit = limit
        self._brk = HEAP_START
        self._size: dict[int, int] = {}
        self._next: dict[int, int] = {}
        self._freep: int | None = None
        self._allocated: dict[int, int] = {}

    def sbrk(self, nbytes: int) -> int:
        """Move the break by nbytes and return its previous value."""
        old = self._brk
        new = old + nbytes
        if new < self.start or new > self.start + self.limit:
            raise MemoryError("cannot move heap break")
        self._brk = new
        return old

    def _morecore(self, nunits: int) -> int | None:
        nunits = max(nunits, MIN_CORE_UNITS)
        try:
            block = self.sbrk(nunits * HEADER_SIZE)
        except MemoryError:
            return None
        self._release(block, nunits)
        return self._freep

    def _release(self, bp: int, units: int) -> None:
        size, nxt = self._size, self._next
        size[bp] = units
        p = self._freep
        while not (p < bp < nxt[p]):
            if p >= nxt[p] and (bp > p or bp < nxt[p]):
                break
            p = nxt[p]
        after = nxt[p]
        if bp + size[bp] * HEADER_SIZE == after:
            size[bp] += size[after]
            nxt[bp] = nxt[after]
            del size[after], nxt[after]
        else:
            nxt[bp] = after
        if p + size[p] * HEADER_SIZE == bp:
            size[p] += size[bp]
            nxt[p] = nxt[bp]
            del size[bp], nxt[bp]
        else:
            nxt[p] = bp
        self._freep = p

    def malloc(self, nbytes: int) -> int:
        """Allocate nbytes and return the address of the usable block."""
        if nbytes < 0:
            raise ValueError("nbytes must not be negative")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        size, nxt = self._size, self._next
        if self._freep is None:
            size[_BASE] = 0
            nxt[_BASE] = _BASE
            self._freep = _BASE
        prevp = self._freep
        p = nxt[prevp]
        while True:
            if size[p] >= nunits:
                if size[p] == nunits:
                    nxt[prevp] = nxt[p]
                    del size[p], nxt[p]
                else:
                    size[p] -= nunits
                    p += size[p] * HEADER_SIZE
                self._freep = prevp
                self._allocated[p + HEADER_SIZE] = nunits
                return p + HEADER_SIZE
            if p == self._freep:
                grown = self._morecore(nunits)
                if grown is None:
                    raise MemoryError("out of heap memory")
                p = grown
            prevp = p
            p = nxt[p]

    def free(self, ap: int) -> None:
        """Return a block obtained from malloc to the free list."""
        units = self._allocated.pop(ap, None)
        if units is None:
            raise ValueError(f"address {ap:#x} was not allocated")
        self._release(ap - HEADER_SIZE, units)