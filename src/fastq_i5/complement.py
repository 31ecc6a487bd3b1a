COMPLEMENT = bytes.maketrans(
    b"ACGTNacgtn",
    b"TGCANtgcan",
)


def complement_base(b: int) -> int:
    """
    Complement of a single base, preserving case. Bytes other than
    A, C, G, T and N are returned unchanged.
    """
    return COMPLEMENT[b]


def reverse_complement_in_place(buf: bytearray, start=0, end=None):
    """
    Reverse-complement `buf[start:end]` without copying it.
    """
    i = start
    j = len(buf) if end is None else end
    while i < j:
        j -= 1
        a = COMPLEMENT[buf[i]]
        buf[i] = COMPLEMENT[buf[j]]
        buf[j] = a
        i += 1


def reverse_complement(seq: bytes):
    return seq[::-1].translate(COMPLEMENT)
