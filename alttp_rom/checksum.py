import struct

from .errors import SizeMismatch
from .image import BLOCK_SIZE, SIZE

CHECKSUM_OFFSET = 0x7FDC
CHECKSUM_SEED = 0x1FE

# LoROM header checksum bytes, not summed. HiROM would skip 0xFFDC - 0xFFDF
CHECKSUM_WINDOW = range(CHECKSUM_OFFSET, CHECKSUM_OFFSET + 4)


def compute(blocks) -> tuple:
    """Return (checksum, inverse) for an iterable of 1024 byte blocks starting at offset 0."""
    total = CHECKSUM_SEED
    position = 0
    for block in blocks:
        end = position + len(block)
        if position < CHECKSUM_WINDOW.stop and end > CHECKSUM_WINDOW.start:
            start = max(CHECKSUM_WINDOW.start - position, 0)
            stop = min(CHECKSUM_WINDOW.stop - position, len(block))
            total += sum(block[:start]) + sum(block[stop:])
        else:
            total += sum(block)
        position = end

    checksum = total & 0xFFFF
    return checksum, checksum ^ 0xFFFF


def compute_bytes(data: bytes) -> tuple:
    return compute(data[i:i + BLOCK_SIZE] for i in range(0, len(data), BLOCK_SIZE))


def update_checksum(image, size: int = SIZE) -> tuple:
    """Write the inverse/checksum pair. Any later write invalidates it."""
    if len(image) != size:
        raise SizeMismatch("Checksum expects a %d byte image, got %d" % (size, len(image)))

    checksum, inverse = compute(image.blocks(BLOCK_SIZE))
    image.write(CHECKSUM_OFFSET, struct.pack('<HH', inverse, checksum))

    if image.logger:
        image.logger.info("Checksum 0x%04X (inverse 0x%04X)", checksum, inverse)

    return checksum, inverse


def verify(data: bytes) -> bool:
    if len(data) < CHECKSUM_WINDOW.stop:
        return False
    inverse, stored = struct.unpack_from('<HH', data, CHECKSUM_OFFSET)
    checksum, _ = compute_bytes(data)
    return stored == checksum and inverse ^ stored == 0xFFFF
