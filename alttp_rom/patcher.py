import json

import bsdiff4
import ips

from .errors import SourceUnreadable


def parse_offset(key) -> int:
    if isinstance(key, int):
        return key
    key = str(key).strip()
    if key.lower().startswith("0x"):
        return int(key, 16)
    return int(key, 10)


def iter_edits(patch):
    """Yield (offset, data) pairs in replay order.

    Accepts a list of parts, each a mapping of offset to byte list, or the
    legacy list of {'index', 'address', 'data'} records.
    """
    if patch and all(isinstance(part, dict) and 'address' in part and 'data' in part for part in patch):
        for record in sorted(patch, key=lambda r: r.get('index', 0)):
            yield parse_offset(record['address']), bytes(record['data'])
        return

    for part in patch:
        for address, data in part.items():
            yield parse_offset(address), bytes(data)


def apply_patch(image, patch, logger=None) -> int:
    count = 0
    for offset, data in iter_edits(patch):
        image.write(offset, data)
        count += 1

    if logger:
        logger.debug("Applied %d patch edits", count)
    return count


def load_patch_file(file_name: str) -> list:
    if file_name.lower().endswith(".ips"):
        return ips_to_patch(file_name)
    try:
        with open(file_name, "r") as f:
            patch = json.load(f)
    except (OSError, ValueError) as e:
        raise SourceUnreadable("Patch file not readable: %s (%s)" % (file_name, e))

    # checked whole before anything is replayed
    try:
        check_patch(patch)
    except ValueError as e:
        raise SourceUnreadable("Patch file malformed: %s (%s)" % (file_name, e))
    return patch


def check_patch(patch) -> None:
    """Raise ValueError naming the first part that is not a valid edit."""
    if not isinstance(patch, list):
        raise ValueError("expected a list of parts, got %s" % type(patch).__name__)

    for i, part in enumerate(patch):
        if not isinstance(part, dict):
            raise ValueError("part %d is not an object" % i)
        if 'address' in part and 'data' in part:
            edits = [(part['address'], part['data'])]
        else:
            edits = part.items()
        for address, data in edits:
            try:
                offset = parse_offset(address)
            except (TypeError, ValueError):
                raise ValueError("part %d has a bad offset %r" % (i, address))
            if offset < 0:
                raise ValueError("part %d has a negative offset %d" % (i, offset))
            if not isinstance(data, list) or not all(isinstance(x, int) and 0 <= x <= 0xFF for x in data):
                raise ValueError("part %d at offset %d is not a list of bytes" % (i, offset))


def apply_patch_file(image, file_name: str, logger=None) -> int:
    patch = load_patch_file(file_name)
    if logger:
        logger.info("Applying patch file %s", file_name)
    return apply_patch(image, patch, logger)


def log_to_patch(write_log) -> list:
    return [{record['address']: list(record['data'])} for record in write_log]


def dumps(patch) -> str:
    return json.dumps(patch)


##########################################################################
#                       Binary patch formats
##########################################################################
def create_ips(original: bytes, patched: bytes) -> bytes:
    return bytes(ips.Patch.create(original, patched))


def create_bsdiff(original: bytes, patched: bytes) -> bytes:
    return bsdiff4.diff(original, patched)


def apply_bsdiff(original: bytes, patch: bytes) -> bytes:
    return bsdiff4.patch(original, patch)


def ips_to_patch(file_name: str) -> list:
    """Load an IPS file as patch parts, RLE records expanded."""
    try:
        with open(file_name, "rb") as f:
            ips_patch = ips.Patch.load(f)
    except (OSError, ValueError) as e:
        raise SourceUnreadable("IPS patch not readable: %s (%s)" % (file_name, e))
    return _ips_parts(ips_patch)


def diff_patch(original: bytes, patched: bytes) -> list:
    """Differences between two images as patch parts."""
    return _ips_parts(ips.Patch.create(original, patched))


def _ips_parts(ips_patch) -> list:
    parts = []
    for record in ips_patch.records:
        if record.rle_size <= 0:
            payload = [x for x in record.content]
        else:
            payload = [record.content[0] for i in range(record.rle_size)]
        parts.append({record.offset: payload})
    return parts
