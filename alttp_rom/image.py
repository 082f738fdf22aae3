import hashlib
import os
import tempfile

from .errors import OutOfRange

SIZE = 2097152
BLOCK_SIZE = 1024


class RomImage:
    """Fixed size byte buffer backed by a temporary file.

    Every logged write is recorded as {'index', 'address', 'data'} so the log
    can be replayed onto the starting image to rebuild the final one.
    """
    step = 0

    def __init__(self, data: bytes = None, size: int = SIZE, logger=None):
        self.patch_data = []
        self.logger = logger
        self.temp = tempfile.TemporaryFile()
        self.size = 0
        if data:
            self.temp.write(data)
            self.size = len(data)
        self.resize(size)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __len__(self) -> int:
        return self.size

    @property
    def closed(self) -> bool:
        return self.temp.closed

    def close(self) -> None:
        if not self.temp.closed:
            self.temp.close()

    def resize(self, size: int = SIZE) -> None:
        self.temp.truncate(size)
        self.size = size

    def seek(self, position: int) -> None:
        self.temp.seek(position)

    def write(self, offset: int, data: bytes, log: bool = True) -> None:
        data = bytes(data)
        if offset < 0 or offset + len(data) > self.size:
            raise OutOfRange("Write of %d bytes at 0x%06X exceeds image of %d bytes" % (len(data), offset, self.size))

        if log:
            self.patch_data.append({'index': self.step, 'address': offset, 'data': [x for x in data]})
            self.step += 1
        self.temp.seek(offset)
        self.temp.write(data)

    def read(self, offset: int, length: int = 1):
        if offset < 0 or length < 1 or offset + length > self.size:
            raise OutOfRange("Read of %d bytes at 0x%06X exceeds image of %d bytes" % (length, offset, self.size))

        self.temp.seek(offset)
        data = self.temp.read(length)
        if length == 1:
            return data[0]
        return data

    def get_write_log(self) -> list:
        return [dict(record, data=list(record['data'])) for record in self.patch_data]

    def getvalue(self) -> bytes:
        self.temp.seek(0)
        return self.temp.read(self.size)

    def blocks(self, block_size: int = BLOCK_SIZE):
        self.temp.seek(0)
        remaining = self.size
        while remaining > 0:
            block = self.temp.read(min(block_size, remaining))
            if not block:
                break
            remaining -= len(block)
            yield block

    def fingerprint(self) -> str:
        h = hashlib.md5()
        for block in self.blocks(0x10000):
            h.update(block)
        return h.hexdigest()

    def save(self, output_location: str) -> None:
        directory = os.path.dirname(os.path.abspath(output_location))
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                for block in self.blocks(0x10000):
                    f.write(block)
            os.replace(tmp_path, output_location)
        except BaseException:
            os.unlink(tmp_path)
            raise
        if self.logger:
            self.logger.info("Wrote %d bytes to %s", self.size, output_location)
