import hashlib
import json
import os
import tempfile

from . import patcher
from .image import SIZE, RomImage


class Build:
    def __init__(self, build: str, hash: str, patch: list):
        self.build = build
        self.hash = hash
        self.patch = patch

    def to_json(self) -> str:
        return json.dumps({'build': self.build, 'hash': self.hash, 'patch': self.patch})


class BuildRegistry:
    """Write logs of base ROM builds, stored one JSON file per (build, hash)."""

    def __init__(self, root: str, logger=None):
        self.root = root
        self.logger = logger
        if not os.path.exists(root):
            os.makedirs(root)

    def _record_path(self, build: str, hash: str) -> str:
        key = hashlib.md5(json.dumps([build, hash]).encode("utf-8")).hexdigest()
        return os.path.join(self.root, key + ".json")

    def save_build(self, patch: list, build: str, hash: str) -> Build:
        record = Build(build, hash, patcher.log_to_patch(patch) if _is_write_log(patch) else patch)

        fd, tmp_path = tempfile.mkstemp(dir=self.root, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                f.write(record.to_json())
            os.replace(tmp_path, self._record_path(build, hash))
        except BaseException:
            os.unlink(tmp_path)
            raise

        if self.logger:
            self.logger.info("Saved build %s (%s)", build, hash)
        return record

    def get_build(self, build: str, hash: str):
        path = self._record_path(build, hash)
        if not os.path.exists(path):
            return None
        with open(path, "r") as f:
            data = json.load(f)
        if data['build'] != build or data['hash'] != hash:
            return None
        return Build(data['build'], data['hash'], data['patch'])

    def builds(self) -> list:
        keys = []
        for name in sorted(os.listdir(self.root)):
            if not name.endswith(".json"):
                continue
            with open(os.path.join(self.root, name), "r") as f:
                data = json.load(f)
            keys.append((data['build'], data['hash']))
        return sorted(keys)

    def rebuild(self, build: str, hash: str, source: bytes = None, size: int = SIZE):
        """Replay a stored write log onto a fresh image. The caller closes it."""
        record = self.get_build(build, hash)
        if record is None:
            return None
        image = RomImage(source, size, self.logger)
        try:
            patcher.apply_patch(image, record.patch, self.logger)
        except BaseException:
            image.close()
            raise
        return image


def _is_write_log(patch) -> bool:
    return bool(patch) and all(isinstance(part, dict) and 'index' in part and 'address' in part for part in patch)
