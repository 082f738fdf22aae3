import json
import os
import tempfile
from unittest import TestCase

from alttp_rom import patcher
from alttp_rom.errors import OutOfRange, SourceUnreadable
from alttp_rom.image import RomImage


class PatchApplyTests(TestCase):
    def test_ParseOffset(self):
        self.assertEqual(patcher.parse_offset(1234), 1234)
        self.assertEqual(patcher.parse_offset("1234"), 1234)
        self.assertEqual(patcher.parse_offset("0x7FC0"), 0x7FC0)

    def test_PartsReplayInOrder(self):
        patch = [{"100": [1, 2, 3]}, {"0x64": [9]}, {"200": [4], "300": [5]}]
        with RomImage() as image:
            self.assertEqual(patcher.apply_patch(image, patch), 4)

            self.assertEqual(image.read(100, 3), b"\x09\x02\x03")
            self.assertEqual([r['address'] for r in image.get_write_log()], [100, 100, 200, 300])

    def test_LegacyRecordsReplayByIndex(self):
        patch = [{'index': 1, 'address': 10, 'data': [2]}, {'index': 0, 'address': 10, 'data': [1]}]
        with RomImage() as image:
            patcher.apply_patch(image, patch)
            self.assertEqual(image.read(10), 2)

    def test_OutOfRangeAborts(self):
        with RomImage(size=0x100) as image:
            with self.assertRaises(OutOfRange):
                patcher.apply_patch(image, [{"0xFF": [1, 2]}])

    def test_WriteLogReplayReproducesImage(self):
        with RomImage() as image:
            image.write(0x10, b"\x01\x02")
            image.write(0x11, b"\x03")
            image.write(0x1FFFFF, b"\x04")
            patch = patcher.log_to_patch(image.get_write_log())

            with RomImage() as replay:
                patcher.apply_patch(replay, patch)
                self.assertEqual(replay.fingerprint(), image.fingerprint())

    def test_LogToPatchSurvivesJson(self):
        patch = patcher.log_to_patch([{'index': 0, 'address': 0x7FC0, 'data': [0x5A]}])
        with RomImage() as image:
            patcher.apply_patch(image, json.loads(patcher.dumps(patch)))
            self.assertEqual(image.read(0x7FC0), 0x5A)


class PatchFileTests(TestCase):
    def setUp(self):
        self.directory = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.directory.cleanup()

    def test_ApplyPatchFile(self):
        path = os.path.join(self.directory.name, "base.json")
        with open(path, "w") as f:
            json.dump([{"32704": [0x5A, 0x45]}], f)

        with RomImage() as image:
            patcher.apply_patch_file(image, path)
            self.assertEqual(image.read(0x7FC0, 2), b"ZE")

    def test_MissingFileRaises(self):
        with self.assertRaises(SourceUnreadable):
            patcher.load_patch_file(os.path.join(self.directory.name, "missing.json"))

    def test_UndecodableFileRaises(self):
        path = os.path.join(self.directory.name, "broken.json")
        with open(path, "w") as f:
            f.write("{not json")
        with self.assertRaises(SourceUnreadable):
            patcher.load_patch_file(path)

    def write_json(self, name, document):
        path = os.path.join(self.directory.name, name)
        with open(path, "w") as f:
            json.dump(document, f)
        return path

    def test_TopLevelObjectRaises(self):
        path = self.write_json("object.json", {"100": [1]})
        with self.assertRaises(SourceUnreadable):
            patcher.load_patch_file(path)

    def test_BadOffsetRaises(self):
        path = self.write_json("offset.json", [{"here": [1]}])
        with self.assertRaises(SourceUnreadable):
            patcher.load_patch_file(path)

    def test_BadByteRaisesBeforeAnyWrite(self):
        path = self.write_json("byte.json", [{"100": [1]}, {"200": [300]}])
        with RomImage() as image:
            with self.assertRaises(SourceUnreadable):
                patcher.apply_patch_file(image, path)
            self.assertEqual(image.read(100), 0)
            self.assertEqual(image.get_write_log(), [])

    def test_LegacyRecordsFileLoads(self):
        path = self.write_json("legacy.json", [{"index": 0, "address": 10, "data": [7]}])
        with RomImage() as image:
            patcher.apply_patch_file(image, path)
            self.assertEqual(image.read(10), 7)

    def test_MissingIpsFileRaises(self):
        with self.assertRaises(SourceUnreadable):
            patcher.load_patch_file(os.path.join(self.directory.name, "missing.ips"))


class BinaryPatchTests(TestCase):
    def setUp(self):
        self.original = bytes(0x1000)
        patched = bytearray(self.original)
        patched[0x100:0x104] = b"\x01\x02\x03\x04"
        patched[0x800:0x820] = b"\xEE" * 0x20
        self.patched = bytes(patched)

    def test_DiffPatchReplaysDifferences(self):
        parts = patcher.diff_patch(self.original, self.patched)
        with RomImage(self.original, len(self.original)) as image:
            patcher.apply_patch(image, parts)
            self.assertEqual(image.getvalue(), self.patched)

    def test_IpsFileLoadsAsParts(self):
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "seed.ips")
            with open(path, "wb") as f:
                f.write(patcher.create_ips(self.original, self.patched))

            parts = patcher.ips_to_patch(path)
            self.assertTrue(parts)
            self.assertTrue(all(isinstance(part, dict) for part in parts))

            with RomImage(self.original, len(self.original)) as image:
                patcher.apply_patch_file(image, path)
                self.assertEqual(image.getvalue(), self.patched)

    def test_Bsdiff(self):
        diff = patcher.create_bsdiff(self.original, self.patched)
        self.assertEqual(patcher.apply_bsdiff(self.original, diff), self.patched)
