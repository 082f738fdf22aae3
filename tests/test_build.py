import tempfile
from unittest import TestCase

from alttp_rom.build import BuildRegistry
from alttp_rom.image import RomImage


class BuildRegistryTests(TestCase):
    def setUp(self):
        self.directory = tempfile.TemporaryDirectory()
        self.registry = BuildRegistry(self.directory.name)

    def tearDown(self):
        self.directory.cleanup()

    def test_SaveAndGet(self):
        self.registry.save_build([{"100": [1, 2]}], "2018-10-18", "abc")
        record = self.registry.get_build("2018-10-18", "abc")

        self.assertEqual(record.build, "2018-10-18")
        self.assertEqual(record.hash, "abc")
        self.assertEqual(record.patch, [{"100": [1, 2]}])

    def test_LookupIsExact(self):
        self.registry.save_build([], "2018-10-18", "abc")
        self.assertIsNone(self.registry.get_build("2018-10-18", "abd"))
        self.assertIsNone(self.registry.get_build("2018/10/18", "abc"))

    def test_UpsertOverwrites(self):
        self.registry.save_build([{"1": [1]}], "b", "h")
        self.registry.save_build([{"2": [2]}], "b", "h")
        self.assertEqual(self.registry.get_build("b", "h").patch, [{"2": [2]}])
        self.assertEqual(self.registry.builds(), [("b", "h")])

    def test_WriteLogIsStoredAsPatch(self):
        with RomImage() as image:
            image.write(0x7FC0, b"\x5A")
            image.write(0x7FC1, b"\x45\x4C")
            self.registry.save_build(image.get_write_log(), "b", "h")

            with self.registry.rebuild("b", "h") as rebuilt:
                self.assertEqual(rebuilt.fingerprint(), image.fingerprint())

    def test_RebuildUnknownBuild(self):
        self.assertIsNone(self.registry.rebuild("missing", "nothing"))

    def test_SimilarKeysKeptApart(self):
        self.registry.save_build([{"1": [1]}], "2018-10-18", "a_b")
        self.registry.save_build([{"2": [2]}], "2018-10-18_a", "b")
        self.registry.save_build([{"3": [3]}], "2018/10/18", "a_b")

        self.assertEqual(self.registry.get_build("2018-10-18", "a_b").patch, [{"1": [1]}])
        self.assertEqual(self.registry.get_build("2018-10-18_a", "b").patch, [{"2": [2]}])
        self.assertEqual(self.registry.get_build("2018/10/18", "a_b").patch, [{"3": [3]}])
        self.assertEqual(self.registry.builds(),
                         [("2018-10-18", "a_b"), ("2018-10-18_a", "b"), ("2018/10/18", "a_b")])
