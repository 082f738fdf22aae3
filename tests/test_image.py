import os
import tempfile
from unittest import TestCase

from alttp_rom.errors import OutOfRange
from alttp_rom.image import SIZE, RomImage


class RomImageTests(TestCase):
    def setUp(self):
        self.image = RomImage()

    def tearDown(self):
        self.image.close()

    def test_BlankImageIsZeroFilled(self):
        self.assertEqual(len(self.image), SIZE)
        self.assertEqual(self.image.read(0), 0x00)
        self.assertEqual(self.image.read(SIZE - 16, 16), bytes(16))

    def test_SourceDataIsPaddedToSize(self):
        with RomImage(b"\x01\x02\x03", 8) as image:
            self.assertEqual(image.getvalue(), b"\x01\x02\x03" + bytes(5))

    def test_WriteThenRead(self):
        for offset, data in [(0, b"\xAA"), (0x7FC0, b"ZELDA"), (SIZE - 4, b"\x01\x02\x03\x04")]:
            self.image.write(offset, data)
            if len(data) == 1:
                self.assertEqual(self.image.read(offset), data[0])
            else:
                self.assertEqual(self.image.read(offset, len(data)), data)

    def test_WriteLogRecordsOrder(self):
        self.image.write(0x10, b"\x01\x02")
        self.image.write(0x05, b"\x03")
        self.image.write(0x20, b"\x04", log=False)

        log = self.image.get_write_log()
        self.assertEqual(log, [
            {'index': 0, 'address': 0x10, 'data': [1, 2]},
            {'index': 1, 'address': 0x05, 'data': [3]},
        ])

    def test_WriteLogIsACopy(self):
        self.image.write(0, b"\x01")
        self.image.get_write_log()[0]['data'].append(9)
        self.assertEqual(self.image.get_write_log()[0]['data'], [1])

    def test_WritePastEndRaises(self):
        with self.assertRaises(OutOfRange):
            self.image.write(SIZE - 1, b"\x00\x00")
        with self.assertRaises(OutOfRange):
            self.image.write(-1, b"\x00")
        self.assertEqual(self.image.get_write_log(), [])

    def test_ReadPastEndRaises(self):
        with self.assertRaises(OutOfRange):
            self.image.read(SIZE - 1, 2)

    def test_Resize(self):
        self.image.write(0x100, b"\xFF")
        self.image.resize(0x200)
        self.assertEqual(len(self.image), 0x200)
        self.image.resize(0x400)
        self.assertEqual(self.image.read(0x100), 0xFF)
        self.assertEqual(self.image.read(0x300), 0x00)

    def test_FingerprintTracksContent(self):
        blank = self.image.fingerprint()
        self.image.write(0, b"\x01")
        self.assertNotEqual(blank, self.image.fingerprint())

    def test_Save(self):
        self.image.write(0x1234, b"\xAB")
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "out.sfc")
            self.image.save(path)
            with open(path, "rb") as f:
                data = f.read()
            self.assertEqual(len(data), SIZE)
            self.assertEqual(data[0x1234], 0xAB)
            self.assertEqual(os.listdir(directory), ["out.sfc"])

    def test_CloseReleasesBackingFile(self):
        with RomImage() as image:
            pass
        self.assertTrue(image.closed)

    def test_CloseOnError(self):
        try:
            with RomImage() as image:
                raise ValueError("abandoned")
        except ValueError:
            pass
        self.assertTrue(image.closed)
