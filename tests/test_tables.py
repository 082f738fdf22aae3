import struct
from unittest import TestCase

from alttp_rom import tables
from alttp_rom.errors import CapacityExceeded
from alttp_rom.image import RomImage
from alttp_rom.models.shop import Shop, ShopItem


class SubstitutionTableTests(TestCase):
    def test_SentinelAlwaysAppended(self):
        self.assertEqual(tables.substitution_bytes([]), b"\xFF\xFF\xFF\xFF")
        data = tables.substitution_bytes([[0x12, 0x01, 0x35, 0xFF], [0x0C, 0x01, 0x44, 0xFF]])
        self.assertEqual(len(data), 12)
        self.assertTrue(data.endswith(b"\xFF\xFF\xFF\xFF"))

    def test_FlatRowsAccepted(self):
        self.assertEqual(tables.substitution_bytes([0x12, 0x01, 0x35, 0xFF]), b"\x12\x01\x35\xFF" + b"\xFF" * 4)

    def test_Write(self):
        with RomImage() as image:
            tables.write_substitutions(image, [[0x2A, 0x01, 0x46, 0xFF]])
            self.assertEqual(image.read(0x184000, 8), b"\x2A\x01\x46\xFF\xFF\xFF\xFF\xFF")


class ShopTableTests(TestCase):
    def test_ShopBytes(self):
        shop = Shop(0x0110, 0x5D, config=0x04, inventory=[ShopItem(0x2E, 150), ShopItem(0x31, 50, 3, 0x44, 10)])
        shop_data, items_data = tables.shop_bytes([shop])

        self.assertEqual(shop_data, bytes([0xFF, 0x10, 0x01, 0x5D, 0x00, 0x04, 0xA0, 0x00]))
        self.assertEqual(items_data, bytes([
            0xFF, 0x2E, 0x96, 0x00, 0x00, 0xFF, 0x00, 0x00,
            0xFF, 0x31, 0x32, 0x00, 0x03, 0x44, 0x0A, 0x00,
        ]) + b"\xFF" * 8)

    def test_ShopIdsAndSramOffsets(self):
        shops = [Shop(0x00FF, 0x01, inventory=[ShopItem(1), ShopItem(2), ShopItem(3)]),
                 Shop(0x0100, 0x02, take_any=True, inventory=[ShopItem(4), ShopItem(5)]),
                 Shop(0x0101, 0x03, inventory=[ShopItem(6)], active=False),
                 Shop(0x0102, 0x04, inventory=[ShopItem(7)])]
        shop_data, _ = tables.shop_bytes(shops)

        rows = [shop_data[i:i + 8] for i in range(0, len(shop_data), 8)]
        self.assertEqual(len(rows), 3)
        self.assertEqual([row[0] for row in rows], [0x00, 0x01, 0xFF])
        self.assertEqual([row[7] for row in rows], [0, 3, 4])

    def test_TooManySlotsRaises(self):
        shops = [Shop(0x0100 + i, i, inventory=[ShopItem(1), ShopItem(2), ShopItem(3)]) for i in range(13)]
        with self.assertRaises(CapacityExceeded):
            tables.shop_bytes(shops)

    def test_ThirtySixSlotsFit(self):
        shops = [Shop(0x0100 + i, i, inventory=[ShopItem(1), ShopItem(2), ShopItem(3)]) for i in range(12)]
        with RomImage() as image:
            tables.write_shops(image, shops)
            self.assertEqual(image.read(0x184800 + 11 * 8), 0xFF)
            self.assertEqual(image.read(0x184800 + 11 * 8 + 7), 33)
            self.assertEqual(image.read(0x184900), 0x00)

    def test_ThirtyTwoShopsFit(self):
        shops = [Shop(0x0100 + i, i, inventory=[ShopItem(i)]) for i in range(32)]
        with RomImage() as image:
            tables.write_shops(image, shops)
            self.assertEqual(image.read(0x184800 + 31 * 8), 0xFF)
            self.assertEqual(image.read(0x184800 + 31 * 8 + 1, 2), b"\x1F\x01")

    def test_TooManyShopRowsRaises(self):
        shops = [Shop(0x0100 + i, i, inventory=[ShopItem(i)]) for i in range(33)]
        with RomImage() as image:
            with self.assertRaises(CapacityExceeded):
                tables.write_shops(image, shops)
            self.assertEqual(image.get_write_log(), [])


class PrizeTableTests(TestCase):
    def test_BonkPrizesFromTheEnd(self):
        with RomImage() as image:
            tables.write_overworld_bonk_prizes(image, [0x10, 0x20])
            self.assertEqual(image.read(0x4CF6C), 0x20)
            self.assertEqual(image.read(0x4CFBA), 0x10)
            self.assertEqual(image.read(0x4CFE0), 0x03)
            self.assertEqual(len(image.get_write_log()), 62)

    def test_ChancePrizesDefault(self):
        with RomImage() as image:
            tables.write_chance_prizes(image)
            self.assertEqual(image.read(0xEED5, 32), bytes(tables.CHANCE_PRIZES))

    def test_ChancePrizesWrongLength(self):
        with RomImage() as image:
            with self.assertRaises(CapacityExceeded):
                tables.write_chance_prizes(image, [0x34] * 31)

    def test_RngTables(self):
        with RomImage() as image:
            tables.write_rng_table(image, [0x0B, 0x0C])
            tables.write_rng_table(image, [0x22], multi=True)
            self.assertEqual(image.read(0x182000, 2), b"\x0B\x0C")
            self.assertEqual(image.read(0x18207F), 2)
            self.assertEqual(image.read(0x182080), 0x22)
            self.assertEqual(image.read(0x1820FF), 1)

    def test_RngTableBounded(self):
        with RomImage() as image:
            with self.assertRaises(CapacityExceeded):
                tables.write_rng_table(image, [0x01] * 0x80)


class TextTableTests(TestCase):
    def test_TerminatedBlob(self):
        text = tables.TextTable()
        text.set_string('uncle_leaving_text', b"\x10\x11")
        text.set_string('blind_by_the_light', b"\x12")
        self.assertEqual(text.get_byte_array(), b"\x10\x11\x12\xFF")

        text.remove('uncle_leaving_text')
        self.assertEqual(text.get_byte_array(), b"\x12\xFF")

    def test_RegionBounded(self):
        text = tables.TextTable({'big': bytes(0x8000)})
        with self.assertRaises(CapacityExceeded):
            text.get_byte_array()


class CreditsTableTests(TestCase):
    def test_PointersAreBlobOffsets(self):
        credits = tables.CreditsTable()
        credits.update_credit_line('castle', 0, b"\x01\x02\x03")
        credits.update_credit_line('castle', 1, b"\x04")
        credits.update_credit_line('sanctuary', 0, b"\x05\x06")

        binary = credits.get_binary_data()
        self.assertEqual(binary['data'], b"\x01\x02\x03\x04\x05\x06")
        self.assertEqual(binary['pointers'], [0, 3, 4])

    def test_WriteCredits(self):
        credits = tables.CreditsTable({'castle': [b"\xAA\xBB", b"\xCC"]})
        with RomImage() as image:
            tables.write_credits(image, credits)
            self.assertEqual(image.read(0x181500, 3), b"\xAA\xBB\xCC")
            self.assertEqual(image.read(0x76CC0, 4), struct.pack('<HH', 0, 2))
