from unittest import TestCase

from alttp_rom.models.enums import HeartColor, WeaponsMode
from alttp_rom.models.item import ItemCollection, ItemToken
from alttp_rom.models.rom_settings import RomSettings
from alttp_rom.models.shop import Shop, ShopItem


class ItemCollectionTests(TestCase):
    def test_HeartCount(self):
        items = ItemCollection(['BossHeartContainer', 'PieceOfHeart', 'PieceOfHeart'])
        items.add('HeartContainer', 2)
        self.assertEqual(items.heart_count(), 3.5)
        self.assertEqual(items.heart_count(3), 6.5)

    def test_OrderKept(self):
        items = ItemCollection(['Bottle', ItemToken('Arrow', 10), 'Lamp'])
        self.assertEqual([item.name for item in items], ['Bottle', 'Arrow', 'Lamp'])
        self.assertEqual(items.count('Arrow'), 10)
        self.assertEqual(len(items), 3)


class ShopModelTests(TestCase):
    def test_TakeAnyUsesOneSlot(self):
        shop = Shop(0x0112, 0x58, take_any=True, inventory=[ShopItem(0x2E), ShopItem(0x2F)])
        self.assertEqual(shop.sram_slots(), 1)
        self.assertEqual(shop.get_bytes(7), [0x12, 0x01, 0x58, 0x00, 0x00, 0xA0, 0x07])


class RomSettingsTests(TestCase):
    def test_Defaults(self):
        settings = RomSettings()
        self.assertEqual(settings.heart_color, HeartColor.RED)
        self.assertEqual(settings.required_crystals, 7)
        self.assertFalse(settings.swordless)

    def test_FromDictAcceptsBothKeyStyles(self):
        settings = RomSettings.from_dict({'heart_color': 'blue', 'menuSpeed': 'fast', 'hardMode': 2, 'unknownKey': 1})
        self.assertEqual(settings.heart_color, 'blue')
        self.assertEqual(settings.menu_speed, 'fast')
        self.assertEqual(settings.hard_mode, 2)
        self.assertFalse(hasattr(settings, 'unknown_key'))

    def test_Swordless(self):
        self.assertTrue(RomSettings(weapons=WeaponsMode.SWORDLESS).swordless)
