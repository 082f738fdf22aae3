import struct


class ShopItem:
    def __init__(self, item_id: int, price: int = 0, max: int = 0, replace_id: int = 0xFF, replace_price: int = 0):
        self.item_id = item_id
        self.price = price
        self.max = max
        self.replace_id = replace_id
        self.replace_price = replace_price

    def get_bytes(self, shop_id: int) -> list:
        return ([shop_id, self.item_id] + list(struct.pack('<H', self.price))
                + [self.max, self.replace_id] + list(struct.pack('<H', self.replace_price)))


class Shop:
    def __init__(self, room_id: int, door_id: int, config: int = 0x00, shopkeeper: int = 0xA0,
                 inventory: list = None, take_any: bool = False, active: bool = True):
        self.room_id = room_id
        self.door_id = door_id
        self.config = config
        self.shopkeeper = shopkeeper
        self.inventory = list(inventory or [])
        self.take_any = take_any
        self.active = active

    def sram_slots(self) -> int:
        # take-any caves only track whether anything was taken
        if self.take_any:
            return 1
        return len(self.inventory)

    def get_bytes(self, sram_offset: int = 0) -> list:
        return list(struct.pack('<H', self.room_id)) + [self.door_id, 0x00, self.config, self.shopkeeper, sram_offset]
