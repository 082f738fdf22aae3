import struct

from .errors import CapacityExceeded

SUBSTITUTION_OFFSET = 0x184000
SUBSTITUTION_SENTINEL = [0xFF, 0xFF, 0xFF, 0xFF]

SHOP_TABLE_OFFSET = 0x184800
SHOP_ITEMS_OFFSET = 0x184900
SHOP_ITEMS_SENTINEL = [0xFF] * 8
SHOP_SRAM_SLOTS = 36
SHOP_ROW_SIZE = 8
SHOP_TABLE_ROWS = (SHOP_ITEMS_OFFSET - SHOP_TABLE_OFFSET) // SHOP_ROW_SIZE

SINGLE_RNG_OFFSET = 0x182000
SINGLE_RNG_COUNT_OFFSET = 0x18207F
MULTI_RNG_OFFSET = 0x182080
MULTI_RNG_COUNT_OFFSET = 0x1820FF
RNG_TABLE_SLOTS = 0x7F

TEXT_OFFSET = 0xE0000
TEXT_REGION_SIZE = 0x8000
TEXT_TERMINATOR = 0xFF

CREDITS_OFFSET = 0x181500
CREDITS_POINTERS_OFFSET = 0x76CC0
CREDITS_REGION_SIZE = 0x1000

DIG_PRIZES_OFFSET = 0x180100
CHANCE_PRIZES_OFFSET = 0xEED5
EMPTY_BONK_PRIZE = 0x03

OVERWORLD_BONK_ADDRESSES = [
    0x4CF6C, 0x4CFBA, 0x4CFE0, 0x4CFFB, 0x4D018, 0x4D01B, 0x4D028, 0x4D03C,
    0x4D059, 0x4D07A, 0x4D09E, 0x4D0A8, 0x4D0AB, 0x4D0AE, 0x4D0BE, 0x4D0DD,
    0x4D16A, 0x4D1E5, 0x4D1EE, 0x4D20B, 0x4CBBF, 0x4CBBF, 0x4CC17, 0x4CC1A,
    0x4CC4A, 0x4CC4D, 0x4CC53, 0x4CC69, 0x4CC6F, 0x4CC7C, 0x4CCEF, 0x4CD51,
    0x4CDC0, 0x4CDC3, 0x4CDC6, 0x4CE37, 0x4D2DE, 0x4D32F, 0x4D355, 0x4D367,
    0x4D384, 0x4D387, 0x4D397, 0x4D39E, 0x4D3AB, 0x4D3AE, 0x4D3D1, 0x4D3D7,
    0x4D3F8, 0x4D416, 0x4D420, 0x4D423, 0x4D42D, 0x4D449, 0x4D48C, 0x4D4D9,
    0x4D4DC, 0x4D4E3, 0x4D504, 0x4D507, 0x4D55E, 0x4D56A,
]

CHANCE_PRIZES = [
    # high stakes game
    0x47, 0x34, 0x46, 0x34, 0x46, 0x46, 0x34, 0x47,
    0x46, 0x47, 0x34, 0x46, 0x47, 0x34, 0x46, 0x47,
    # low stakes game
    0x34, 0x47, 0x41, 0x47, 0x41, 0x41, 0x47, 0x34,
    0x41, 0x34, 0x47, 0x41, 0x34, 0x47, 0x41, 0x34,
]


##########################################################################
#                            Substitutions
##########################################################################
def substitution_bytes(substitutions) -> bytes:
    """Flatten [id, max, replace id, 0xFF] rows and close the table with the sentinel row."""
    flat = []
    for entry in substitutions:
        if isinstance(entry, int):
            flat.append(entry)
        else:
            flat.extend(entry)
    return bytes(flat + SUBSTITUTION_SENTINEL)


def write_substitutions(image, substitutions=()) -> None:
    image.write(SUBSTITUTION_OFFSET, substitution_bytes(substitutions))


##########################################################################
#                                Shops
##########################################################################
def shop_bytes(shops) -> tuple:
    shops = [shop for shop in shops if shop.active]
    if len(shops) > SHOP_TABLE_ROWS:
        raise CapacityExceeded("Too many shops (%d > %d)" % (len(shops), SHOP_TABLE_ROWS))

    shop_data = []
    items_data = []
    sram_offset = 0x00
    for shop_id, shop in enumerate(shops):
        if shop_id == len(shops) - 1:
            shop_id = 0xFF
        shop_data += [shop_id] + shop.get_bytes(sram_offset)
        sram_offset += shop.sram_slots()

        if sram_offset > SHOP_SRAM_SLOTS:
            raise CapacityExceeded("Exceeded SRAM indexing for shops (%d > %d)" % (sram_offset, SHOP_SRAM_SLOTS))

        for item in shop.inventory:
            items_data += item.get_bytes(shop_id)

    return bytes(shop_data), bytes(items_data + SHOP_ITEMS_SENTINEL)


def write_shops(image, shops) -> None:
    shop_data, items_data = shop_bytes(shops)
    image.write(SHOP_TABLE_OFFSET, shop_data)
    image.write(SHOP_ITEMS_OFFSET, items_data)


##########################################################################
#                             Prize tables
##########################################################################
def write_overworld_bonk_prizes(image, prizes=()) -> None:
    # prizes are taken from the end of the list, missing ones leave the tree empty
    prizes = list(prizes)
    for address in OVERWORLD_BONK_ADDRESSES:
        item = prizes.pop() if prizes else EMPTY_BONK_PRIZE
        image.write(address, bytes([item]))


def write_overworld_dig_prizes(image, prizes=()) -> None:
    image.write(DIG_PRIZES_OFFSET, bytes(prizes))


def write_chance_prizes(image, prizes=None) -> None:
    if not prizes:
        prizes = CHANCE_PRIZES
    if len(prizes) != len(CHANCE_PRIZES):
        raise CapacityExceeded("Chance games take exactly %d prizes, got %d" % (len(CHANCE_PRIZES), len(prizes)))
    image.write(CHANCE_PRIZES_OFFSET, bytes(prizes))


def write_rng_table(image, item_bytes, multi: bool = False) -> None:
    """Single RNG items are collected once per game, multi RNG items can repeat."""
    item_bytes = list(item_bytes)
    if len(item_bytes) > RNG_TABLE_SLOTS:
        raise CapacityExceeded("RNG item table holds %d items, got %d" % (RNG_TABLE_SLOTS, len(item_bytes)))

    if multi:
        image.write(MULTI_RNG_OFFSET, bytes(item_bytes))
        image.write(MULTI_RNG_COUNT_OFFSET, bytes([len(item_bytes)]))
    else:
        image.write(SINGLE_RNG_OFFSET, bytes(item_bytes))
        image.write(SINGLE_RNG_COUNT_OFFSET, bytes([len(item_bytes)]))


##########################################################################
#                             Text & credits
##########################################################################
class TextTable:
    """Dialogue strings keyed by name, already encoded to game glyphs."""

    def __init__(self, strings=None):
        self.strings = dict(strings or {})

    def set_string(self, key: str, data: bytes) -> None:
        self.strings[key] = bytes(data)

    def remove(self, key: str) -> None:
        self.strings.pop(key, None)

    def get_byte_array(self) -> bytes:
        blob = b"".join(self.strings.values()) + bytes([TEXT_TERMINATOR])
        if len(blob) > TEXT_REGION_SIZE:
            raise CapacityExceeded("Text table is 0x%X bytes, region holds 0x%X" % (len(blob), TEXT_REGION_SIZE))
        return blob


class CreditsTable:
    """Credit lines grouped by scene; every line gets a pointer into the blob."""

    def __init__(self, scenes=None):
        self.scenes = {}
        for scene, lines in (scenes or {}).items():
            self.scenes[scene] = [bytes(line) for line in lines]

    def update_credit_line(self, scene: str, line: int, data: bytes) -> None:
        lines = self.scenes.setdefault(scene, [])
        while len(lines) <= line:
            lines.append(b"")
        lines[line] = bytes(data)

    def get_binary_data(self) -> dict:
        data = bytearray()
        pointers = []
        for lines in self.scenes.values():
            for line in lines:
                pointers.append(len(data))
                data += line

        if len(data) > CREDITS_REGION_SIZE:
            raise CapacityExceeded("Credits are 0x%X bytes, region holds 0x%X" % (len(data), CREDITS_REGION_SIZE))

        return {'data': bytes(data), 'pointers': pointers}


def write_text(image, text: TextTable) -> None:
    image.write(TEXT_OFFSET, text.get_byte_array())


def write_credits(image, credits: CreditsTable) -> None:
    binary = credits.get_binary_data()
    image.write(CREDITS_OFFSET, binary['data'])
    image.write(CREDITS_POINTERS_OFFSET, struct.pack('<%dH' % len(binary['pointers']), *binary['pointers']))
