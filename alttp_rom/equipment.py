import struct
from collections import namedtuple

from .errors import SizeMismatch, UnknownToken
from .image import SIZE
from .models.item import ItemCollection

EQUIPMENT_BASE = 0x340
EQUIPMENT_LENGTH = 0x4F
FILE_SELECT_LENGTH = 60

EQUIPMENT_OFFSET = 0x183000
FILE_SELECT_OFFSET = 0x271A6
STARTING_SWORD_OFFSET = 0x180043
MAX_BOMBS_OFFSET = 0x180034
MAX_ARROWS_OFFSET = 0x180035

SWORD = 0x359
BOTTLE_COUNT = 0x34F
BOTTLE_SLOTS = 0x35C
MAX_BOTTLES = 4
HEART_PIECES = 0x36B
MAX_HEALTH = 0x36C
HEALTH = 0x36D
ABILITIES = 0x379
DEFAULT_ABILITIES = 0b01101000
STARTING_HEALTH = 0x18
HEALTH_CAP = 0xA0


class EquipmentState:
    """Packed starting equipment, addressed by save RAM offset (0x340 - 0x38E)."""

    def __init__(self):
        self.data = bytearray(EQUIPMENT_LENGTH)
        self.rupees = 0
        self.bomb_capacity = 0
        self.arrow_capacity = 0
        self.warnings = []

    def __getitem__(self, address: int) -> int:
        return self.data[address - EQUIPMENT_BASE]

    def __setitem__(self, address: int, value: int) -> None:
        self.data[address - EQUIPMENT_BASE] = value & 0xFF

    @property
    def sword(self) -> int:
        return self[SWORD]

    def to_bytes(self) -> bytes:
        return bytes(self.data)


##########################################################################
#                           Equipment rule shapes
##########################################################################
class Set(namedtuple('Set', 'address value')):
    def apply(self, state: EquipmentState) -> None:
        state[self.address] = self.value


class Flag(namedtuple('Flag', 'address mask')):
    def apply(self, state: EquipmentState) -> None:
        state[self.address] = state[self.address] | self.mask


class Add(namedtuple('Add', 'address delta cap')):
    def apply(self, state: EquipmentState) -> None:
        value = state[self.address] + self.delta
        if self.cap is not None:
            value = min(value, self.cap)
        state[self.address] = value


class Bottle(namedtuple('Bottle', 'code')):
    def apply(self, state: EquipmentState) -> None:
        if state[BOTTLE_COUNT] < MAX_BOTTLES:
            state[BOTTLE_SLOTS + state[BOTTLE_COUNT]] = self.code
            state[BOTTLE_COUNT] += 1


class Rupees(namedtuple('Rupees', 'amount')):
    def apply(self, state: EquipmentState) -> None:
        state.rupees += self.amount


class PieceOfHeart(namedtuple('PieceOfHeart', '')):
    def apply(self, state: EquipmentState) -> None:
        pieces = state[HEART_PIECES] + 1
        if pieces >= 4:
            state[MAX_HEALTH] = min(state[MAX_HEALTH] + 0x08 * (pieces // 4), HEALTH_CAP)
            pieces %= 4
        state[HEART_PIECES] = pieces


class Capacity(namedtuple('Capacity', 'kind delta')):
    def apply(self, state: EquipmentState) -> None:
        setattr(state, self.kind, getattr(state, self.kind) + self.delta)


def _bottle(code):
    return (Bottle(code),)


def _map(address, mask):
    return (Flag(address, mask),)


ITEM_RULES = {
    'L1Sword': (Set(0x359, 0x01),),
    'L1SwordAndShield': (Set(0x359, 0x01), Set(0x35A, 0x01)),
    'L2Sword': (Set(0x359, 0x02),),
    'MasterSword': (Set(0x359, 0x02),),
    'L3Sword': (Set(0x359, 0x03),),
    'L4Sword': (Set(0x359, 0x04),),
    'BlueShield': (Set(0x35A, 0x01),),
    'RedShield': (Set(0x35A, 0x02),),
    'MirrorShield': (Set(0x35A, 0x03),),
    'FireRod': (Set(0x345, 0x01),),
    'IceRod': (Set(0x346, 0x01),),
    'Hammer': (Set(0x34B, 0x01),),
    'Hookshot': (Set(0x342, 0x01),),
    'Bow': (Set(0x340, 0x01), Flag(0x38E, 0b10000000)),
    'BowAndArrows': (Set(0x340, 0x02), Flag(0x38E, 0b10000000)),
    'SilverArrowUpgrade': (Flag(0x38E, 0b01000000),),
    'BowAndSilverArrows': (Set(0x340, 0x04), Flag(0x38E, 0b01000000)),
    'Boomerang': (Set(0x341, 0x01), Flag(0x38C, 0b10000000)),
    'RedBoomerang': (Set(0x341, 0x02), Flag(0x38C, 0b01000000)),
    'Mushroom': (Set(0x344, 0x01), Flag(0x38C, 0b00100000)),
    'Powder': (Set(0x344, 0x02), Flag(0x38C, 0b00010000)),
    'Bombos': (Set(0x347, 0x01),),
    'Ether': (Set(0x348, 0x01),),
    'Quake': (Set(0x349, 0x01),),
    'Lamp': (Set(0x34A, 0x01),),
    'Shovel': (Set(0x34C, 0x01), Flag(0x38C, 0b00000100)),
    'OcarinaInactive': (Set(0x34C, 0x02), Flag(0x38C, 0b00000010)),
    'OcarinaActive': (Set(0x34C, 0x03), Flag(0x38C, 0b00000001)),
    'CaneOfSomaria': (Set(0x350, 0x01),),
    'Bottle': _bottle(0x02),
    'BottleWithRedPotion': _bottle(0x03),
    'BottleWithGreenPotion': _bottle(0x04),
    'BottleWithBluePotion': _bottle(0x05),
    'BottleWithFairy': _bottle(0x06),
    'BottleWithBee': _bottle(0x07),
    'BottleWithGoldBee': _bottle(0x08),
    'CaneOfByrna': (Set(0x351, 0x01),),
    'Cape': (Set(0x352, 0x01),),
    'MagicMirror': (Set(0x353, 0x02),),
    'PowerGlove': (Set(0x354, 0x01),),
    'TitansMitt': (Set(0x354, 0x02),),
    'BookOfMudora': (Set(0x34E, 0x01),),
    'Flippers': (Set(0x356, 0x01), Flag(0x379, 0b00000010)),
    'MoonPearl': (Set(0x357, 0x01),),
    'BugCatchingNet': (Set(0x34D, 0x01),),
    'BlueMail': (Set(0x35B, 0x01),),
    'RedMail': (Set(0x35B, 0x02),),
    'PegasusBoots': (Set(0x355, 0x01), Flag(0x379, 0b00000100)),
    'HalfMagic': (Set(0x37B, 0x01),),
    'QuarterMagic': (Set(0x37B, 0x02),),

    'Bomb': (Add(0x343, 1, 99),),
    'ThreeBombs': (Add(0x343, 3, 99),),
    'TenBombs': (Add(0x343, 10, 99),),
    'Arrow': (Add(0x377, 1, 99),),
    'TenArrows': (Add(0x377, 10, 99),),
    'SmallMagic': (Add(0x36E, 0x10, 0x80),),
    'Heart': (Add(HEALTH, 0x08, HEALTH_CAP),),
    'HeartContainer': (Add(MAX_HEALTH, 0x08, HEALTH_CAP), Add(HEALTH, 0x08, HEALTH_CAP)),
    'HeartContainerNoAnimation': (Add(MAX_HEALTH, 0x08, HEALTH_CAP), Add(HEALTH, 0x08, HEALTH_CAP)),
    'BossHeartContainer': (Add(MAX_HEALTH, 0x08, HEALTH_CAP), Add(HEALTH, 0x08, HEALTH_CAP)),
    'PieceOfHeart': (PieceOfHeart(),),
    'ProgressiveSword': (Add(0x359, 1, 4),),
    'ProgressiveShield': (Add(0x35A, 1, 3),),
    'ProgressiveArmor': (Add(0x35B, 1, 2),),
    'ProgressiveGlove': (Add(0x354, 1, 2),),

    'OneRupee': (Rupees(1),),
    'FiveRupees': (Rupees(5),),
    'TwentyRupees': (Rupees(20),),
    'TwentyRupees2': (Rupees(20),),
    'FiftyRupees': (Rupees(50),),
    'OneHundredRupees': (Rupees(100),),
    'ThreeHundredRupees': (Rupees(300),),

    'BombUpgrade5': (Capacity('bomb_capacity', 5),),
    'BombUpgrade10': (Capacity('bomb_capacity', 10),),
    'ArrowUpgrade5': (Capacity('arrow_capacity', 5),),
    'ArrowUpgrade10': (Capacity('arrow_capacity', 10),),

    'PendantOfCourage': (Flag(0x374, 0b00000100),),
    'PendantOfWisdom': (Flag(0x374, 0b00000001),),
    'PendantOfPower': (Flag(0x374, 0b00000010),),
    'Crystal1': (Flag(0x37A, 0b00000010),),
    'Crystal2': (Flag(0x37A, 0b00010000),),
    'Crystal3': (Flag(0x37A, 0b01000000),),
    'Crystal4': (Flag(0x37A, 0b00100000),),
    'Crystal5': (Flag(0x37A, 0b00000100),),
    'Crystal6': (Flag(0x37A, 0b00000001),),
    'Crystal7': (Flag(0x37A, 0b00001000),),
}

# Dungeon item bits, low byte first: (map/compass/big key byte, bit)
DUNGEON_BITS = {
    'LW': (0, 0b00000001),
    'DW': (0, 0b00000010),
    'A2': (0, 0b00000100),
    'D7': (0, 0b00001000),
    'D4': (0, 0b00010000),
    'P3': (0, 0b00100000),
    'D5': (0, 0b01000000),
    'D3': (0, 0b10000000),
    'D6': (1, 0b00000001),
    'D1': (1, 0b00000010),
    'D2': (1, 0b00000100),
    'A1': (1, 0b00001000),
    'P2': (1, 0b00010000),
    'P1': (1, 0b00100000),
    'H1': (1, 0b01000000),
    'H2': (1, 0b10000000),
}

SMALL_KEY_COUNTERS = {
    'H2': 0x37C, 'H1': 0x37D, 'P1': 0x37E, 'P2': 0x37F, 'A1': 0x380, 'D2': 0x381, 'D1': 0x382,
    'D6': 0x383, 'D3': 0x384, 'D5': 0x385, 'P3': 0x386, 'D4': 0x387, 'D7': 0x388, 'A2': 0x389,
}

for _dungeon, (_byte, _mask) in DUNGEON_BITS.items():
    ITEM_RULES['Map' + _dungeon] = _map(0x368 + _byte, _mask)
    # the overworld maps have no compass or big key
    if _dungeon not in ('LW', 'DW'):
        ITEM_RULES['Compass' + _dungeon] = _map(0x364 + _byte, _mask)
        ITEM_RULES['BigKey' + _dungeon] = _map(0x366 + _byte, _mask)

for _dungeon, _address in SMALL_KEY_COUNTERS.items():
    ITEM_RULES['Key' + _dungeon] = (Add(_address, 1, None),)


def encode(items, logger=None) -> EquipmentState:
    """Project an ordered item collection onto the starting equipment bytes."""
    if not isinstance(items, ItemCollection):
        items = ItemCollection(items)

    state = EquipmentState()
    if items.heart_count(0) < 1:
        state[MAX_HEALTH] = STARTING_HEALTH
        state[HEALTH] = STARTING_HEALTH
    state[ABILITIES] |= DEFAULT_ABILITIES

    for item in items:
        rules = ITEM_RULES.get(item.name)
        if rules is None:
            state.warnings.append(UnknownToken("No starting equipment encoding for %s" % item.name))
            if logger:
                logger.warning("Ignoring unknown starting item %s", item.name)
            continue
        for _ in range(item.quantity):
            for rule in rules:
                rule.apply(state)

    low, high = state.rupees & 0xFF, (state.rupees >> 8) & 0xFF
    state[0x360] = state[0x362] = low
    state[0x361] = state[0x363] = high

    return state


def write_equipment(image, state: EquipmentState, swordless: bool = False, size: int = SIZE) -> None:
    if len(image) != size:
        raise SizeMismatch("Starting equipment expects a %d byte image, got %d" % (size, len(image)))

    data = state.to_bytes()
    image.write(EQUIPMENT_OFFSET, data)
    # For file select screen
    image.write(FILE_SELECT_OFFSET, data[:FILE_SELECT_LENGTH])
    image.write(MAX_ARROWS_OFFSET, struct.pack('<B', state.arrow_capacity & 0xFF))
    image.write(MAX_BOMBS_OFFSET, struct.pack('<B', state.bomb_capacity & 0xFF))

    if not swordless and state.sword:
        image.write(STARTING_SWORD_OFFSET, struct.pack('<B', state.sword))
