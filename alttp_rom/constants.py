import base64
import struct


def snes_to_pc(address: int) -> int:
    """LoROM bus address to file offset."""
    return ((address & 0x7F0000) >> 1) | (address & 0x7FFF)


def _w(*words) -> bytes:
    return struct.pack('<%dH' % len(words), *words)


def _b(*values) -> bytes:
    return bytes(values)


##########################################################################
#                            Music volumes
##########################################################################
# original volume byte -> track addresses carrying it
MUSIC_VOLUME_TRACKS = {
    0x00: [0xD373B, 0xD375B, 0xD90F8],
    0x14: [0xDA710, 0xDA7A4, 0xDA7BB, 0xDA7D2],
    0x3C: [0xD5954, 0xD653B, 0xDA736, 0xDA752, 0xDA772, 0xDA792],
    0x50: [0xD5B47, 0xD5B5E],
    0x5A: [0xD4306],
    0x64: [0xD6878, 0xD6883, 0xD6E48, 0xD6E76, 0xD6EFB, 0xD6F2D, 0xDA211, 0xDA35B, 0xDA37B, 0xDA38E,
        0xDA39F, 0xDA5C3, 0xDA691, 0xDA6A8, 0xDA6DF],
    0x78: [0xD2349, 0xD3F45, 0xD42EB, 0xD48B9, 0xD48FF, 0xD543F, 0xD5817, 0xD5957, 0xD5ACB, 0xD5AE8,
        0xD5B4A, 0xDA5DE, 0xDA608, 0xDA635, 0xDA662, 0xDA71F, 0xDA7AF, 0xDA7C6, 0xDA7DD],
    0x82: [0xD2F00, 0xDA3D5],
    0xA0: [0xD249C, 0xD24CD, 0xD2C09, 0xD2C53, 0xD2CAF, 0xD2CEB, 0xD2D91, 0xD2EE6, 0xD38ED, 0xD3C91,
        0xD3CD3, 0xD3CE8, 0xD3F0C, 0xD3F82, 0xD405F, 0xD4139, 0xD4198, 0xD41D5, 0xD41F6, 0xD422B, 0xD4270,
        0xD42B1, 0xD4334, 0xD4371, 0xD43A6, 0xD43DB, 0xD441E, 0xD4597, 0xD4B3C, 0xD4BAB, 0xD4C03, 0xD4C53,
        0xD4C7F, 0xD4D9C, 0xD5424, 0xD65D2, 0xD664F, 0xD6698, 0xD66FF, 0xD6985, 0xD6C5C, 0xD6C6F, 0xD6C8E,
        0xD6CB4, 0xD6D7D, 0xD827D, 0xD960C, 0xD9828, 0xDA233, 0xDA3A2, 0xDA49E, 0xDA72B, 0xDA745, 0xDA765,
        0xDA785, 0xDABF6, 0xDAC0D, 0xDAEBE, 0xDAFAC],
    0xAA: [0xD9A02, 0xD9BD6],
    0xB4: [0xD21CD, 0xD2279, 0xD2E66, 0xD2E70, 0xD2EAB, 0xD3B97, 0xD3BAC, 0xD3BE8, 0xD3C0D, 0xD3C39,
        0xD3C68, 0xD3C9F, 0xD3CBC, 0xD401E, 0xD4290, 0xD443E, 0xD456F, 0xD47D3, 0xD4D43, 0xD4DCC, 0xD4EBA,
        0xD4F0B, 0xD4FE5, 0xD5012, 0xD54BC, 0xD54D5, 0xD54F0, 0xD5509, 0xD57D8, 0xD59B9, 0xD5A2F, 0xD5AEB,
        0xD5E5E, 0xD5FE9, 0xD658F, 0xD674A, 0xD6827, 0xD69D6, 0xD69F5, 0xD6A05, 0xD6AE9, 0xD6DCF, 0xD6E20,
        0xD6ECB, 0xD71D4, 0xD71E6, 0xD7203, 0xD721E, 0xD8724, 0xD8732, 0xD9652, 0xD9698, 0xD9CBC, 0xD9DC0,
        0xD9E49, 0xDAA68, 0xDAA77, 0xDAA88, 0xDAA99, 0xDAF04],
    0x8C: [0xD1D28, 0xD1D41, 0xD1D5C, 0xD1D77, 0xD1EEE, 0xD311D, 0xD31D1, 0xD4148, 0xD5543, 0xD5B6F,
        0xD65B3, 0xD6760, 0xD6B6B, 0xD6DF6, 0xD6E0D, 0xD73A1, 0xD814C, 0xD825D, 0xD82BE, 0xD8340, 0xD8394,
        0xD842C, 0xD8796, 0xD8903, 0xD892A, 0xD91E8, 0xD922B, 0xD92E0, 0xD937E, 0xD93C1, 0xDA958, 0xDA971,
        0xDA98C, 0xDA9A7],
    0xC8: [0xD1D92, 0xD1DBD, 0xD1DEB, 0xD1F5D, 0xD1F9F, 0xD1FBD, 0xD1FDC, 0xD1FEA, 0xD20CA, 0xD21BB,
        0xD22C9, 0xD2754, 0xD284C, 0xD2866, 0xD2887, 0xD28A0, 0xD28BA, 0xD28DB, 0xD28F4, 0xD293E, 0xD2BF3,
        0xD2C1F, 0xD2C69, 0xD2CA1, 0xD2CC5, 0xD2D05, 0xD2D73, 0xD2DAF, 0xD2E3D, 0xD2F36, 0xD2F46, 0xD2F6F,
        0xD2FCF, 0xD2FDF, 0xD302B, 0xD3086, 0xD3099, 0xD30A5, 0xD30CD, 0xD30F6, 0xD3154, 0xD3184, 0xD333A,
        0xD33D9, 0xD349F, 0xD354A, 0xD35E5, 0xD3624, 0xD363C, 0xD3672, 0xD3691, 0xD36B4, 0xD36C6, 0xD3724,
        0xD3767, 0xD38CB, 0xD3B1D, 0xD3B2F, 0xD3B55, 0xD3B70, 0xD3B81, 0xD3BBF, 0xD3F65, 0xD3FA6, 0xD404F,
        0xD4087, 0xD417A, 0xD41A0, 0xD425C, 0xD4319, 0xD433C, 0xD43EF, 0xD440C, 0xD4452, 0xD4494, 0xD44B5,
        0xD4512, 0xD45D1, 0xD45EF, 0xD4682, 0xD46C3, 0xD483C, 0xD4848, 0xD4855, 0xD4862, 0xD486F, 0xD487C,
        0xD4A1C, 0xD4A3B, 0xD4A60, 0xD4B27, 0xD4C7A, 0xD4D12, 0xD4D81, 0xD4E90, 0xD4ED6, 0xD4EE2, 0xD5005,
        0xD502E, 0xD503C, 0xD5081, 0xD51B1, 0xD51C7, 0xD51CF, 0xD51EF, 0xD520C, 0xD5214, 0xD5231, 0xD5257,
        0xD526D, 0xD5275, 0xD52AF, 0xD52BD, 0xD52CD, 0xD52DB, 0xD549C, 0xD5801, 0xD58A4, 0xD5A68, 0xD5A7F,
        0xD5C12, 0xD5D71, 0xD5E10, 0xD5E9A, 0xD5F8B, 0xD5FA4, 0xD651A, 0xD6542, 0xD65ED, 0xD661D, 0xD66D7,
        0xD6776, 0xD68BD, 0xD68E5, 0xD6956, 0xD6973, 0xD69A8, 0xD6A51, 0xD6A86, 0xD6B96, 0xD6C3E, 0xD6D4A,
        0xD6E9C, 0xD6F80, 0xD717E, 0xD7190, 0xD71B9, 0xD811D, 0xD8139, 0xD816B, 0xD818A, 0xD819E, 0xD81BE,
        0xD829C, 0xD82E1, 0xD8306, 0xD830E, 0xD835E, 0xD83AB, 0xD83CA, 0xD83F0, 0xD83F8, 0xD844B, 0xD8479,
        0xD849E, 0xD84CB, 0xD84EB, 0xD84F3, 0xD854A, 0xD8573, 0xD859D, 0xD85B4, 0xD85CE, 0xD862A, 0xD8681,
        0xD87E3, 0xD87FF, 0xD887B, 0xD88C6, 0xD88E3, 0xD8944, 0xD897B, 0xD8C97, 0xD8CA4, 0xD8CB3, 0xD8CC2,
        0xD8CD1, 0xD8D01, 0xD917B, 0xD918C, 0xD919A, 0xD91B5, 0xD91D0, 0xD91DD, 0xD9220, 0xD9273, 0xD9284,
        0xD9292, 0xD92AD, 0xD92C8, 0xD92D5, 0xD9311, 0xD9322, 0xD9330, 0xD934B, 0xD9366, 0xD9373, 0xD93B6,
        0xD97A6, 0xD97C2, 0xD97DC, 0xD97FB, 0xD9811, 0xD98FF, 0xD996F, 0xD99A8, 0xD99D5, 0xD9A30, 0xD9A4E,
        0xD9A6B, 0xD9A88, 0xD9AF7, 0xD9B1D, 0xD9B43, 0xD9B7C, 0xD9BA9, 0xD9C84, 0xD9C8D, 0xD9CAC, 0xD9CE8,
        0xD9CF3, 0xD9CFD, 0xD9D46, 0xDA35E, 0xDA37E, 0xDA391, 0xDA478, 0xDA4C3, 0xDA4D7, 0xDA4F6, 0xDA515,
        0xDA6E2, 0xDA9C2, 0xDA9ED, 0xDAA1B, 0xDAA57, 0xDABAF, 0xDABC9, 0xDABE2, 0xDAC28, 0xDAC46, 0xDAC63,
        0xDACB8, 0xDACEC, 0xDAD08, 0xDAD25, 0xDAD42, 0xDAD5F, 0xDAE17, 0xDAE34, 0xDAE51, 0xDAF2E, 0xDAF55,
        0xDAF6B, 0xDAF81, 0xDB14F, 0xDB16B, 0xDB180, 0xDB195, 0xDB1AA],
    0xD2: [0xD2B88, 0xD364A, 0xD369F, 0xD3747],
    0xDC: [0xD213F, 0xD2174, 0xD229E, 0xD2426, 0xD4731, 0xD4753, 0xD4774, 0xD4795, 0xD47B6, 0xD4AA5,
        0xD4AE4, 0xD4B96, 0xD4CA5, 0xD5477, 0xD5A3D, 0xD6566, 0xD672C, 0xD67C0, 0xD69B8, 0xD6AB1, 0xD6C05,
        0xD6DB3, 0xD71AB, 0xD8E2D, 0xD8F0D, 0xD94E0, 0xD9544, 0xD95A8, 0xD9982, 0xD9B56, 0xDA694, 0xDA6AB,
        0xDAE88, 0xDAEC8, 0xDAEE6, 0xDB1BF],
    0xE6: [0xD210A, 0xD22DC, 0xD2447, 0xD5A4D, 0xD5DDC, 0xDA251, 0xDA26C],
    0xF0: [0xD945E, 0xD967D, 0xD96C2, 0xD9C95, 0xD9EE6, 0xDA5C6],
    0xFA: [0xD2047, 0xD24C2, 0xD24EC, 0xD25A4, 0xD51A8, 0xD51E6, 0xD524E, 0xD529E, 0xD6045, 0xD81DE,
        0xD821E, 0xD94AA, 0xD9A9E, 0xD9AE4, 0xDA289],
    0xFF: [0xD2085, 0xD21C5, 0xD5F28],
}

##########################################################################
#                          Room & code blobs
##########################################################################
# room 276 layouts with and without the wishing well chests
WISHING_WELL_ROOM_ENABLED = base64.b64decode(
    "4QAQrA0pmgFYmA8RsWH8TYEg2gIs4WH8voFhsWJU2gL9jYNE4WL9HoMxpckxpGkxwCJNpGkxxvlJxvkQmaBcmaILmGAN6MBV6MALk"
    "gBzmGD+aQCYo2H+a4H+q4WpyGH+roH/aQLYo2L/a4P/K4fJyGL/LoP+oQCqIWH+poH/IQLKIWL/JoO7I/rDI/q7K/rDK/q7U/rDU/"
    "qwoD2YE8CYUsCIAGCQAGDoAGDwAGCYysDYysDYE8DYUsD8vYX9HYf/////8P+ALmEOgQ7//w==")
WISHING_WELL_ROOM_DISABLED = base64.b64decode(
    "4QAQrA0pmgFYmA8RsGH8TQEg0gL8vQUs4WH8voFhsGJU0gL9jQP9HQdE4WL9HoMxpckxpGkxwCJNpGkouD1QuD0QmaBcmaILmGAN4"
    "cBV4cALkgBzmGD+aQCYo2H+a4H+q4WpyGH+roH/aQLYo2L/a4P/K4fJyGL/LoP+oQCqIWH+poH/IQLKIWL/JoO7I/rDI/q7K/rDK/"
    "q7U/rDU/qwoD2YE8CYUsCIAGCQAGDoAGDwAGCYysDYysDYE8DYUsD/////8P+ALmEOgQ7//w==")

BEE_CHEST_CODE = _b(
    0xA9, 0x79, 0x22, 0x5D, 0xF6, 0x1D, 0x30, 0x14, 0xA5, 0x22, 0x99, 0x10, 0x0D, 0xA5, 0x23,
    0x99, 0x30, 0x0D, 0xA5, 0x20, 0x99, 0x00, 0x0D, 0xA5, 0x21, 0x99, 0x20, 0x0D, 0x6B)
BEE_CHEST_HOOK = _b(0x00, 0x80, 0x3B)

UNCLE_SHIELD_TILES = [
    (0x6D253, _b(0x00, 0x00, 0xF6, 0xFF, 0x00, 0x0E)),
    (0x6D25B, _b(0x00, 0x00, 0xF6, 0xFF, 0x00, 0x0E)),
    (0x6D283, _b(0x00, 0x00, 0xF6, 0xFF, 0x00, 0x0E)),
    (0x6D28B, _b(0x00, 0x00, 0xF7, 0xFF, 0x00, 0x0E)),
    (0x6D2CB, _b(0x00, 0x00, 0xF6, 0xFF, 0x02, 0x0E)),
    (0x6D2FB, _b(0x00, 0x00, 0xF7, 0xFF, 0x02, 0x0E)),
    (0x6D313, _b(0x00, 0x00, 0xE4, 0xFF, 0x08, 0x0E)),
]

UNCLE_SWORD_TILES = [
    (0x6D263, _b(0x00, 0x00, 0xF6, 0xFF, 0x00, 0x0E)),
    (0x6D26B, _b(0x00, 0x00, 0xF6, 0xFF, 0x00, 0x0E)),
    (0x6D293, _b(0x00, 0x00, 0xF6, 0xFF, 0x00, 0x0E)),
    (0x6D29B, _b(0x00, 0x00, 0xF7, 0xFF, 0x00, 0x0E)),
    (0x6D2B3, _b(0x00, 0x00, 0xF6, 0xFF, 0x02, 0x0E)),
    (0x6D2BB, _b(0x00, 0x00, 0xF6, 0xFF, 0x02, 0x0E)),
    (0x6D2E3, _b(0x00, 0x00, 0xF7, 0xFF, 0x02, 0x0E)),
    (0x6D2EB, _b(0x00, 0x00, 0xF7, 0xFF, 0x02, 0x0E)),
    (0x6D31B, _b(0x00, 0x00, 0xE4, 0xFF, 0x08, 0x0E)),
    (0x6D323, _b(0x00, 0x00, 0xE4, 0xFF, 0x08, 0x0E)),
]

HEART_COLOR_OFFSETS = [0x6FA1E, 0x6FA20, 0x6FA22, 0x6FA24, 0x6FA26, 0x6FA28, 0x6FA2A, 0x6FA2C, 0x6FA2E, 0x6FA30]
HEART_COLOR_FILE_SELECT_OFFSET = 0x65561


##########################################################################
#                            Inverted world
##########################################################################
ENTRANCE_DOORS = 0xDBB73
EXIT_ROOMS = 0x15AEE
EXIT_AREAS = 0x15B8C


def _exit_row(exit_id: int, room: int, area: int, vram: int, scroll_y: int, scroll_x: int,
              link_y: int, link_x: int, camera_y: int, camera_x: int, unknown_1: int, unknown_2: int,
              door_1: int = 0x0000, door_2: int = 0x0000) -> list:
    """One column of the overworld exit table, spread over its parallel arrays."""
    return [
        (EXIT_ROOMS + 2 * exit_id, _w(room)),
        (EXIT_AREAS + exit_id, _b(area)),
        (0x15BDB + 2 * exit_id, _w(vram)),
        (0x15C79 + 2 * exit_id, _w(scroll_y)),
        (0x15D17 + 2 * exit_id, _w(scroll_x)),
        (0x15DB5 + 2 * exit_id, _w(link_y)),
        (0x15E53 + 2 * exit_id, _w(link_x)),
        (0x15EF1 + 2 * exit_id, _w(camera_y)),
        (0x15F8F + 2 * exit_id, _w(camera_x)),
        (0x1602D + exit_id, _b(unknown_1)),
        (0x1607C + exit_id, _b(unknown_2)),
        (0x160CB + 2 * exit_id, _w(door_1)),
        (0x16169 + 2 * exit_id, _w(door_2)),
    ]


INVERTED_WORLD_EDITS = [
    (snes_to_pc(0x30804A), _b(0x01)),  # main toggle
    (snes_to_pc(0x0283E0), _b(0xF0)),  # residual portal
    (snes_to_pc(0x02B34D), _b(0xF0)),  # residual portal
    (snes_to_pc(0x06DB78), _b(0x8B)),  # residual portal
    (snes_to_pc(0x05AF79), _b(0xF0)),  # vortex
    (snes_to_pc(0x0DB3C5), _b(0xC6)),  # vortex
    (snes_to_pc(0x07A3F4), _b(0xF0)),  # duck
    (snes_to_pc(0x02E849), _w(0x0043, 0x0056, 0x0058, 0x006C, 0x006F, 0x0070, 0x007B, 0x007F, 0x001B)),  # flute spots
    (snes_to_pc(0x02E8D5), _w(0x07C8)),  # flute spot 3 out of the gargoyle statue
    (snes_to_pc(0x02E8F7), _w(0x01F8)),
    (snes_to_pc(0x07A943), _b(0xF0)),  # dark to light world mirror
    (snes_to_pc(0x07A96D), _b(0xD0)),
    (snes_to_pc(0x08D40C), _b(0xD0)),  # morph poof
]

INVERTED_ENTRANCE_EDITS = [
    (0x15B8C, _b(0x6C)),  # link's house exits to the dark world
    (ENTRANCE_DOORS + 0x00, _b(0x53)),  # link's house door -> bomb shop
    (ENTRANCE_DOORS + 0x52, _b(0x01)),  # bomb shop door -> link's house
    (ENTRANCE_DOORS + 0x23, _b(0x37)),  # agahnim's tower door -> ganon's tower
    (ENTRANCE_DOORS + 0x36, _b(0x24)),  # ganon's tower door -> agahnim's tower
    (EXIT_ROOMS + 2 * 0x38, _w(0x00E0)),
    (EXIT_ROOMS + 2 * 0x25, _w(0x000C)),
    # bumper cave bottom <-> old man cave west
    (ENTRANCE_DOORS + 0x15, _b(0x06)),
    (EXIT_ROOMS + 2 * 0x17, _w(0x00F0)),
    (ENTRANCE_DOORS + 0x05, _b(0x16)),
    (EXIT_ROOMS + 2 * 0x07, _w(0x00FB)),
    # death mountain return cave west -> bumper cave top
    (ENTRANCE_DOORS + 0x2D, _b(0x17)),
    (EXIT_ROOMS + 2 * 0x2F, _w(0x00EB)),
    # old man cave east -> death mountain return cave west
    (ENTRANCE_DOORS + 0x06, _b(0x2E)),
    (EXIT_ROOMS + 2 * 0x08, _w(0x00E6)),
    # bumper cave top -> dark death mountain fairy
    (ENTRANCE_DOORS + 0x16, _b(0x5E)),
    (0xFED31, _b(0x0E)),  # preopen bombable exit
    (0xFEE41, _b(0x0E)),
    # dark death mountain fairy -> old man cave east
    (ENTRANCE_DOORS + 0x6F, _b(0x07)),
] + _exit_row(0x18, 0x00F1, 0x43, 0x1400, 0x0294, 0x0600, 0x02E8, 0x0678, 0x0303, 0x0685, 0x0A, 0xF6) \
  + _exit_row(0x3D, 0x0003, 0x5B, 0x0B0E, 0x075A, 0x0674, 0x07A8, 0x06E8, 0x07C7, 0x06F3, 0x06, 0xFA)

INVERTED_SPAWN_EDITS = [
    # sanctuary spawn moves to the dark chapel
    (snes_to_pc(0x02D8D4), _w(0x0112)),
    (snes_to_pc(0x02D8E8), _b(0x22, 0x22, 0x22, 0x23, 0x04, 0x04, 0x04, 0x05)),
    (snes_to_pc(0x02D91A), _w(0x0400)),
    (snes_to_pc(0x02D928), _w(0x222E)),
    (snes_to_pc(0x02D936), _w(0x229A)),
    (snes_to_pc(0x02D944), _w(0x0480)),
    (snes_to_pc(0x02D952), _w(0x00A5)),
    (snes_to_pc(0x02D960), _w(0x007F)),
    (snes_to_pc(0x02D96D), _b(0x14)),
    (snes_to_pc(0x02D974), _b(0x00)),
    (snes_to_pc(0x02D97B), _b(0xFF)),
    (snes_to_pc(0x02D982), _b(0x00)),
    (snes_to_pc(0x02D989), _b(0x02)),
    (snes_to_pc(0x02D990), _b(0x00)),
    (snes_to_pc(0x02D998), _w(0x0000)),
    (snes_to_pc(0x02D9A6), _w(0x005A)),
    (snes_to_pc(0x02D9B3), _b(0x12)),
    # starting area exit table, first row is the dark chapel
    (0x180250, _w(0x0112) + _b(0x53) + _w(0x001E, 0x0400, 0x06E2, 0x0446, 0x0758, 0x046D, 0x075F)
        + _b(0x00, 0x00, 0x00)),
    (0x180240, _b(0x00, 0x01, 0x00, 0x00, 0x00, 0x00, 0x00)),
    (snes_to_pc(0x308350), _b(0x00, 0x00, 0x01)),  # death mountain cave starts on the overworld
    # old man spawn moves to the end of his cave
    (snes_to_pc(0x02D8DE), _w(0x00F1)),
    (snes_to_pc(0x02D910), _b(0x1F, 0x1E, 0x1F, 0x1F, 0x03, 0x02, 0x03, 0x03)),
    (snes_to_pc(0x02D924), _w(0x0300)),
    (snes_to_pc(0x02D932), _w(0x1F10)),
    (snes_to_pc(0x02D940), _w(0x1FC0)),
    (snes_to_pc(0x02D94E), _w(0x0378)),
    (snes_to_pc(0x02D95C), _w(0x0187)),
    (snes_to_pc(0x02D96A), _w(0x017F)),
    (snes_to_pc(0x02D972), _b(0x06)),
    (snes_to_pc(0x02D979), _b(0x00)),
    (snes_to_pc(0x02D980), _b(0xFF)),
    (snes_to_pc(0x02D987), _b(0x00)),
    (snes_to_pc(0x02D98E), _b(0x22)),
    (snes_to_pc(0x02D995), _b(0x12)),
    (snes_to_pc(0x02D9A2), _w(0x0000)),
    (snes_to_pc(0x02D9B0), _w(0x0007)),
    (snes_to_pc(0x02D9B8), _b(0x12)),
    (0x180247, _b(0x00, 0x5A, 0x00, 0x00, 0x00, 0x00, 0x00)),
] + _exit_row(0x06, 0x0020, 0x1B, 0x00AE, 0x0610, 0x077E, 0x0672, 0x07F8, 0x067D, 0x0803, 0x00, 0xF2) + [
    # flute spot 9 shares the hyrule castle ledge spawn
    (snes_to_pc(0x02E87B), _w(0x00AE)),
    (snes_to_pc(0x02E89D), _w(0x0610)),
    (snes_to_pc(0x02E8BF), _w(0x077E)),
    (snes_to_pc(0x02E8E1), _w(0x0672)),
    (snes_to_pc(0x02E903), _w(0x07F8)),
    (snes_to_pc(0x02E925), _w(0x067D)),
    (snes_to_pc(0x02E947), _w(0x0803)),
    (snes_to_pc(0x02E969), _w(0x0000)),
    (snes_to_pc(0x02E98B), _w(0xFFF2)),
]

INVERTED_CASTLE_EDITS = [
    (snes_to_pc(0x1AF696), _b(0xF0)),  # bat x position
    (snes_to_pc(0x1AF6B2), _b(0x33)),  # bat delay
    (snes_to_pc(0x1AF730), _b(
        0x6A, 0x9E, 0x0C, 0x00, 0x7A, 0x9E, 0x0C, 0x00, 0x8A, 0x9E, 0x0C, 0x00, 0x6A, 0xAE, 0x0C, 0x00,
        0x7A, 0xAE, 0x0C, 0x00, 0x8A, 0xAE, 0x0C, 0x00, 0x67, 0x97, 0x0C, 0x00, 0x8D, 0x97, 0x0C, 0x00)),
    (snes_to_pc(0x0FF1C8), _w(
        0x190F, 0x190F, 0x190F, 0x194C, 0x190F, 0x194B, 0x190F, 0x195C, 0x594B, 0x194C, 0x19EE, 0x19EE,
        0x194B, 0x19EE, 0x19EE, 0x19EE, 0x594B, 0x190F, 0x595C, 0x190F, 0x190F, 0x195B, 0x190F, 0x190F,
        0x19EE, 0x19EE, 0x195C, 0x19EE, 0x19EE, 0x19EE, 0x19EE, 0x595C, 0x595B, 0x190F, 0x190F, 0x190F)),
    (snes_to_pc(0x0FA480), _w(0x190F, 0x196B, 0x9D04, 0x9D04, 0x196B, 0x190F, 0x9D04, 0x9D04)),
    # pyramid hole entrances
    (snes_to_pc(0x1BB810), _w(0x00BE, 0x00C0, 0x013E)),
    (snes_to_pc(0x1BB836), _w(0x001B, 0x001B, 0x001B)),
    (snes_to_pc(0x308300), _w(0x0140)),
    (snes_to_pc(0x308320), _w(0x001B)),
    (snes_to_pc(0x308340), _b(0x7B)),
    # retreat bat sprite priority
    (snes_to_pc(0x1AF504), _w(0x148B)),
    (snes_to_pc(0x1AF50C), _w(0x149B)),
    (snes_to_pc(0x1AF514), _w(0x14A4)),
    (snes_to_pc(0x1AF51C), _w(0x1489)),
    (snes_to_pc(0x1AF524), _w(0x14AC)),
    (snes_to_pc(0x1AF52C), _w(0x54AC)),
    (snes_to_pc(0x1AF534), _w(0x148C)),
    (snes_to_pc(0x1AF53C), _w(0x548C)),
    (snes_to_pc(0x1AF544), _w(0x1484)),
    (snes_to_pc(0x1AF54C), _w(0x5484)),
    (snes_to_pc(0x1AF554), _w(0x14A2)),
    (snes_to_pc(0x1AF55C), _w(0x54A2)),
    (snes_to_pc(0x1AF564), _w(0x14A0)),
    (snes_to_pc(0x1AF56C), _w(0x54A0)),
    (snes_to_pc(0x1AF574), _w(0x148E)),
    (snes_to_pc(0x1AF57C), _w(0x548E)),
    (snes_to_pc(0x1AF584), _w(0x14AE)),
    (snes_to_pc(0x1AF58C), _w(0x54AE)),
    (snes_to_pc(0x00DB9D), _b(0x1A)),  # sprite set 1, section 3
    (snes_to_pc(0x00DC09), _b(0x1A)),  # sprite set 27, section 3
    # castle hole graphics at $31E000
    (snes_to_pc(0x00D009), _b(0x31)),
    (snes_to_pc(0x00D0E8), _b(0xE0)),
    (snes_to_pc(0x00D1C7), _b(0x00)),
    (snes_to_pc(0x1BE8DA), _w(0x39AD)),
    (0x180169, _b(0x02)),  # lock agahnim's door
    (0xF6E58, _b(0x80)),  # no whirlpool under the castle gate
    (0x0086E, _b(0x5C, 0x00, 0xA0, 0xA1)),  # JML InvertedTileAttributeLookup
    # warps under bushes
    (snes_to_pc(0x1BC67A), _b(0x2E, 0x0B, 0x82)),
    (snes_to_pc(0x1BC81E), _b(0x94, 0x1D, 0x82)),
    (snes_to_pc(0x1BC655), _b(0x4A, 0x1D, 0x82)),
    (snes_to_pc(0x1BC80D), _b(0xB2, 0x0B, 0x82)),
    (snes_to_pc(0x1BC3DF), _b(0xD8, 0xD1)),
    (snes_to_pc(0x1BD1D8), _b(0xA8, 0x02, 0x82, 0xFF, 0xFF)),
    (snes_to_pc(0x1BC85A), _b(0x50, 0x0F, 0x82)),
    # pyramid exit overworld door
    (0xDB96F + 2 * 0x35, _w(0x001B)),
    (0xDBA71 + 2 * 0x35, _w(0x06A4)),
    (ENTRANCE_DOORS + 0x35, _b(0x36)),
    (snes_to_pc(0x09D436), _b(0xF3)),  # hyrule castle gate warp removed
] + _exit_row(0x37, 0x0010, 0x1B, 0x0418, 0x0679, 0x06B4, 0x06C6, 0x0728, 0x06E6, 0x0733, 0x07, 0xF9) + [
    (snes_to_pc(0x1BC387), _b(0xDD, 0xD1)),
    (snes_to_pc(0x1BD1DD), _b(0xA4, 0x06, 0x82, 0x9E, 0x06, 0x82, 0xFF, 0xFF)),
    (0x180089, _b(0x01)),  # open turtle rock main entrance on exit
    (snes_to_pc(0x0ABFBB), _b(0x90)),  # mirror portal indicator map
    (snes_to_pc(0x0280A6), _b(0xD0)),  # spawn logic
    (snes_to_pc(0x06B2AB), _b(0xF0, 0xE1, 0x05)),  # frog pickup on contact
]
