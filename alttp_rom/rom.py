import logging
import struct
from collections import namedtuple

from . import checksum, constants, equipment, patcher, tables
from .build import BuildRegistry
from .errors import InvalidConfiguration, SourceUnreadable
from .image import SIZE, RomImage
from .models.enums import *
from .models.rom_settings import RomSettings

BUILD = '2018-10-18'
HASH = 'cb560220b7b1b8202e92381aee19cd36'
VERSION = '31'

VANILLA_SUBSTITUTIONS = [
    [0x12, 0x01, 0x35, 0xFF],  # lamp -> 5 rupees
    [0x0C, 0x01, 0x44, 0xFF],  # blue boomerang -> 10 arrows
    [0x2A, 0x01, 0x46, 0xFF],  # red boomerang -> 300 rupees
]
VANILLA_SEED_STRING = "ZELDANODENSETSU"
SEED_STRING_LENGTH = 21
PLANDOMIZER_AUTHOR_LENGTH = 31
START_SCREEN_HASH_LENGTH = 5
RNG_BLOCK_OFFSET = 0x178000
RNG_BLOCK_SIZE = 1024

HEART_BEEP_SPEEDS = {
    HeartBeepSpeed.OFF: 0x00,
    HeartBeepSpeed.DOUBLE: 0x10,
    HeartBeepSpeed.NORMAL: 0x20,
    HeartBeepSpeed.HALF: 0x40,
    HeartBeepSpeed.QUARTER: 0x80,
}

CLOCK_MODES = {
    ClockMode.OFF: [0x00, 0x00],
    ClockMode.STOPWATCH: [0x02, 0x01],
    ClockMode.COUNTDOWN_OHKO: [0x01, 0x02],
    ClockMode.COUNTDOWN_CONTINUE: [0x01, 0x01],
    ClockMode.COUNTDOWN_STOP: [0x01, 0x00],
    ClockMode.COUNTDOWN_END: [0x01, 0x03],
}

GOAL_ICONS = {
    GoalIcon.TRIFORCE: 0x280E,
    GoalIcon.STAR: 0x280D,
}

GANON_INVINCIBLE = {
    GanonInvincible.NO: 0x00,
    GanonInvincible.YES: 0x01,
    GanonInvincible.DUNGEONS: 0x02,
    GanonInvincible.CRYSTALS: 0x03,
    GanonInvincible.CUSTOM: 0x06,
}

# heart byte, file select heart byte
HEART_COLORS = {
    HeartColor.RED: (0x24, 0x05),
    HeartColor.BLUE: (0x2C, 0x0D),
    HeartColor.GREEN: (0x3C, 0x19),
    HeartColor.YELLOW: (0x28, 0x09),
}

MENU_SPEEDS = {
    MenuSpeed.SLOW: 0x04,
    MenuSpeed.NORMAL: 0x08,
    MenuSpeed.FAST: 0x10,
    MenuSpeed.INSTANT: 0xE8,
}

SEED_TYPES = {
    SeedType.NO_GLITCHES: 0x00,
    SeedType.MAJOR_GLITCHES: 0x01,
    SeedType.OVERWORLD_GLITCHES: 0x02,
    SeedType.OFF: 0xFF,
}

GAME_TYPES = {
    GameType.ITEM: 0b00000100,
    GameType.ENEMIZER: 0b00000101,
    GameType.ENTRANCE: 0b00000110,
    GameType.ROOM: 0b00001000,
}

TOURNAMENT_TYPES = {
    TournamentType.NONE: [0x00, 0x01],
    TournamentType.STANDARD: [0x01, 0x00],
}

SILVERS_EQUIP = {
    SilversEquip.OFF: 0x00,
    SilversEquip.COLLECTION: 0x01,
    SilversEquip.GANON: 0x02,
    SilversEquip.BOTH: 0x03,
}

COMPASS_MODES = {
    CompassMode.OFF: 0x00,
    CompassMode.PICKUP: 0x01,
    CompassMode.ON: 0x02,
}

GANON_AGAHNIM_RNG = {
    GanonAgahnimRng.TABLE: 0x00,
    GanonAgahnimRng.VANILLA: 0x00,
    GanonAgahnimRng.NONE: 0x01,
}

HardMode = namedtuple(
    'HardMode', 'cape_magic byrna_invulnerable powder_prize bottle_fills catchable_fairies stun_items silvers_at_ganon rupoor')

HARD_MODES = {
    0: HardMode([0x04, 0x08, 0x10], True, 0xE3, [0xA0, 0x80], True, 0x03, False, 0),
    1: HardMode([0x02, 0x02, 0x02], False, 0xD8, [0x38, 0x40], False, 0x02, True, 10),
    2: HardMode([0x01, 0x01, 0x01], False, 0xD8, [0x08, 0x20], False, 0x00, True, 20),
    3: HardMode([0x01, 0x01, 0x01], False, 0x79, [0x00, 0x00], False, 0x00, True, 9999),
}


def _flag(enable: bool) -> bytes:
    return bytes([0x01 if enable else 0x00])


def _seconds(seconds: int) -> bytes:
    return struct.pack('<l', seconds * 60)


class Rom:
    """A patching session over one ROM image.

    Every setter issues logged writes at fixed offsets, so the write log of a
    session is enough to rebuild the image it produced.

    A source ROM is used at its own length. Call resize() before
    update_checksum() when it is not SIZE bytes, or the checksum raises
    SizeMismatch.
    """

    def __init__(self, source_location: str = None, logger=None):
        self.logger = logger or logging.getLogger("ALttP")
        self.warnings = []
        self.text = tables.TextTable()
        self.credits = tables.CreditsTable()

        data = None
        if source_location is not None:
            try:
                with open(source_location, "rb") as f:
                    data = f.read()
            except OSError as e:
                raise SourceUnreadable("Source ROM not readable: %s (%s)" % (source_location, e))

        self.image = RomImage(data, SIZE if data is None else len(data), self.logger)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self) -> None:
        self.image.close()

    @staticmethod
    def save_build(patch: list, build: str = None, hash: str = None, registry: BuildRegistry = None, root: str = "builds"):
        registry = registry or BuildRegistry(root)
        return registry.save_build(patch, build or BUILD, hash or HASH)

    ##########################################################################
    #                             Image access
    ##########################################################################
    def resize(self, size: int = None) -> None:
        self.image.resize(size or SIZE)

    def check_md5(self) -> bool:
        return self.get_md5() == HASH

    def get_md5(self) -> str:
        return self.image.fingerprint()

    def update_checksum(self) -> tuple:
        return checksum.update_checksum(self.image)

    def write(self, offset: int, data: bytes, log: bool = True) -> None:
        self.image.write(offset, data, log)

    def read(self, offset: int, length: int = 1):
        return self.image.read(offset, length)

    def get_write_log(self) -> list:
        return self.image.get_write_log()

    def save(self, output_location: str) -> None:
        self.image.save(output_location)

    def apply_patch(self, patch: list) -> None:
        patcher.apply_patch(self.image, patch, self.logger)

    def apply_patch_file(self, file_name: str) -> None:
        patcher.apply_patch_file(self.image, file_name, self.logger)

    def _setting(self, enum_type, value, default):
        if isinstance(value, enum_type):
            return value
        try:
            return enum_type(value)
        except ValueError:
            warning = InvalidConfiguration("Unknown %s %r, using %s" % (enum_type.__name__, value, default.value))
            self.warnings.append(warning)
            self.logger.warning(str(warning))
            return default

    ##########################################################################
    #                         Baseline & settings
    ##########################################################################
    def write_vanilla(self) -> None:
        """Baseline edits every seed starts from."""
        self.set_substitutions(VANILLA_SUBSTITUTIONS)

        self.set_clock_mode(ClockMode.OFF)
        self.set_hard_mode(0)

        self.set_pyramid_fairy_chests(False)
        self.set_wishing_well_chests(False)
        self.set_smithy_quick_item_give(False)

        self.set_open_mode(False)
        self.set_swordless_mode(False)
        self.set_ganon_agahnim_rng(GanonAgahnimRng.VANILLA)

        self.set_max_arrows()
        self.set_max_bombs()
        self.set_starting_time(0)

        self.set_seed_string(VANILLA_SEED_STRING.ljust(SEED_STRING_LENGTH))

    def apply_settings(self, settings: RomSettings) -> None:
        self.set_game_state(settings.game_state)
        self.set_swordless_mode(settings.swordless)
        self.set_hard_mode(settings.hard_mode)

        self.set_heart_beep_speed(settings.heart_beep)
        self.set_heart_colors(settings.heart_color)
        self.set_menu_speed(settings.menu_speed)
        self.set_quick_swap(settings.quick_swap)

        self.set_map_mode(settings.map_mode)
        self.set_compass_mode(settings.compass_mode)
        self.set_clock_mode(settings.clock_mode)
        self.set_starting_time(settings.starting_time)
        self.set_red_clock(settings.red_clock)
        self.set_blue_clock(settings.blue_clock)
        self.set_green_clock(settings.green_clock)

        self.set_goal_required_count(settings.goal_required_count)
        self.set_goal_icon(settings.goal_icon)
        self.set_required_crystals(settings.required_crystals)
        self.set_ganon_invincible(settings.ganon_invincible)

        self.set_free_item_text_mode(settings.free_item_text)
        self.set_free_item_menu(settings.free_item_menu)
        self.set_generic_keys(settings.generic_keys)
        self.set_rupee_arrow(settings.rupee_arrow)
        self.set_silvers_equip(settings.silvers_equip)

        self.set_randomizer_seed_type(settings.seed_type)
        self.set_game_type(settings.game_type)
        self.set_tournament_type(settings.tournament_type)
        self.set_ganon_agahnim_rng(settings.ganon_agahnim_rng)
        self.set_warning_flags(settings.warning_flags)

        if settings.mute_music:
            self.mute_music(True)
        if settings.start_screen_hash:
            self.set_start_screen_hash(settings.start_screen_hash)
        if settings.seed_string:
            self.set_seed_string(settings.seed_string)

        self.set_starting_equipment(settings.starting_equipment, settings.swordless)

    def set_starting_equipment(self, items, swordless: bool = False) -> equipment.EquipmentState:
        state = equipment.encode(items, self.logger)
        self.warnings.extend(state.warnings)
        equipment.write_equipment(self.image, state, swordless)
        return state

    ##########################################################################
    #                               Tables
    ##########################################################################
    def set_substitutions(self, substitutions=()) -> None:
        tables.write_substitutions(self.image, substitutions)

    def setup_custom_shops(self, shops) -> None:
        tables.write_shops(self.image, shops)

    def set_overworld_bonk_prizes(self, prizes=()) -> None:
        tables.write_overworld_bonk_prizes(self.image, prizes)

    def set_overworld_dig_prizes(self, prizes=()) -> None:
        tables.write_overworld_dig_prizes(self.image, prizes)

    def set_chance_prizes(self, prizes=None) -> None:
        tables.write_chance_prizes(self.image, prizes)

    def set_single_rng_table(self, item_bytes) -> None:
        tables.write_rng_table(self.image, item_bytes)

    def set_multi_rng_table(self, item_bytes) -> None:
        tables.write_rng_table(self.image, item_bytes, multi=True)

    def set_text(self, key: str, data: bytes) -> None:
        self.text.set_string(key, data)

    def write_text(self) -> None:
        tables.write_text(self.image, self.text)

    def update_credit_line(self, scene: str, line: int, data: bytes) -> None:
        self.credits.update_credit_line(scene, line, data)

    def write_credits(self) -> None:
        tables.write_credits(self.image, self.credits)

    def set_stunned_sprite_prize(self, sprite: int = 0xD9) -> None:
        self.write(0x37993, bytes([sprite]))

    def set_powdered_sprite_fairy_prize(self, sprite: int = 0xE3) -> None:
        self.write(0x36DD0, bytes([sprite]))

    def set_pull_tree_prizes(self, low: int = 0xD9, mid: int = 0xDA, high: int = 0xDB) -> None:
        self.write(0xEFBD4, bytes([low, mid, high]))

    def set_rupee_crab_prizes(self, main: int = 0xD9, final: int = 0xDB) -> None:
        self.write(0x329C8, bytes([main]))
        self.write(0x329C4, bytes([final]))

    def set_fish_save_prize(self, prize: int = 0xDB) -> None:
        self.write(0xE82CC, bytes([prize]))

    ##########################################################################
    #                           Player & items
    ##########################################################################
    def set_heart_beep_speed(self, setting) -> None:
        setting = self._setting(HeartBeepSpeed, setting, HeartBeepSpeed.NORMAL)
        self.write(0x180033, bytes([HEART_BEEP_SPEEDS[setting]]))

    def set_rupoor_value(self, value: int = 10) -> None:
        self.write(0x180036, struct.pack('<H', value))

    def set_byrna_cave_spike_damage(self, damage: int = 0x08) -> None:
        self.write(0x180168, bytes([damage]))

    def set_cane_of_byrna_spike_cave_usage(self, normal: int = 0x04, half: int = 0x02, quarter: int = 0x01) -> None:
        self.write(0x18016B, bytes([normal, half, quarter]))

    def set_cane_of_byrna_invulnerability(self, enable: bool = True) -> None:
        self.write(0x18004F, _flag(enable))

    def set_cape_spike_cave_usage(self, normal: int = 0x04, half: int = 0x08, quarter: int = 0x10) -> None:
        self.write(0x18016E, bytes([normal, half, quarter]))

    def set_max_arrows(self, max: int = 30) -> None:
        self.write(0x180035, bytes([max]))

    def set_max_bombs(self, max: int = 10) -> None:
        self.write(0x180034, bytes([max]))

    def set_digging_game_rng(self, digs: int = 15) -> None:
        self.write(0x180020, bytes([digs]))
        self.write(0xEFD95, bytes([digs]))

    def set_capacity_upgrade_fills(self, fills) -> None:
        self.write(0x180080, bytes(fills[:4]))

    def set_bottle_fills(self, fills) -> None:
        self.write(0x180084, bytes(fills[:2]))

    def set_limit_progressive_sword(self, limit: int = 4, item: int = 0x36) -> None:
        self.write(0x180090, bytes([limit, item]))

    def set_limit_progressive_shield(self, limit: int = 3, item: int = 0x36) -> None:
        self.write(0x180092, bytes([limit, item]))

    def set_limit_progressive_armor(self, limit: int = 2, item: int = 0x36) -> None:
        self.write(0x180094, bytes([limit, item]))

    def set_limit_bottle(self, limit: int = 4, item: int = 0x36) -> None:
        self.write(0x180096, bytes([limit, item]))

    def set_heart_colors(self, color) -> None:
        color = self._setting(HeartColor, color, HeartColor.RED)
        byte, file_byte = HEART_COLORS[color]
        for offset in constants.HEART_COLOR_OFFSETS:
            self.write(offset, bytes([byte]))
        self.write(constants.HEART_COLOR_FILE_SELECT_OFFSET, bytes([file_byte]))

    def set_menu_speed(self, menu_speed=MenuSpeed.NORMAL) -> None:
        menu_speed = self._setting(MenuSpeed, menu_speed, MenuSpeed.NORMAL)
        fast = menu_speed == MenuSpeed.INSTANT
        self.write(0x180048, bytes([MENU_SPEEDS[menu_speed]]))
        self.write(0x6DD9A, bytes([0x20 if fast else 0x11]))
        self.write(0x6DF2A, bytes([0x20 if fast else 0x12]))
        self.write(0x6E0E9, bytes([0x20 if fast else 0x12]))

    def set_quick_swap(self, enable: bool = False) -> None:
        self.write(0x18004B, _flag(enable))

    def set_smithy_free_travel(self, enable: bool = False) -> None:
        self.write(0x18004C, _flag(enable))

    def set_smithy_quick_item_give(self, enable: bool = True) -> None:
        self.write(0x180029, _flag(enable))

    def bee_chest(self) -> None:
        self.write(0x1D8000, constants.BEE_CHEST_CODE)
        self.write(0x180061, constants.BEE_CHEST_HOOK)

    def remove_uncles_shield(self) -> None:
        for offset, data in constants.UNCLE_SHIELD_TILES:
            self.write(offset, data)

    def remove_uncles_sword(self) -> None:
        for offset, data in constants.UNCLE_SWORD_TILES:
            self.write(offset, data)

    def set_rupee_arrow(self, enable: bool = False) -> None:
        self.write(0x30052, bytes([0xDB if enable else 0xE2]))  # fish bottle merchant
        self.write(0x301FC, bytes([0xDA if enable else 0xE1]))  # pot rupees
        self.write(0xECB4E, bytes([0xA9, 0x00, 0xEA, 0xEA] if enable else [0xAF, 0x77, 0xF3, 0x7E]))  # thief
        self.write(0xF0D96, bytes([0xA9, 0x00, 0xEA, 0xEA] if enable else [0xAF, 0x77, 0xF3, 0x7E]))  # pikit
        self.write(0x180175, _flag(enable))
        self.write(0x180176, struct.pack('<H', 0x0A if enable else 0x00))  # wood arrow cost
        self.write(0x180178, struct.pack('<H', 0x32 if enable else 0x00))  # silver arrow cost
        self.write(0xEDA5, bytes([0x35, 0x41] if enable else [0x43, 0x44]))  # dark world chest game

    def set_generic_keys(self, enable: bool = False) -> None:
        self.write(0x180172, _flag(enable))

    def set_catchable_fairies(self, enable: bool = True) -> None:
        self.write(0x34FD6, bytes([0xF0 if enable else 0x80]))

    def set_catchable_bees(self, enable: bool = True) -> None:
        self.write(0xF5D73, bytes([0xF0 if enable else 0x80]))
        self.write(0xF5F10, bytes([0xF0 if enable else 0x80]))

    def set_stun_items(self, flags: int = 0x03) -> None:
        self.write(0x180180, bytes([flags]))

    def set_silvers_only_at_ganon(self, enable: bool = False) -> None:
        self.write(0x180181, _flag(enable))

    def set_silvers_equip(self, setting) -> None:
        setting = self._setting(SilversEquip, setting, SilversEquip.COLLECTION)
        self.write(0x180182, bytes([SILVERS_EQUIP[setting]]))

    def set_free_item_text_mode(self, enable: bool = True) -> None:
        self.write(0x18016A, _flag(enable))

    def set_free_item_menu(self, flags: int = 0x00) -> None:
        self.write(0x180045, bytes([flags]))

    def set_hard_mode(self, level: int = 0) -> None:
        if level == -1:
            level = 0
        if level not in HARD_MODES:
            warning = InvalidConfiguration("Unknown hard mode level %r, using 0" % level)
            self.warnings.append(warning)
            self.logger.warning(str(warning))
            level = 0
        mode = HARD_MODES[level]

        self.set_below_ganon_chest(False)
        self.set_cane_of_byrna_spike_cave_usage()
        self.set_cape_spike_cave_usage()
        self.set_byrna_cave_spike_damage(0x08)
        # byrna magic per cycle
        self.write(0x45C42, bytes([0x04, 0x02, 0x01]))

        self.write(0x3ADA7, bytes(mode.cape_magic))
        self.set_cane_of_byrna_invulnerability(mode.byrna_invulnerable)
        self.set_powdered_sprite_fairy_prize(mode.powder_prize)
        self.set_bottle_fills(mode.bottle_fills)
        self.set_catchable_fairies(mode.catchable_fairies)
        self.set_catchable_bees(True)
        self.set_stun_items(mode.stun_items)
        self.set_silvers_only_at_ganon(mode.silvers_at_ganon)
        self.set_rupoor_value(mode.rupoor)

    ##########################################################################
    #                               Clocks
    ##########################################################################
    def set_clock_mode(self, mode=ClockMode.OFF, restart: bool = False) -> None:
        mode = self._setting(ClockMode, mode, ClockMode.OFF)
        if mode == ClockMode.COUNTDOWN_OHKO:
            restart = True
        # the clock and the compass counter share the same hud space
        if mode != ClockMode.OFF:
            self.set_compass_mode(CompassMode.OFF)
        self.write(0x180190, bytes(CLOCK_MODES[mode] + [0x01 if restart else 0x00]))

    def set_starting_time(self, seconds: int = 0) -> None:
        self.write(0x18020C, _seconds(seconds))

    def set_red_clock(self, seconds: int = 0) -> None:
        self.write(0x180200, _seconds(seconds))

    def set_blue_clock(self, seconds: int = 0) -> None:
        self.write(0x180204, _seconds(seconds))

    def set_green_clock(self, seconds: int = 0) -> None:
        self.write(0x180208, _seconds(seconds))

    ##########################################################################
    #                               Goals
    ##########################################################################
    def set_required_crystals(self, count: int = 7) -> None:
        self.write(0x18005E, bytes([count]))

    def set_goal_required_count(self, goal: int = 0) -> None:
        self.write(0x180167, bytes([goal]))

    def set_goal_icon(self, goal_icon=GoalIcon.TRIFORCE) -> None:
        goal_icon = self._setting(GoalIcon, goal_icon, GoalIcon.STAR)
        self.write(0x180165, struct.pack('<H', GOAL_ICONS[goal_icon]))

    def set_ganon_invincible(self, setting=GanonInvincible.NO) -> None:
        setting = self._setting(GanonInvincible, setting, GanonInvincible.NO)
        self.write(0x18003E, bytes([GANON_INVINCIBLE[setting]]))

    def set_ganon_agahnim_rng(self, setting=GanonAgahnimRng.TABLE) -> None:
        setting = self._setting(GanonAgahnimRng, setting, GanonAgahnimRng.TABLE)
        self.write(0x180086, bytes([GANON_AGAHNIM_RNG[setting]]))

    ##########################################################################
    #                            Seed metadata
    ##########################################################################
    def set_randomizer_seed_type(self, setting) -> None:
        setting = self._setting(SeedType, setting, SeedType.NO_GLITCHES)
        self.write(0x180210, bytes([SEED_TYPES[setting]]))

    def set_game_type(self, setting) -> None:
        setting = self._setting(GameType, setting, GameType.ITEM)
        self.write(0x180211, bytes([GAME_TYPES[setting]]))

    def set_plandomizer_author(self, name: str) -> None:
        self.write(0x180220, name.encode()[:PLANDOMIZER_AUTHOR_LENGTH])

    def set_tournament_type(self, setting) -> None:
        setting = self._setting(TournamentType, setting, TournamentType.NONE)
        self.write(0x180213, bytes(TOURNAMENT_TYPES[setting]))

    def set_start_screen_hash(self, hash_bytes) -> None:
        hash_bytes = list(hash_bytes)[:START_SCREEN_HASH_LENGTH]
        hash_bytes += [0x00] * (START_SCREEN_HASH_LENGTH - len(hash_bytes))
        self.write(0x180215, bytes(hash_bytes))

    def set_seed_string(self, seed: str) -> None:
        self.write(0x7FC0, seed.encode()[:SEED_STRING_LENGTH])

    def write_rng_block(self, random) -> None:
        """Fill the RNG block with bytes drawn from the given callable."""
        self.write(RNG_BLOCK_OFFSET, bytes(random() & 0xFF for _ in range(RNG_BLOCK_SIZE)))

    def set_warning_flags(self, flags: int) -> None:
        self.write(0x180212, bytes([flags]))

    def mute_music(self, enable: bool = True) -> None:
        for volume, tracks in constants.MUSIC_VOLUME_TRACKS.items():
            byte = bytes([0x00 if enable else volume])
            for address in tracks:
                self.write(address, byte)

    ##########################################################################
    #                              World
    ##########################################################################
    def set_map_reveal_sahasrahla(self, reveals: int = 0x0000) -> None:
        self.write(0x18017A, struct.pack('<H', reveals))

    def set_map_reveal_bomb_shop(self, reveals: int = 0x0000) -> None:
        self.write(0x18017C, struct.pack('<H', reveals))

    def set_restrict_fairy_ponds(self, enable: bool = True) -> None:
        self.write(0x18017E, _flag(enable))

    def set_escape_assist(self, flags: int = 0x00) -> None:
        self.write(0x18004D, bytes([flags]))

    def set_escape_fills(self, flags: int = 0x00, rupees: int = 300) -> None:
        self.write(0x18004E, bytes([flags]))
        self.write(0x180183, struct.pack('<H', rupees))

    def set_uncle_spawn_refills(self, magic: int = 0x00, bombs: int = 0x00, arrows: int = 0x00) -> None:
        self.write(0x180185, bytes([magic, bombs, arrows]))

    def set_zelda_spawn_refills(self, magic: int = 0x00, bombs: int = 0x00, arrows: int = 0x00) -> None:
        self.write(0x180188, bytes([magic, bombs, arrows]))

    def set_mantle_spawn_refills(self, magic: int = 0x00, bombs: int = 0x00, arrows: int = 0x00) -> None:
        self.write(0x18018B, bytes([magic, bombs, arrows]))

    def set_pyramid_fairy_chests(self, enable: bool = True) -> None:
        self.write(0x1FC16, bytes([0xB1, 0xC6, 0xF9, 0xC9, 0xC6, 0xF9] if enable
                                  else [0xA8, 0xB8, 0x3D, 0xD0, 0xB8, 0x3D]))

    def set_hammer_tablet(self, enable: bool = False) -> None:
        self.write(0x180044, _flag(enable))

    def set_hammer_barrier(self, enable: bool = False) -> None:
        self.write(0x18005D, _flag(enable))

    def set_below_ganon_chest(self, enable: bool = True) -> None:
        # telepathic tile becomes a chest
        self.write(0x50563, bytes([0xC5, 0x76] if enable else [0x3F, 0x14]))
        # lock the door under ganon
        self.write(0x50599, bytes([0x38] if enable else [0x00]))
        # dungeon secret points at the chest
        self.write(0xE9A5, bytes([0x10, 0x00, 0x58] if enable else [0x7E, 0x00, 0x24]))

    def set_wishing_well_chests(self, enable: bool = False) -> None:
        self.write(0xE9AE, bytes([0x14, 0x01] if enable else [0x05, 0x00]))
        self.write(0xE9CF, bytes([0x14, 0x01] if enable else [0x3D, 0x01]))
        self.write(0x1F714, constants.WISHING_WELL_ROOM_ENABLED if enable else constants.WISHING_WELL_ROOM_DISABLED)

    def set_hylia_fairy_shop(self, enable: bool = False) -> None:
        self.write(0x01F810, bytes([0x1A, 0x1E, 0x01, 0x1A, 0x1E, 0x01] if enable
                                   else [0xFC, 0x94, 0xE4, 0xFD, 0x34, 0xE4]))

    def set_wishing_well_upgrade(self, enable: bool = False) -> None:
        self.write(0x348DB, bytes([0x0C if enable else 0x2A]))
        self.write(0x348EB, bytes([0x04 if enable else 0x05]))

    def set_game_state(self, state=GameState.STANDARD) -> None:
        state = self._setting(GameState, state, GameState.STANDARD)
        self.set_open_mode(False)
        self.set_fix_fake_world(False)
        if state == GameState.OPEN:
            self.set_open_mode(True)
        elif state == GameState.INVERTED:
            self.set_inverted_mode(True)

    def set_open_mode(self, enable: bool = True) -> None:
        self.write(0x180032, _flag(enable))
        self.set_sewers_lamp_cone(not enable)
        self.set_light_world_lamp_cone(False)
        self.set_dark_world_lamp_cone(False)

    def set_inverted_mode(self, enable: bool = True) -> None:
        """Open mode with the worlds swapped. Only the enabling direction is patched."""
        self.set_open_mode(enable)
        if not enable:
            return

        for offset, data in constants.INVERTED_WORLD_EDITS:
            self.write(offset, data)
        self.set_fix_fake_world(True)
        for edits in (constants.INVERTED_ENTRANCE_EDITS, constants.INVERTED_SPAWN_EDITS,
                      constants.INVERTED_CASTLE_EDITS):
            for offset, data in edits:
                self.write(offset, data)

    def set_map_mode(self, require_map: bool = False) -> None:
        self.write(0x18003B, _flag(require_map))

    def set_compass_mode(self, setting=CompassMode.OFF) -> None:
        setting = self._setting(CompassMode, setting, CompassMode.OFF)
        self.write(0x18003C, bytes([COMPASS_MODES[setting]]))

    def set_swordless_mode(self, enable: bool = False) -> None:
        self.write(0x18003F, _flag(enable))  # hammer ganon
        self.write(0x180040, _flag(enable))  # open curtains
        self.write(0x180041, _flag(enable))  # swordless medallions
        self.write(0x180043, bytes([0xFF if enable else 0x00]))  # 0xFF is a taken sword
        self.set_hammer_tablet(enable)
        self.set_hammer_barrier(False)

    def set_sewers_lamp_cone(self, enable: bool = True) -> None:
        self.write(0x180038, _flag(enable))

    def set_light_world_lamp_cone(self, enable: bool = True) -> None:
        self.write(0x180039, _flag(enable))

    def set_dark_world_lamp_cone(self, enable: bool = True) -> None:
        self.write(0x18003A, _flag(enable))

    def set_mirrorless_save_and_quit_to_light_world(self, enable: bool = True) -> None:
        self.write(0x1800A0, _flag(enable))

    def set_save_and_quit_from_boss_room(self, enable: bool = False) -> None:
        self.write(0x180042, _flag(enable))

    def set_swamp_water_level(self, enable: bool = True) -> None:
        self.write(0x1800A1, _flag(enable))

    def set_pre_agahnim_dark_world_death_in_dungeon(self, enable: bool = True) -> None:
        self.write(0x1800A2, _flag(enable))

    def set_world_on_agahnim_death(self, enable: bool = True) -> None:
        self.write(0x1800A3, _flag(enable))

    def set_pod_eg_fix(self, enable: bool = True) -> None:
        self.write(0x1800A4, _flag(enable))

    def set_lock_agahnim_door_in_escape(self, enable: bool = True) -> None:
        self.write(0x180169, _flag(enable))

    def set_fix_fake_world(self, enable: bool = False) -> None:
        self.write(0x180174, _flag(enable))
