from .enums import *


class RomSettings:
    def __init__(self,
                 game_state: GameState = GameState.STANDARD,
                 weapons: WeaponsMode = WeaponsMode.RANDOMIZED,
                 hard_mode: int = 0,
                 starting_equipment: list = None,
                 heart_beep: HeartBeepSpeed = HeartBeepSpeed.NORMAL,
                 heart_color: HeartColor = HeartColor.RED,
                 menu_speed: MenuSpeed = MenuSpeed.NORMAL,
                 quick_swap: bool = False,
                 clock_mode: ClockMode = ClockMode.OFF,
                 starting_time: int = 0,
                 red_clock: int = 0,
                 blue_clock: int = 0,
                 green_clock: int = 0,
                 goal_required_count: int = 0,
                 goal_icon: GoalIcon = GoalIcon.TRIFORCE,
                 required_crystals: int = 7,
                 ganon_invincible: GanonInvincible = GanonInvincible.NO,
                 map_mode: bool = False,
                 compass_mode: CompassMode = CompassMode.OFF,
                 free_item_text: bool = False,
                 free_item_menu: int = 0x00,
                 generic_keys: bool = False,
                 rupee_arrow: bool = False,
                 silvers_equip: SilversEquip = SilversEquip.COLLECTION,
                 seed_type: SeedType = SeedType.NO_GLITCHES,
                 game_type: GameType = GameType.ITEM,
                 tournament_type: TournamentType = TournamentType.NONE,
                 ganon_agahnim_rng: GanonAgahnimRng = GanonAgahnimRng.TABLE,
                 warning_flags: int = 0x00,
                 mute_music: bool = False,
                 start_screen_hash: list = None,
                 seed_string: str = None
                 ):
        self.game_state = game_state
        self.weapons = weapons
        self.hard_mode = hard_mode
        self.starting_equipment = list(starting_equipment or [])
        self.heart_beep = heart_beep
        self.heart_color = heart_color
        self.menu_speed = menu_speed
        self.quick_swap = quick_swap
        self.clock_mode = clock_mode
        self.starting_time = starting_time
        self.red_clock = red_clock
        self.blue_clock = blue_clock
        self.green_clock = green_clock
        self.goal_required_count = goal_required_count
        self.goal_icon = goal_icon
        self.required_crystals = required_crystals
        self.ganon_invincible = ganon_invincible
        self.map_mode = map_mode
        self.compass_mode = compass_mode
        self.free_item_text = free_item_text
        self.free_item_menu = free_item_menu
        self.generic_keys = generic_keys
        self.rupee_arrow = rupee_arrow
        self.silvers_equip = silvers_equip
        self.seed_type = seed_type
        self.game_type = game_type
        self.tournament_type = tournament_type
        self.ganon_agahnim_rng = ganon_agahnim_rng
        self.warning_flags = warning_flags
        self.mute_music = mute_music
        self.start_screen_hash = list(start_screen_hash or [])
        self.seed_string = seed_string

    @property
    def swordless(self) -> bool:
        return self.weapons == WeaponsMode.SWORDLESS or self.weapons == WeaponsMode.SWORDLESS.value

    @classmethod
    def from_dict(cls, payload: dict):
        """Build settings from camelCase or snake_case keys. Enum values are checked when written."""
        settings = cls()
        for key, value in payload.items():
            name = _snake_case(key)
            if hasattr(settings, name) and name != 'swordless' and value is not None:
                setattr(settings, name, value)
        return settings


def _snake_case(key: str) -> str:
    return "".join("_" + c.lower() if c.isupper() else c for c in key)
