from enum import Enum


class ClockMode(Enum):
    OFF = "off"
    STOPWATCH = "stopwatch"
    COUNTDOWN_OHKO = "countdown-ohko"
    COUNTDOWN_CONTINUE = "countdown-continue"
    COUNTDOWN_STOP = "countdown-stop"
    COUNTDOWN_END = "countdown-end"


class CompassMode(Enum):
    OFF = "off"
    ON = "on"
    PICKUP = "pickup"


class GameState(Enum):
    STANDARD = "standard"
    OPEN = "open"
    INVERTED = "inverted"


class GameType(Enum):
    ITEM = "item"
    ENEMIZER = "enemizer"
    ENTRANCE = "entrance"
    ROOM = "room"


class GanonAgahnimRng(Enum):
    TABLE = "table"
    VANILLA = "vanilla"
    NONE = "none"


class GanonInvincible(Enum):
    NO = "no"
    YES = "yes"
    DUNGEONS = "dungeons"
    CRYSTALS = "crystals"
    CUSTOM = "custom"


class GoalIcon(Enum):
    TRIFORCE = "triforce"
    STAR = "star"


class HeartBeepSpeed(Enum):
    OFF = "off"
    DOUBLE = "double"
    NORMAL = "normal"
    HALF = "half"
    QUARTER = "quarter"


class HeartColor(Enum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class MenuSpeed(Enum):
    SLOW = "slow"
    NORMAL = "normal"
    FAST = "fast"
    INSTANT = "instant"


class SeedType(Enum):
    NO_GLITCHES = "NoGlitches"
    OVERWORLD_GLITCHES = "OverworldGlitches"
    MAJOR_GLITCHES = "MajorGlitches"
    OFF = "off"


class SilversEquip(Enum):
    COLLECTION = "collection"
    GANON = "ganon"
    BOTH = "both"
    OFF = "off"


class TournamentType(Enum):
    NONE = "none"
    STANDARD = "standard"


class WeaponsMode(Enum):
    RANDOMIZED = "randomized"
    UNCLE = "uncle"
    SWORDLESS = "swordless"
