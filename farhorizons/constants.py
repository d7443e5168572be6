"""Game limits and the enumerations shared across the game."""

from __future__ import annotations

from enum import IntEnum, IntFlag

# A standard game has 15 species, 90 star systems and a radius of 20 parsecs.
STANDARD_NUMBER_OF_SPECIES = 15
STANDARD_NUMBER_OF_STAR_SYSTEMS = 90
STANDARD_GALACTIC_RADIUS = 20

# Minimum and maximum values for a galaxy.
MIN_SPECIES = 1
MAX_SPECIES = 100
MIN_STARS = 12
MAX_STARS = 1000
MIN_RADIUS = 6
MAX_RADIUS = 50
MAX_DIAMETER = 2 * MAX_RADIUS
MAX_PLANETS = 9 * MAX_STARS

HP_AVAILABLE_POP = 1500

NUM_EXTRA_NAMPLAS = 50
NUM_EXTRA_SHIPS = 100

MAX_LOCATIONS = 10000

# At least 32 bits per contact word.
NUM_CONTACT_WORDS = ((MAX_SPECIES - 1) // 32) + 1

MAX_ITEMS = 38
NUM_SHIP_CLASSES = 18
MAX_TRANSACTIONS = 1000

# Combat limits.
MAX_BATTLES = 50
MAX_SHIPS = 200
MAX_ENGAGE_OPTIONS = 20

# Special combat unit type.
NON_COMBATANT = 1


class StarType(IntEnum):
    """Kind of star."""

    DWARF = 1
    DEGENERATE = 2
    MAIN_SEQUENCE = 3
    GIANT = 4


class StarColor(IntEnum):
    """Star colour, from hottest to coolest."""

    BLUE = 1
    BLUE_WHITE = 2
    WHITE = 3
    YELLOW_WHITE = 4
    YELLOW = 5
    ORANGE = 6
    RED = 7


class Gas(IntEnum):
    """Gases found in planetary atmospheres."""

    H2 = 1  # Hydrogen
    CH4 = 2  # Methane
    HE = 3  # Helium
    NH3 = 4  # Ammonia
    N2 = 5  # Nitrogen
    CO2 = 6  # Carbon dioxide
    O2 = 7  # Oxygen
    HCL = 8  # Hydrogen chloride
    CL2 = 9  # Chlorine
    F2 = 10  # Fluorine
    H2O = 11  # Steam
    SO2 = 12  # Sulfur dioxide
    H2S = 13  # Hydrogen sulfide


class Tech(IntEnum):
    """Technology fields."""

    MI = 0  # Mining
    MA = 1  # Manufacturing
    ML = 2  # Military
    GV = 3  # Gravitics
    LS = 4  # Life support
    BI = 5  # Biology


class Item(IntEnum):
    """Items that planets store and ships carry."""

    RM = 0  # Raw material units
    PD = 1  # Planetary defense units
    SU = 2  # Starbase units
    DR = 3  # Damage repair units
    CU = 4  # Colonist units
    IU = 5  # Colonial mining units
    AU = 6  # Colonial manufacturing units
    FS = 7  # Fail-safe jump units
    JP = 8  # Jump portal units
    FM = 9  # Forced misjump units
    FJ = 10  # Forced jump units
    GT = 11  # Gravitic telescope units
    FD = 12  # Field distortion units
    TP = 13  # Terraforming plants
    GW = 14  # Germ warfare bombs
    SG1 = 15  # Mark-1 auxiliary shield generators
    SG2 = 16
    SG3 = 17
    SG4 = 18
    SG5 = 19
    SG6 = 20
    SG7 = 21
    SG8 = 22
    SG9 = 23
    GU1 = 24  # Mark-1 auxiliary gun units
    GU2 = 25
    GU3 = 26
    GU4 = 27
    GU5 = 28
    GU6 = 29
    GU7 = 30
    GU8 = 31
    GU9 = 32
    X1 = 33  # Unassigned
    X2 = 34
    X3 = 35
    X4 = 36
    X5 = 37


class PlanetStatus(IntFlag):
    """Status bits of a named planet; combined with ``|``."""

    NONE = 0
    HOME_PLANET = 1
    COLONY = 2
    POPULATED = 8
    MINING_COLONY = 16
    RESORT_COLONY = 32
    DISBANDED_COLONY = 64


class ShipClass(IntEnum):
    """Ship classes."""

    PB = 0  # Picketboat
    CT = 1  # Corvette
    ES = 2  # Escort
    DD = 3  # Destroyer
    FG = 4  # Frigate
    CL = 5  # Light cruiser
    CS = 6  # Strike cruiser
    CA = 7  # Heavy cruiser
    CC = 8  # Command cruiser
    BC = 9  # Battlecruiser
    BS = 10  # Battleship
    DN = 11  # Dreadnought
    SD = 12  # Super dreadnought
    BM = 13  # Battlemoon
    BW = 14  # Battleworld
    BR = 15  # Battlestar
    BA = 16  # Starbase
    TR = 17  # Transport


class ShipType(IntEnum):
    """Propulsion type of a ship."""

    FTL = 0
    SUB_LIGHT = 1
    STARBASE = 2


class ShipStatus(IntEnum):
    """Where a ship currently is."""

    UNDER_CONSTRUCTION = 0
    ON_SURFACE = 1
    IN_ORBIT = 2
    IN_DEEP_SPACE = 3
    JUMPED_IN_COMBAT = 4
    FORCED_JUMP = 5


class TransactionType(IntEnum):
    """Interspecies transactions."""

    EU_TRANSFER = 1
    MESSAGE_TO_SPECIES = 2
    BESIEGE_PLANET = 3
    SIEGE_EU_TRANSFER = 4
    TECH_TRANSFER = 5
    DETECTION_DURING_SIEGE = 6
    SHIP_MISHAP = 7
    ASSIMILATION = 8
    INTERSPECIES_CONSTRUCTION = 9
    TELESCOPE_DETECTION = 10
    ALIEN_JUMP_PORTAL_USAGE = 11
    KNOWLEDGE_TRANSFER = 12
    LANDING_REQUEST = 13
    LOOTING_EU_TRANSFER = 14
    ALLIES_ORDER = 15


class Command(IntEnum):
    """Order codes."""

    UNDEFINED = 0
    ALLY = 1
    AMBUSH = 2
    ATTACK = 3
    AUTO = 4
    BASE = 5
    BATTLE = 6
    BUILD = 7
    CONTINUE = 8
    DEEP = 9
    DESTROY = 10
    DEVELOP = 11
    DISBAND = 12
    END = 13
    ENEMY = 14
    ENGAGE = 15
    ESTIMATE = 16
    HAVEN = 17
    HIDE = 18
    HIJACK = 19
    IBUILD = 20
    ICONTINUE = 21
    INSTALL = 22
    INTERCEPT = 23
    JUMP = 24
    LAND = 25
    MESSAGE = 26
    MOVE = 27
    NAME = 28
    NEUTRAL = 29
    ORBIT = 30
    PJUMP = 31
    PRODUCTION = 32
    RECYCLE = 33
    REPAIR = 34
    RESEARCH = 35
    SCAN = 36
    SEND = 37
    SHIPYARD = 38
    START = 39
    SUMMARY = 40
    SURRENDER = 41
    TARGET = 42
    TEACH = 43
    TECH = 44
    TELESCOPE = 45
    TERRAFORM = 46
    TRANSFER = 47
    UNLOAD = 48
    UPGRADE = 49
    VISITED = 50
    WITHDRAW = 51
    WORMHOLE = 52
    ZZZ = 53


NUM_COMMANDS = Command.ZZZ + 1


class ParseToken(IntEnum):
    """Kinds of token recognised while parsing orders."""

    UNKNOWN = 0
    TECH_ID = 1
    ITEM_CLASS = 2
    SHIP_CLASS = 3
    PLANET_ID = 4
    SPECIES_ID = 5


class CombatantType(IntEnum):
    """Kinds of combatant."""

    SHIP = 1
    NAMPLA = 2
    GENOCIDE_NAMPLA = 3
    BESIEGED_NAMPLA = 4


class TargetType(IntEnum):
    """Special targets a species may choose in battle."""

    WARSHIPS = 1
    TRANSPORTS = 2
    STARBASES = 3
    PDS = 4


class CombatAction(IntEnum):
    """Combat actions, in the order they are resolved."""

    DEFENSE_IN_PLACE = 0
    DEEP_SPACE_DEFENSE = 1
    PLANET_DEFENSE = 2
    DEEP_SPACE_FIGHT = 3
    PLANET_ATTACK = 4
    PLANET_BOMBARDMENT = 5
    GERM_WARFARE = 6
    SIEGE = 7