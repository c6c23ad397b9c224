"""
Closed vocabularies for story and character inputs.

The story form only offers these values; anything else is rejected before
generation. Character option lists mirror the character creation screen.
"""

from enum import Enum


class Animal(str, Enum):
    """Animals a story can be about."""

    LION = "lion"
    ELEPHANT = "elephant"
    GIRAFFE = "giraffe"
    PENGUIN = "penguin"
    OWL = "owl"
    RABBIT = "rabbit"
    BEAR = "bear"
    FOX = "fox"
    DOLPHIN = "dolphin"
    TURTLE = "turtle"


class Theme(str, Enum):
    """Moral themes. Each one selects a phrase bank and template set."""

    KINDNESS = "kindness"
    FRIENDSHIP = "friendship"
    COURAGE = "courage"
    SHARING = "sharing"
    HONESTY = "honesty"
    PATIENCE = "patience"
    RESPONSIBILITY = "responsibility"


class CharacterColor(str, Enum):
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    BROWN = "brown"
    GRAY = "gray"
    WHITE = "white"
    BLACK = "black"
    TEAL = "teal"
    GOLD = "gold"
    SILVER = "silver"


class CharacterEyes(str, Enum):
    ROUND = "round"
    ALMOND = "almond"
    WIDE = "wide"
    NARROW = "narrow"
    SPARKLY = "sparkly"
    DREAMY = "dreamy"


class CharacterSize(str, Enum):
    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    GIANT = "giant"


class CharacterPattern(str, Enum):
    PLAIN = "plain"
    SPOTTED = "spotted"
    STRIPED = "striped"
    SWIRLED = "swirled"
    STARRY = "starry"
    RAINBOW = "rainbow"


class CharacterAccessory(str, Enum):
    HAT = "hat"
    GLASSES = "glasses"
    SCARF = "scarf"
    BOWTIE = "bowtie"
    NECKLACE = "necklace"
    BACKPACK = "backpack"
    CAPE = "cape"
    CROWN = "crown"
    WAND = "wand"
    WINGS = "wings"


class CharacterPersonality(str, Enum):
    FRIENDLY = "friendly"
    BRAVE = "brave"
    SHY = "shy"
    CURIOUS = "curious"
    PLAYFUL = "playful"
    WISE = "wise"
    MISCHIEVOUS = "mischievous"
    GENTLE = "gentle"
    ADVENTUROUS = "adventurous"
    CREATIVE = "creative"


class CharacterAbility(str, Enum):
    FLYING = "flying"
    INVISIBILITY = "invisibility"
    TALKING_TO_PLANTS = "talking to plants"
    HEALING = "healing"
    MAKING_RAINBOWS = "making rainbows"
    GLOWING_IN_THE_DARK = "glowing in the dark"
    CHANGING_COLORS = "changing colors"
    SUPER_STRENGTH = "super strength"
    TIME_FREEZING = "time freezing"
    MAKING_THINGS_FLOAT = "making things float"


def values_of(enum_cls: type[Enum]) -> list[str]:
    """List the string values of a vocabulary, in declaration order."""
    return [member.value for member in enum_cls]
