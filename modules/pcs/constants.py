"""Mage: The Ascension game data shared by the creation and advancement engines."""

TRADITIONS = [
    "Akashic Brotherhood",
    "Celestial Chorus",
    "Cult of Ecstasy",
    "Dreamspeakers",
    "Euthanatos",
    "Order of Hermes",
    "Sons of Ether",
    "Verbena",
    "Virtual Adepts",
    "Hollow Ones",
    "Orphan",
]

ESSENCES = ["Dynamic", "Pattern", "Primordial", "Questing"]
DEFAULT_ESSENCE = "Dynamic"

NATURES = [
    "Architect", "Autocrat", "Bon Vivant", "Bravo", "Caregiver", "Celebrant",
    "Competitor", "Conformist", "Conniver", "Critic", "Curmudgeon", "Deviant",
    "Director", "Enigma", "Eye of the Storm", "Fanatic", "Gallant", "Guru",
    "Idealist", "Judge", "Loner", "Martyr", "Masochist", "Monster", "Pedagogue",
    "Penitent", "Perfectionist", "Rebel", "Rogue", "Scientist", "Survivor",
    "Thrill-Seeker", "Traditionalist", "Trickster", "Visionary",
]

# Natures and demeanors draw from the same archetype list.
DEMEANORS = NATURES

ATTRIBUTE_CATEGORIES = {
    "physical": ("strength", "dexterity", "stamina"),
    "social": ("charisma", "manipulation", "appearance"),
    "mental": ("perception", "intelligence", "wits"),
}

ABILITY_CATEGORIES = {
    "talents": (
        "alertness", "athletics", "awareness", "brawl", "empathy",
        "expression", "intimidation", "leadership", "streetwise", "subterfuge",
    ),
    "skills": (
        "crafts", "drive", "etiquette", "firearms", "meditation",
        "melee", "research", "stealth", "survival", "technology",
    ),
    "knowledges": (
        "academics", "computer", "cosmology", "enigmas", "investigation",
        "law", "medicine", "occult", "politics", "science",
    ),
}

ATTRIBUTE_NAMES = tuple(name for members in ATTRIBUTE_CATEGORIES.values() for name in members)
ABILITY_NAMES = tuple(name for members in ABILITY_CATEGORIES.values() for name in members)

SPHERE_NAMES = (
    "correspondence", "entropy", "forces", "life", "matter",
    "mind", "prime", "spirit", "time",
)

BACKGROUND_NAMES = (
    "allies", "arcane", "avatar", "contacts", "destiny", "dream",
    "influence", "mentor", "node", "resources", "sanctum", "wonder",
)

HEALTH_LEVELS = (
    "bruised", "hurt", "injured", "wounded", "mauled", "crippled", "incapacitated",
)

# Stat groups stored as name -> rating mappings on the sheet.
STAT_GROUPS = {
    "attributes": ATTRIBUTE_NAMES,
    "abilities": ABILITY_NAMES,
    "spheres": SPHERE_NAMES,
    "backgrounds": BACKGROUND_NAMES,
}

# (minimum, maximum) per stat group or scalar field.
STAT_DOMAINS = {
    "attributes": (1, 5),
    "abilities": (0, 5),
    "spheres": (0, 5),
    "backgrounds": (0, 5),
    "arete": (1, 10),
    "willpower": (1, 10),
    "quintessence_max": (0, 20),
    "paradox": (0, 20),
}

STAT_BASES = {
    "attributes": 1,
    "abilities": 0,
    "spheres": 0,
    "backgrounds": 0,
}

STARTING_ARETE = 1
STARTING_WILLPOWER = 5

# Purchasable stat kinds. Grouped kinds name a stat inside a group,
# scalar kinds are single advantages on the sheet.
GROUPED_KINDS = {
    "attribute": "attributes",
    "ability": "abilities",
    "sphere": "spheres",
    "background": "backgrounds",
}
SCALAR_KINDS = ("arete", "willpower")
