"""Point-buy constants for traditional (priority-based) character creation."""

PRIORITIES = ("primary", "secondary", "tertiary")

ATTRIBUTE_BUDGETS = {
    "primary": 7,
    "secondary": 5,
    "tertiary": 3,
}

ABILITY_BUDGETS = {
    "primary": 13,
    "secondary": 9,
    "tertiary": 5,
}

SPHERE_POINTS = 6
SPHERE_CREATION_CAP = 3
AFFINITY_MINIMUM = 1

BACKGROUND_POINTS = 7

FREEBIE_POINTS = 15

FREEBIE_COSTS = {
    "attribute": 5,
    "ability": 2,
    "sphere": 7,
    "background": 1,
    "arete": 4,
    "willpower": 1,
}

# Arete stops at 5 here although experience can raise it to 10.
FREEBIE_CEILINGS = {
    "attribute": 5,
    "ability": 5,
    "sphere": 5,
    "background": 5,
    "arete": 5,
    "willpower": 10,
}
