"""Bundled companion-planting data for common square-foot garden plants.

Each record lists the plants that grow well next to it (``companions``)
and the plants that must not share a border or corner with it
(``avoid``).  The lists come from general gardening references and are
not symmetric; the catalog resolves both directions at lookup time.

Some IDs referenced in ``avoid`` (``dill``, ``fennel``, ``rue`` ...) have
no record of their own; they only matter if a caller's catalog defines
them.
"""

from .catalog import PlantCatalog

PLANT_LIBRARY: list[dict] = [
    # Vegetables
    {"id": "tomato", "name": "Tomato",
     "companions": ["basil", "carrot", "marigold", "parsley"],
     "avoid": ["cabbage", "broccoli", "cauliflower", "potato"]},
    {"id": "lettuce", "name": "Lettuce",
     "companions": ["carrot", "radish", "cucumber", "strawberry"],
     "avoid": ["parsley"]},
    {"id": "carrot", "name": "Carrot",
     "companions": ["lettuce", "onion", "tomato", "pea"],
     "avoid": ["dill", "parsnip"]},
    {"id": "pepper", "name": "Bell Pepper",
     "companions": ["basil", "onion", "spinach"],
     "avoid": ["fennel", "kohlrabi"]},
    {"id": "cucumber", "name": "Cucumber",
     "companions": ["bean", "pea", "radish", "lettuce"],
     "avoid": ["potato", "sage"]},
    {"id": "bean", "name": "Green Bean",
     "companions": ["carrot", "cucumber", "radish", "strawberry"],
     "avoid": ["onion", "garlic", "fennel"]},
    {"id": "spinach", "name": "Spinach",
     "companions": ["strawberry", "pea", "radish"],
     "avoid": ["potato"]},
    {"id": "radish", "name": "Radish",
     "companions": ["lettuce", "carrot", "cucumber", "pea"],
     "avoid": ["hyssop"]},
    {"id": "onion", "name": "Onion",
     "companions": ["carrot", "tomato", "pepper", "lettuce"],
     "avoid": ["bean", "pea", "sage"]},
    {"id": "broccoli", "name": "Broccoli",
     "companions": ["beet", "onion", "celery"],
     "avoid": ["tomato", "strawberry", "pole-bean"]},
    {"id": "cabbage", "name": "Cabbage",
     "companions": ["beet", "celery", "onion"],
     "avoid": ["tomato", "strawberry"]},
    {"id": "cauliflower", "name": "Cauliflower",
     "companions": ["beet", "celery", "onion"],
     "avoid": ["tomato", "strawberry"]},
    {"id": "zucchini", "name": "Zucchini",
     "companions": ["bean", "corn", "pea"],
     "avoid": ["potato"]},
    {"id": "pea", "name": "Pea",
     "companions": ["carrot", "cucumber", "radish", "spinach"],
     "avoid": ["onion", "garlic"]},
    {"id": "potato", "name": "Potato",
     "companions": ["bean", "corn", "cabbage"],
     "avoid": ["tomato", "cucumber", "zucchini"]},
    {"id": "beet", "name": "Beet",
     "companions": ["broccoli", "lettuce", "onion"],
     "avoid": ["pole-bean"]},
    {"id": "kale", "name": "Kale",
     "companions": ["beet", "celery", "onion"],
     "avoid": ["tomato", "strawberry"]},
    {"id": "swiss-chard", "name": "Swiss Chard",
     "companions": ["bean", "cabbage", "onion"],
     "avoid": []},
    {"id": "eggplant", "name": "Eggplant",
     "companions": ["bean", "pepper", "spinach"],
     "avoid": ["fennel"]},
    {"id": "garlic", "name": "Garlic",
     "companions": ["tomato", "carrot", "cucumber"],
     "avoid": ["bean", "pea"]},
    {"id": "arugula", "name": "Arugula",
     "companions": ["beet", "carrot", "lettuce"],
     "avoid": []},
    {"id": "corn", "name": "Corn",
     "companions": ["bean", "pea", "cucumber", "zucchini"],
     "avoid": ["tomato"]},
    {"id": "strawberry", "name": "Strawberry",
     "companions": ["bean", "lettuce", "spinach"],
     "avoid": ["broccoli", "cabbage", "cauliflower"]},
    # Herbs and flowers
    {"id": "basil", "name": "Basil",
     "companions": ["tomato", "pepper", "oregano"],
     "avoid": ["sage", "rue"]},
    {"id": "cilantro", "name": "Cilantro",
     "companions": ["tomato", "spinach"],
     "avoid": ["fennel"]},
    {"id": "parsley", "name": "Parsley",
     "companions": ["tomato", "asparagus", "corn"],
     "avoid": ["lettuce"]},
    {"id": "oregano", "name": "Oregano",
     "companions": ["basil", "tomato", "pepper"],
     "avoid": []},
    {"id": "thyme", "name": "Thyme",
     "companions": ["cabbage", "tomato", "strawberry"],
     "avoid": []},
    {"id": "sage", "name": "Sage",
     "companions": ["carrot", "strawberry", "tomato"],
     "avoid": ["cucumber", "onion"]},
    {"id": "marigold", "name": "Marigold",
     "companions": ["tomato", "cucumber", "bean"],
     "avoid": []},
    # Houseplants (no relationships)
    {"id": "aloe", "name": "Aloe", "companions": [], "avoid": []},
    {"id": "calathea", "name": "Calathea", "companions": [], "avoid": []},
]


def default_catalog() -> PlantCatalog:
    """Build a :class:`PlantCatalog` from :data:`PLANT_LIBRARY`."""
    return PlantCatalog.from_records(PLANT_LIBRARY)
