"""Grocery aisle classification by keyword matching."""

from __future__ import annotations

from dataclasses import dataclass

from .models import AisleInfo


@dataclass(frozen=True)
class AisleRule:
    keywords: tuple[str, ...]  # French and English terms
    info: AisleInfo


OTHER_AISLE = AisleInfo(aisle="Autres", category="other", emoji="🛒", sort_order=99)

# Order matters: the first rule with a keyword found in the name wins.
AISLE_RULES: tuple[AisleRule, ...] = (
    AisleRule(
        keywords=(
            # FR
            "pomme", "poire", "banane", "orange", "citron", "raisin", "fraise",
            "framboise", "mangue", "ananas", "melon", "pastèque", "cerise",
            "pêche", "abricot", "kiwi", "tomate", "carotte", "oignon", "ail",
            "poireau", "poivron", "courgette", "aubergine", "concombre",
            "salade", "laitue", "épinard", "brocoli", "chou-fleur", "céleri",
            "asperge", "haricot vert", "petit pois", "champignon",
            "pomme de terre", "patate", "courge", "citrouille", "betterave",
            "navet", "radis", "fenouil", "artichaut", "avocat", "maïs",
            "coriandre", "persil", "menthe", "basilic", "thym", "romarin",
            # EN
            "apple", "pear", "banana", "orange", "lemon", "grape", "strawberry",
            "raspberry", "mango", "pineapple", "melon", "watermelon", "cherry",
            "peach", "apricot", "tomato", "carrot", "onion", "garlic", "leek",
            "bell pepper", "zucchini", "eggplant", "cucumber", "lettuce",
            "spinach", "broccoli", "cauliflower", "celery", "asparagus",
            "green bean", "pea", "mushroom", "potato", "squash", "pumpkin",
            "beet", "turnip", "radish", "fennel", "artichoke", "avocado",
            "corn", "cilantro", "parsley", "mint", "basil", "thyme", "rosemary",
        ),
        info=AisleInfo("Fruits & Légumes", "produce", "🥦", 1),
    ),
    AisleRule(
        keywords=(
            # FR
            "poulet", "bœuf", "veau", "porc", "agneau", "dinde", "bacon",
            "jambon", "saucisse", "merguez", "steak", "côtelette", "rôti",
            "escalope", "saumon", "thon", "cabillaud", "truite", "crevette",
            "moule", "homard", "filet de poulet", "poitrine", "viande hachée",
            # EN
            "chicken", "beef", "veal", "pork", "lamb", "turkey", "bacon", "ham",
            "sausage", "steak", "chop", "roast", "escalope", "salmon", "tuna",
            "cod", "trout", "shrimp", "mussel", "lobster", "fish fillet",
            "ground beef", "ground meat",
        ),
        info=AisleInfo("Viandes & Poissons", "meat", "🥩", 2),
    ),
    AisleRule(
        keywords=(
            # FR
            "lait", "beurre", "fromage", "crème", "yaourt", "yogourt", "œuf",
            "oeuf", "mozzarella", "parmesan", "cheddar", "ricotta", "gruyère",
            "feta", "crème fraîche", "crème sure", "mascarpone", "brie",
            "camembert",
            # EN
            "milk", "butter", "cheese", "cream", "yogurt", "egg", "mozzarella",
            "parmesan", "cheddar", "ricotta", "gruyere", "feta", "sour cream",
            "mascarpone", "brie", "camembert",
        ),
        info=AisleInfo("Produits Laitiers & Œufs", "dairy", "🥛", 3),
    ),
    AisleRule(
        keywords=(
            # FR
            "pain", "baguette", "brioche", "croissant", "pain de mie", "muffin",
            "bagel", "pita", "tortilla", "naan",
            # EN
            "bread", "baguette", "brioche", "croissant", "sandwich bread",
            "muffin", "bagel", "pita", "tortilla", "naan",
        ),
        info=AisleInfo("Boulangerie & Pains", "bakery", "🍞", 4),
    ),
    AisleRule(
        keywords=(
            # FR
            "pâtes", "riz", "farine", "sucre", "quinoa", "couscous", "orge",
            "semoule", "céréale", "avoine", "flocon", "granola", "muesli", "blé",
            "nouille", "spaghetti", "fusilli", "penne", "macaroni", "vermicelle",
            # EN
            "pasta", "rice", "flour", "sugar", "quinoa", "couscous", "barley",
            "semolina", "cereal", "oat", "flake", "granola", "muesli", "wheat",
            "noodle", "spaghetti", "fusilli", "penne", "macaroni", "vermicelli",
        ),
        info=AisleInfo("Épicerie & Céréales", "grains", "🌾", 5),
    ),
    AisleRule(
        keywords=(
            # FR
            "conserve", "boîte de", "haricot rouge", "haricot blanc", "lentille",
            "pois chiche", "fève", "tomate concassée", "soupe en boîte",
            "thon en conserve", "sardine",
            # EN
            "canned", "kidney bean", "white bean", "lentil", "chickpea",
            "legume", "canned tomato", "canned tuna", "sardine",
        ),
        info=AisleInfo("Conserves & Légumineuses", "canned", "🥫", 6),
    ),
    AisleRule(
        keywords=(
            # FR
            "huile", "vinaigrette", "sauce soja", "sauce tomate", "ketchup",
            "moutarde", "mayonnaise", "vinaigre", "sriracha", "tabasco",
            "worcestershire", "pesto", "bouillon", "fond de veau", "tahini",
            "miso",
            # EN
            "oil", "dressing", "soy sauce", "tomato sauce", "ketchup", "mustard",
            "mayonnaise", "vinegar", "sriracha", "tabasco", "worcestershire",
            "pesto", "broth", "stock", "tahini", "miso",
        ),
        info=AisleInfo("Huiles, Sauces & Condiments", "condiments", "🫙", 7),
    ),
    AisleRule(
        keywords=(
            # FR
            "sel", "poivre", "cumin", "curcuma", "paprika", "cannelle",
            "gingembre", "muscade", "cardamome", "clou de girofle", "aneth",
            "origan", "laurier", "piment", "chili", "curry", "épice",
            "assaisonnement", "herbes de provence",
            # EN
            "salt", "pepper", "cumin", "turmeric", "paprika", "cinnamon",
            "ginger", "nutmeg", "cardamom", "clove", "dill", "oregano",
            "bay leaf", "chili", "curry", "spice", "seasoning",
        ),
        info=AisleInfo("Épices & Assaisonnements", "spices", "🌿", 8),
    ),
    AisleRule(
        keywords=(
            # FR
            "surgelé", "congelé", "glace", "sorbet", "légume surgelé",
            "pizza surgelée",
            # EN
            "frozen", "ice cream", "sorbet", "frozen vegetable", "frozen pizza",
        ),
        info=AisleInfo("Produits Surgelés", "frozen", "🧊", 9),
    ),
    AisleRule(
        keywords=(
            # FR
            "eau", "jus de", "lait de soja", "lait d'amande", "thé", "café",
            "tisane", "limonade", "soda", "boisson", "bière", "vin",
            # EN
            "water", "juice", "soy milk", "almond milk", "tea", "coffee",
            "herbal tea", "lemonade", "soda", "beverage", "beer", "wine",
        ),
        info=AisleInfo("Boissons", "beverages", "🧃", 10),
    ),
    AisleRule(
        keywords=(
            # FR
            "noix", "amande", "noisette", "cajou", "pistache", "cacahuète",
            "beurre d'amande", "beurre d'arachide", "chips", "craquelin",
            "biscuit", "chocolat", "bonbon", "confiture", "miel",
            # EN
            "nut", "almond", "hazelnut", "cashew", "pistachio", "peanut",
            "almond butter", "peanut butter", "chips", "cracker", "cookie",
            "chocolate", "candy", "jam", "honey",
        ),
        info=AisleInfo("Collations & Noix", "snacks", "🥜", 11),
    ),
)


def classify_ingredient(name: str) -> AisleInfo:
    """Classify an ingredient into a grocery aisle.

    Keywords match as plain substrings, so "pea" also matches "peanut" under
    the produce rule. Rule order decides which aisle wins.
    """
    normalized = name.lower().strip()
    for rule in AISLE_RULES:
        for keyword in rule.keywords:
            if keyword in normalized:
                return rule.info
    return OTHER_AISLE


def default_aisle_labels() -> dict[str, str]:
    """Return category code → aisle name for every aisle, catch-all included."""
    labels = {rule.info.category: rule.info.aisle for rule in AISLE_RULES}
    labels[OTHER_AISLE.category] = OTHER_AISLE.aisle
    return labels
