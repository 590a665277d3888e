"""Fixed German lexicons shared, read-only, by all stage processors."""

from types import MappingProxyType

# Character classes used in the rule patterns
UPPER = "A-ZÄÖÜ"
LOWER = "a-zäöüß"

PUNCTUATION = frozenset(".,!?(){}[];:\"")

ARTICLES = frozenset(
    {
        "der", "die", "das", "den", "dem", "des",
        "ein", "eine", "einen", "einem", "einer", "eines",
    }
)

# Determiners that mark the following capitalized word as a common noun
DETERMINERS = ARTICLES | frozenset(
    {
        "dieser", "diese", "dieses", "diesen", "diesem",
        "jeder", "jede", "jedes", "jeden", "jedem",
        "kein", "keine", "keinen", "keinem", "keiner",
        "mein", "meine", "dein", "deine", "sein", "seine", "unser", "unsere",
    }
)

PERSONAL_PRONOUNS = frozenset(
    {
        "ich", "du", "er", "sie", "es", "wir", "ihr",
        "mich", "dich", "ihn", "uns", "euch", "ihm", "ihnen", "man",
    }
)

# Pronouns the coreference resolver tries to link back to an entity
COREF_PRONOUNS = frozenset(
    {
        "er", "sie", "es",
        "ihm", "ihr", "ihn",
        "sein", "seine", "seiner", "seinen", "seinem",
        "ihre", "ihrer", "ihren", "ihrem",
        "deren", "dessen",
    }
)

GENDERS = MappingProxyType(
    {
        "der": "MASC",
        "die": "FEM",
        "das": "NEUT",
        "er": "MASC",
        "sie": "FEM",
        "es": "NEUT",
    }
)

PREPOSITIONS = ("in", "auf", "unter", "über", "bei", "seit", "von", "zu")
CONJUNCTIONS = ("und", "oder", "aber", "denn", "sondern")
COPULAS = ("ist", "sind", "war", "waren", "hat", "haben", "wird", "werden")

# Exact-match exceptions checked before the POS pattern rules (lowercased key)
POS_EXCEPTIONS = MappingProxyType(
    {
        **{word: ("ART", "Article") for word in ARTICLES},
        **{word: ("PRON", "Pronoun") for word in PERSONAL_PRONOUNS},
        "nicht": ("PART", "Negation"),
        "sehr": ("ADV", "Adverb"),
        "nur": ("ADV", "Adverb"),
        "auch": ("ADV", "Adverb"),
        "noch": ("ADV", "Adverb"),
        "schon": ("ADV", "Adverb"),
        "immer": ("ADV", "Adverb"),
        "heute": ("ADV", "Adverb"),
        "hier": ("ADV", "Adverb"),
        "dort": ("ADV", "Adverb"),
        "groß": ("ADJ", "Adjective"),
        "klein": ("ADJ", "Adjective"),
        "gut": ("ADJ", "Adjective"),
        "neu": ("ADJ", "Adjective"),
        "alt": ("ADJ", "Adjective"),
        "schön": ("ADJ", "Adjective"),
        "lang": ("ADJ", "Adjective"),
        "kurz": ("ADJ", "Adjective"),
        "hoch": ("ADJ", "Adjective"),
        "jung": ("ADJ", "Adjective"),
    }
)

TITLES = (
    "Dr.", "Prof.", "Dipl.", "Ing.", "Med.", "Phil.",
    "Herr", "Frau", "Graf", "Baron", "König", "Kaiser",
)

LOCATION_INDICATORS = (
    "straße", "platz", "weg", "allee", "gasse", "ring",
    "stadt", "dorf", "berg", "tal", "burg", "brücke",
)

ORGANIZATION_SUFFIXES = ("GmbH", "AG", "KG", "OHG", "e.V.", "GbR")

# Closed-class words that never start a fallback person name
FUNCTION_WORDS = (
    DETERMINERS
    | PERSONAL_PRONOUNS
    | COREF_PRONOUNS
    | frozenset(PREPOSITIONS)
    | frozenset(CONJUNCTIONS)
    | frozenset(COPULAS)
    | frozenset({"nicht", "auch", "noch", "schon", "heute", "hier", "dort", "dann", "wenn", "als"})
)

# Constituents used to split capitalized compounds such as "Bundesfinanzminister"
COMPOUND_CONSTITUENTS = frozenset(
    {
        "bundes", "landes", "staats", "finanz", "minister", "ministerin", "ministerium",
        "kanzler", "kanzlerin", "präsident", "präsidentin", "regierung", "regierungs",
        "sprecher", "sprecherin", "automobil", "industrie", "auto", "autos", "elektro",
        "software", "entwickler", "entwicklerin", "haupt", "bahn", "hof", "arbeit",
        "arbeits", "markt", "wirtschaft", "wirtschafts", "verkehr", "verkehrs",
        "gesundheit", "gesundheits", "innen", "außen", "justiz", "schule", "hoch",
        "kranken", "haus", "versicherung", "zeitung", "wetter", "bericht", "polizei",
        "fußball", "verein", "tag", "post", "amt", "stadt", "rat", "bürger", "meister",
        "wohnung", "wohnungs", "bau", "geld", "bank", "kredit", "steuer", "politik",
    }
)
