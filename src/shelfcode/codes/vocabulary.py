# ABOUTME: Static genre vocabulary mapping category names to shelf theme codes.
# ABOUTME: Declared order matters: classifier tie-breaks and reverse lookups follow it.

from types import MappingProxyType

DEFAULT_THEME_CODE = "GEN"
UNKNOWN_THEME_NAME = "Unknown"

GENRE_MAPPINGS = MappingProxyType(
    {
        # Broad fiction
        "Fiction": "FIC",
        "Fantasy": "FAN",
        "Science Fiction": "SF",
        "Mystery": "MYS",
        "Romance": "ROM",
        "Romance Fantasy": "ROF",
        "Historical Fiction": "HIS",
        "Young Adult": "YA",
        "Horror": "HOR",
        "Adventure": "ADV",
        "Children's": "KID",
        # Broad non-fiction
        "Biography": "BIO",
        "History": "HST",
        "Science": "SCI",
        "Philosophy": "PHI",
        "Self-Help": "SLF",
        "Business": "BUS",
        "Art": "ART",
        "Education": "EDU",
        "Health": "HLT",
        "Smut": "SMU",
        "General": "GEN",
    }
)


def genre_names() -> list[str]:
    """Vocabulary category names in declared order."""
    return list(GENRE_MAPPINGS)


def theme_name_for(theme_code: str) -> str | None:
    """Return the first category name whose theme code is `theme_code`, or None."""
    for name, code in GENRE_MAPPINGS.items():
        if code == theme_code:
            return name
    return None
