from enum import StrEnum


class Size(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


# Sweetener value meaning "no sweetener" (distinct from leaving it blank)
NO_SWEETENER = "none"
