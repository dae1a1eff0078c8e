from .profile import Profile, classify
from .prevalidators import PreValidator, create_prevalidator
from .ranges import DaysValidator, MonthsValidator, YearsValidator

__all__ = [
    "Profile",
    "classify",
    "PreValidator",
    "create_prevalidator",
    "DaysValidator",
    "MonthsValidator",
    "YearsValidator",
]
