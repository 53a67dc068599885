"""Intermediate classifications shared by the rules and the narrative builder."""

import enum


class BudgetFit(str, enum.Enum):
    FULL = "full"
    PARTIAL = "partial"
    NONE = "none"
    NEUTRAL = "neutral"


class TimelineFit(str, enum.Enum):
    FIT = "fit"
    TIGHT = "tight"
    CANNOT_FIT = "cannot-fit"
    NEUTRAL = "neutral"


class UrgencyBucket(str, enum.Enum):
    URGENT = "urgent"
    HIGH = "high"
    STANDARD = "standard"
    FLEXIBLE = "flexible"
    EXPLORING = "exploring"
