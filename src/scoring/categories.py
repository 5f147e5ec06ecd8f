"""Root-cause categories, weights, display names and fixed ordering."""

from enum import Enum


class Category(str, Enum):
    AEROPHAGIA = "aerophagia"
    MOTILITY = "motility"
    DYSBIOSIS = "dysbiosis"
    BRAIN_GUT = "brain_gut"
    HORMONAL = "hormonal"
    STRUCTURAL = "structural"
    LIFESTYLE = "lifestyle"


class RiskLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    SEVERE = "Severe"


class CategoryLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


# Quiz section order. Iteration over scores always goes through this list.
CATEGORY_ORDER = [
    Category.AEROPHAGIA,
    Category.MOTILITY,
    Category.DYSBIOSIS,
    Category.BRAIN_GUT,
    Category.HORMONAL,
    Category.STRUCTURAL,
    Category.LIFESTYLE,
]

CATEGORY_WEIGHTS = {
    Category.AEROPHAGIA: 1.0,
    Category.MOTILITY: 1.2,
    Category.DYSBIOSIS: 1.3,
    Category.BRAIN_GUT: 1.1,
    Category.HORMONAL: 0.8,
    Category.STRUCTURAL: 1.0,
    Category.LIFESTYLE: 0.9,
}

# Tie-break precedence for top causes: weight desc, then section order.
CATEGORY_PRIORITY = sorted(
    CATEGORY_ORDER,
    key=lambda c: (-CATEGORY_WEIGHTS[c], CATEGORY_ORDER.index(c)),
)

CATEGORY_DISPLAY_NAMES = {
    Category.AEROPHAGIA: "Eating Mechanics (Air Swallowing)",
    Category.MOTILITY: "Gut Motility",
    Category.DYSBIOSIS: "Microbial Balance",
    Category.BRAIN_GUT: "Brain-Gut Axis",
    Category.HORMONAL: "Hormonal Factors",
    Category.STRUCTURAL: "Structural/Medical",
    Category.LIFESTYLE: "Lifestyle/Posture",
}

# Lower bound of each risk tier, highest first. A boundary value belongs to the higher tier.
RISK_THRESHOLDS = [
    (75, RiskLevel.SEVERE),
    (50, RiskLevel.HIGH),
    (25, RiskLevel.MODERATE),
]

LEVEL_THRESHOLDS = [
    (66, CategoryLevel.HIGH),
    (33, CategoryLevel.MODERATE),
]
