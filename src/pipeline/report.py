"""Rule-based recommendations report for an assessment."""

from src.scoring import CATEGORY_DISPLAY_NAMES, RED_FLAG_MESSAGES, Category, RedFlag

MAX_ACTION_STEPS = 5

ACTION_STEPS = {
    Category.MOTILITY: [
        "Start a morning routine: 16oz warm water + 10-min walk before breakfast",
        "Eat dinner 3+ hours before bed",
    ],
    Category.BRAIN_GUT: [
        "Try 5-min box breathing before meals",
        "Aim for 7-8 hours of sleep",
    ],
    Category.AEROPHAGIA: [
        "Slow down eating - aim for 20+ minutes per meal",
        "Avoid drinking through straws",
    ],
    Category.DYSBIOSIS: [
        "Consider adding fermented foods to your diet",
        "Track meals carefully to identify trigger patterns",
    ],
}

DEFAULT_ACTION_STEPS = [
    "Continue tracking meals to identify specific triggers",
    "Stay hydrated between meals",
    "Take a 10-minute walk after meals",
]

SPECIALIST_CATEGORIES = (Category.STRUCTURAL, Category.MOTILITY)

LONG_TERM = {
    Category.DYSBIOSIS: "Discuss probiotic supplementation with your healthcare provider",
    Category.BRAIN_GUT: "Develop consistent stress management routine (meditation, exercise, therapy)",
}

ALWAYS_LONG_TERM = [
    "Continue using Bloat AI to track patterns over time",
    "Re-take this assessment in 30 days to measure progress",
]


def build_summary(overall_score: float, risk_level: str, top_causes: list[str]) -> str:
    summary = (
        f"Based on your responses, your bloating appears to have a {risk_level.lower()} risk profile "
        f"with an overall score of {overall_score:g}/100."
    )
    if top_causes:
        primary = CATEGORY_DISPLAY_NAMES[Category(top_causes[0])]
        summary += f" Your primary contributing factor appears to be {primary}."
    return summary


def build_action_steps(top_causes: list[str]) -> list[str]:
    """Steps keyed by cause, in a fixed cause order. Falls back to general steps."""
    steps = []
    for category, category_steps in ACTION_STEPS.items():
        if category.value in top_causes:
            steps.extend(category_steps)
    if not steps:
        steps = list(DEFAULT_ACTION_STEPS)
    return steps[:MAX_ACTION_STEPS]


def build_long_term_recommendations(top_causes: list[str]) -> list[str]:
    recs = []
    if any(c.value in top_causes for c in SPECIALIST_CATEGORIES):
        recs.append("Consider GI specialist consultation for comprehensive evaluation")
    for category, rec in LONG_TERM.items():
        if category.value in top_causes:
            recs.append(rec)
    recs.extend(ALWAYS_LONG_TERM)
    return recs


def build_medical_consult(red_flags: list[str]) -> str | None:
    if not red_flags:
        return None
    return " | ".join(RED_FLAG_MESSAGES[RedFlag(f)] for f in red_flags)


def build_report(scored: dict) -> dict:
    """Report block for a score_quiz() result."""
    return {
        "summary": build_summary(scored["overall_score"], scored["risk_level"], scored["top_causes"]),
        "action_steps": build_action_steps(scored["top_causes"]),
        "long_term": build_long_term_recommendations(scored["top_causes"]),
        "medical_consult": build_medical_consult(scored["red_flags"]),
    }
