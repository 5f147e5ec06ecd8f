"""Root-cause quiz question catalog and per-answer points."""

from collections.abc import Mapping

from src.scoring.categories import CATEGORY_ORDER, Category

SINGLE_CHOICE = "single-choice"
MULTI_CHOICE = "multi-choice"
NONE_OPTION = "none"

SECTION_NAMES = {
    Category.AEROPHAGIA: "Eating & Breathing Mechanics",
    Category.MOTILITY: "Gut Motor Function",
    Category.DYSBIOSIS: "Microbial Balance",
    Category.BRAIN_GUT: "Brain-Gut Connection",
    Category.HORMONAL: "Hormonal & Cyclical",
    Category.STRUCTURAL: "Structural & Medical",
    Category.LIFESTYLE: "Physical Activity & Posture",
}


class AnswerSetError(TypeError):
    """Raised when the answer set is not a mapping at all."""


def check_answer_set(answers) -> None:
    if not isinstance(answers, Mapping):
        raise AnswerSetError(
            f"Answer set must be a mapping of question id to answer, got {type(answers).__name__}"
        )


def _option(value: str, label: str, points: int | None = None, sublabel: str | None = None) -> dict:
    opt = {"value": value, "label": label}
    if sublabel:
        opt["sublabel"] = sublabel
    if points is not None:
        opt["points"] = points
    return opt


def _count_rule(per_item: int, cap: int):
    """Points per selected item, capped. Selecting 'none' scores 0."""

    def rule(selected: list[str]) -> int:
        if NONE_OPTION in selected:
            return 0
        return min(len(selected) * per_item, cap)

    return rule


def _stress_management_rule(selected: list[str]) -> int:
    """More practices, fewer points. 'none' scores the maximum."""
    if NONE_OPTION in selected:
        return 3
    count = len(selected)
    if count >= 4:
        return 0
    if count >= 2:
        return 1
    if count == 1:
        return 2
    return 3


QUESTIONS = [
    # Eating & Breathing Mechanics
    {
        "id": "eating-pace",
        "category": Category.AEROPHAGIA,
        "text": "Eating Pace",
        "type": SINGLE_CHOICE,
        "explanation": "Eating too quickly can cause you to swallow more air",
        "options": [
            _option("very-fast", "Very fast", 2, "< 10 min per meal"),
            _option("moderate", "Moderate", 1, "10-20 min"),
            _option("slow", "Slow", 0, "20+ min"),
        ],
    },
    {
        "id": "eating-habits",
        "category": Category.AEROPHAGIA,
        "text": "Eating Habits",
        "type": MULTI_CHOICE,
        "explanation": "These habits can increase air swallowing",
        "options": [
            _option("chew-gum", "Chew gum frequently"),
            _option("use-straws", "Use straws regularly"),
            _option("talk-eating", "Talk while eating"),
            _option("eat-stressed", "Eat while stressed/rushed"),
            _option("carbonated-daily", "Drink carbonated beverages daily"),
            _option("smoke-vape", "Smoke or vape"),
            _option(NONE_OPTION, "None of these apply"),
        ],
        "rule": _count_rule(per_item=1, cap=6),
        "points_range": (0, 6),
    },
    {
        "id": "liquid-consumption",
        "category": Category.AEROPHAGIA,
        "text": "Liquid Consumption with Meals",
        "type": SINGLE_CHOICE,
        "options": [
            _option("large-amounts", "Large amounts before/during meals", 2),
            _option("moderate-amounts", "Moderate amounts", 1),
            _option("minimal", "Minimal - mostly between meals", 0),
            _option("rarely-drink", "I rarely drink water", 1),
        ],
    },
    {
        "id": "breathing-pattern",
        "category": Category.AEROPHAGIA,
        "text": "Breathing Pattern Awareness",
        "type": SINGLE_CHOICE,
        "options": [
            _option("often-mouth", "Often breathe through mouth", 2),
            _option("sometimes-mouth", "Sometimes mouth breathe when stressed", 1),
            _option("usually-nose", "Usually breathe through nose", 0),
            _option("never-noticed", "Never noticed", 0),
        ],
    },
    # Gut Motor Function
    {
        "id": "bowel-pattern",
        "category": Category.MOTILITY,
        "text": "Bowel Movement Pattern",
        "type": SINGLE_CHOICE,
        "options": [
            _option("less-than-3", "Less than 3x per week", 3),
            _option("3-6-weekly", "3-6x per week", 1),
            _option("daily", "Daily", 0),
            _option("multiple-daily", "Multiple times daily", 1),
        ],
    },
    {
        "id": "stool-type",
        "category": Category.MOTILITY,
        "text": "Stool Consistency (Bristol Scale)",
        "type": SINGLE_CHOICE,
        "options": [
            _option("type-1-2", "Type 1-2", 3, "Hard, lumpy"),
            _option("type-3-4", "Type 3-4", 0, "Ideal consistency"),
            _option("type-5-6", "Type 5-6", 2, "Loose"),
            _option("type-7", "Type 7", 3, "Watery"),
        ],
    },
    {
        "id": "early-fullness",
        "category": Category.MOTILITY,
        "text": "Early Fullness/Upper Discomfort",
        "type": SINGLE_CHOICE,
        "options": [
            _option("few-bites", "Get full after just a few bites", 3),
            _option("quickly", "Feel full quickly but can finish meal", 2),
            _option("normal", "Normal fullness patterns", 0),
            _option("rarely-full", "Rarely feel full", 1),
        ],
    },
    {
        "id": "activity-level",
        "category": Category.MOTILITY,
        "text": "Daily Activity Level",
        "type": SINGLE_CHOICE,
        "options": [
            _option("sedentary", "Sedentary", 2, "< 30min movement"),
            _option("light", "Light activity", 1, "30-60min"),
            _option("moderate", "Moderate", 0, "60-120min"),
            _option("very-active", "Very active", 0, "120+ min"),
        ],
    },
    # Microbial Balance
    {
        "id": "antibiotic-use",
        "category": Category.DYSBIOSIS,
        "text": "Antibiotic Use (Past Year)",
        "type": SINGLE_CHOICE,
        "options": [
            _option("3-plus", "3+ courses", 3),
            _option("1-2", "1-2 courses", 2),
            _option("none", "None", 0),
        ],
    },
    {
        "id": "acid-reflux-meds",
        "category": Category.DYSBIOSIS,
        "text": "Acid Reflux Medication History",
        "type": SINGLE_CHOICE,
        "options": [
            _option("daily-ppi", "Daily PPI use (current)", 3),
            _option("previous-ppi", "Previous PPI use (stopped)", 2),
            _option("occasional-antacids", "Occasional antacids", 1),
            _option("never", "Never used", 0),
        ],
    },
    {
        "id": "bloating-pattern",
        "category": Category.DYSBIOSIS,
        "text": "Bloating Pattern Throughout Day",
        "type": SINGLE_CHOICE,
        "options": [
            _option("morning-fasting", "Worst in morning, fasting", 2),
            _option("progressive-day", "Progressively worse as day goes on", 3),
            _option("post-meal-1-2hrs", "Peaks 1-2 hours after meals", 1),
            _option("random", "Random/no clear pattern", 1),
        ],
    },
    {
        "id": "probiotic-intake",
        "category": Category.DYSBIOSIS,
        "text": "Probiotic/Fermented Food Intake",
        "type": SINGLE_CHOICE,
        "options": [
            _option("daily", "Daily probiotics/fermented foods", 0),
            _option("weekly", "Weekly consumption", 1),
            _option("rarely", "Rarely", 2),
            _option("never-worse", "Never - or makes bloating WORSE", 3),
        ],
    },
    # Brain-Gut Connection
    {
        "id": "stress-impact",
        "category": Category.BRAIN_GUT,
        "text": "Stress Impact on Bloating",
        "type": SINGLE_CHOICE,
        "options": [
            _option("immediate-correlation", "Direct correlation - stress = immediate bloating", 3),
            _option("worse-stressful", "Bloating worse during stressful periods", 2),
            _option("minimal-connection", "Minimal connection", 1),
            _option("no-relationship", "No relationship I've noticed", 0),
        ],
    },
    {
        "id": "vacation-difference",
        "category": Category.BRAIN_GUT,
        "text": "Weekend/Vacation Bloating Difference",
        "type": SINGLE_CHOICE,
        "options": [
            _option("significantly-better", "Significantly better on vacation/weekends", 3),
            _option("somewhat-better", "Somewhat better", 2),
            _option("no-difference", "No difference", 0),
            _option("actually-worse", "Actually worse (different routine)", 1),
        ],
    },
    {
        "id": "sleep-quality",
        "category": Category.BRAIN_GUT,
        "text": "Sleep Quality",
        "type": SINGLE_CHOICE,
        "options": [
            _option("poor", "Poor", 3, "< 6hrs or frequently disrupted"),
            _option("fair", "Fair", 2, "6-7hrs, some disruption"),
            _option("good", "Good", 1, "7-8hrs, minimal disruption"),
            _option("excellent", "Excellent", 0, "8+ hrs, quality sleep"),
        ],
    },
    {
        "id": "stress-management",
        "category": Category.BRAIN_GUT,
        "text": "Stress Management Practices",
        "type": MULTI_CHOICE,
        "options": [
            _option("meditation", "Regular meditation/mindfulness"),
            _option("exercise-3plus", "Exercise 3+ times/week"),
            _option("therapy", "Therapy/counseling"),
            _option("breathing", "Breathing exercises"),
            _option(NONE_OPTION, "None currently"),
        ],
        "rule": _stress_management_rule,
        "points_range": (0, 3),
    },
    {
        "id": "work-life-balance",
        "category": Category.BRAIN_GUT,
        "text": "Work-Life Balance",
        "type": SINGLE_CHOICE,
        "options": [
            _option("constantly-overwhelmed", "Constantly overwhelmed", 3),
            _option("frequently-stressed", "Frequently stressed", 2),
            _option("manageable", "Manageable most days", 1),
            _option("well-balanced", "Well-balanced", 0),
        ],
    },
    # Hormonal & Cyclical
    {
        "id": "menstrual-effect",
        "category": Category.HORMONAL,
        "text": "Menstrual Cycle Effects (Females Only)",
        "type": SINGLE_CHOICE,
        "skip_for_sex": "male",
        "options": [
            _option("severe-bloating", "Severe bloating pre-period (PMS)", 3),
            _option("moderate-bloating", "Moderate bloating pre-period", 2),
            _option("minimal-bloating", "Minimal menstrual bloating", 1),
            _option("no-pattern", "No noticeable pattern", 0),
            _option("post-menopausal-na", "Post-menopausal/N/A", 0),
        ],
    },
    {
        "id": "time-seasonal-pattern",
        "category": Category.HORMONAL,
        "text": "Time-of-Day/Seasonal Patterns",
        "type": SINGLE_CHOICE,
        "options": [
            _option("evening-worse", "Bloating worse in evening always", 2),
            _option("seasonal-worse", "Bloating worse in certain seasons", 2),
            _option("consistent", "Consistent throughout day/year", 0),
            _option("morning-predominant", "Morning bloating predominant", 3),
        ],
    },
    # Structural & Medical
    {
        "id": "surgery-history",
        "category": Category.STRUCTURAL,
        "text": "Abdominal Surgery History",
        "type": SINGLE_CHOICE,
        "options": [
            _option("multiple", "Multiple abdominal surgeries", 3),
            _option("one-significant", "One significant surgery", 2, "C-section, appendectomy, etc."),
            _option("minor-only", "Minor procedure only", 1),
            _option("none", "No surgical history", 0),
        ],
    },
    {
        "id": "pelvic-floor-issues",
        "category": Category.STRUCTURAL,
        "text": "Pelvic Floor Issues (Females Only)",
        "type": SINGLE_CHOICE,
        "skip_for_sex": "male",
        "options": [
            _option("diagnosed", "Diagnosed pelvic floor dysfunction", 3),
            _option("suspected", "Suspected issues", 2, "Leakage, pain, etc."),
            _option("post-pregnancy", "Post-pregnancy concerns", 1),
            _option("no-issues", "No known issues", 0),
        ],
    },
    {
        "id": "current-medications",
        "category": Category.STRUCTURAL,
        "text": "Current Medications",
        "type": MULTI_CHOICE,
        "options": [
            _option("opioids", "Opioids/pain medications"),
            _option("antidepressants", "Antidepressants/anxiety meds"),
            _option("blood-pressure", "Blood pressure medications"),
            _option("diabetes", "Diabetes medications"),
            _option("birth-control", "Hormonal birth control"),
            _option("thyroid", "Thyroid medications"),
            _option(NONE_OPTION, "None of these"),
        ],
        "rule": _count_rule(per_item=1, cap=6),
        "points_range": (0, 6),
    },
    {
        "id": "diagnosed-conditions",
        "category": Category.STRUCTURAL,
        "text": "Diagnosed Conditions",
        "type": MULTI_CHOICE,
        "options": [
            _option("ibs", "IBS (diagnosed by doctor)"),
            _option("ibd", "IBD (Crohn's/Ulcerative Colitis)"),
            _option("sibo", "SIBO (diagnosed)"),
            _option("food-intolerances", "Food intolerances (tested)"),
            _option("endometriosis", "Endometriosis"),
            _option("hypothyroidism", "Hypothyroidism"),
            _option("diabetes", "Diabetes"),
            _option(NONE_OPTION, "None diagnosed"),
        ],
        "rule": _count_rule(per_item=2, cap=10),
        "points_range": (0, 10),
    },
    # Physical Activity & Posture
    {
        "id": "daily-posture",
        "category": Category.LIFESTYLE,
        "text": "Typical Daily Posture",
        "type": SINGLE_CHOICE,
        "options": [
            _option("hunched-8plus", "Sitting hunched over 8+ hours", 3),
            _option("good-sitting-6-8", "Sitting with good posture 6-8 hours", 2),
            _option("mix-sit-stand", "Mix of sitting/standing throughout day", 1),
            _option("active-minimal-sit", "Active job - minimal sitting", 0),
        ],
    },
    {
        "id": "digestive-activities",
        "category": Category.LIFESTYLE,
        "text": "Digestive-Supporting Activities",
        "type": SINGLE_CHOICE,
        "options": [
            _option("never", "Never do specific activities for digestion", 3),
            _option("occasionally-1-2", "Occasionally", 2, "1-2x/week"),
            _option("regularly-3-4", "Regularly", 1, "3-4x/week"),
            _option("daily", "Daily", 0, "Walking after meals, yoga, stretching"),
        ],
    },
]

QUESTIONS_BY_ID = {q["id"]: q for q in QUESTIONS}


def points_range(question: dict) -> tuple[int, int]:
    """(floor, ceiling) of attainable points for one question."""
    if question["type"] == MULTI_CHOICE:
        return question["points_range"]
    values = [o["points"] for o in question["options"]]
    return min(values), max(values)


def questions_for(category: Category) -> list[dict]:
    return [q for q in QUESTIONS if q["category"] == category]


def _selected_options(question: dict, value) -> list[str]:
    """Known option values from a multi-choice answer, deduped, order kept."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    known = {o["value"] for o in question["options"]}
    return list(dict.fromkeys(v for v in value if isinstance(v, str) and v in known))


def answer_points(question_id: str, value) -> int | None:
    """
    Points for one answer, or None when the answer is not scorable.
    Unknown question ids, unknown option values and wrong value types are all None.
    """
    question = QUESTIONS_BY_ID.get(question_id)
    if question is None or value is None:
        return None
    if question["type"] == MULTI_CHOICE:
        selected = _selected_options(question, value)
        if not selected:
            return None
        return question["rule"](selected)
    if not isinstance(value, str):
        return None
    for opt in question["options"]:
        if opt["value"] == value:
            return opt["points"]
    return None


def category_points(answers: dict, category: Category) -> int:
    """Raw answer points for one category. Unanswered questions add nothing."""
    total = 0
    for q in questions_for(category):
        pts = answer_points(q["id"], answers.get(q["id"]))
        if pts is not None:
            total += pts
    return total


def is_visible(question: dict, biological_sex: str | None = None) -> bool:
    skip_for = question.get("skip_for_sex")
    return not (skip_for and biological_sex == skip_for)


def visible_questions(biological_sex: str | None = None) -> list[dict]:
    return [q for q in QUESTIONS if is_visible(q, biological_sex)]


def find_unanswered(answers: dict, biological_sex: str | None = None) -> list[str]:
    """Visible question ids that have no scorable answer."""
    check_answer_set(answers)
    return [
        q["id"]
        for q in visible_questions(biological_sex)
        if answer_points(q["id"], answers.get(q["id"])) is None
    ]


def catalog(biological_sex: str | None = None) -> list[dict]:
    """Public question catalog (no points), numbered by section and question."""
    section_numbers = {c: i for i, c in enumerate(CATEGORY_ORDER, start=1)}
    out = []
    for number, q in enumerate(QUESTIONS, start=1):
        if not is_visible(q, biological_sex):
            continue
        entry = {
            "id": q["id"],
            "category": q["category"].value,
            "section": SECTION_NAMES[q["category"]],
            "section_number": section_numbers[q["category"]],
            "question_number": number,
            "text": q["text"],
            "type": q["type"],
            "options": [{k: v for k, v in o.items() if k != "points"} for o in q["options"]],
        }
        if q.get("explanation"):
            entry["explanation"] = q["explanation"]
        out.append(entry)
    return out
