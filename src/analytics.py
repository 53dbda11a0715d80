"""Descriptive statistics over completed comparisons: plain means and counts."""

from decimal import ROUND_HALF_UP, Decimal

from src.models import (
    MODEL_CLASSES,
    OPEN_SOURCE,
    PROPRIETARY,
    RATING_CATEGORIES,
    AnalyticsSnapshot,
    Comparison,
)

AVERAGE = "average"


def _mean(values: list[int]) -> float:
    return sum(values) / len(values) if values else 0.0


def compute_analytics(comparisons: list[Comparison]) -> AnalyticsSnapshot:
    """Average each category per model class and count preferences."""
    average_ratings = {
        model_class: {
            category: _mean([getattr(c.ratings[model_class], category) for c in comparisons])
            for category in RATING_CATEGORIES
        }
        for model_class in MODEL_CLASSES
    }
    preferences = {model_class: 0 for model_class in MODEL_CLASSES}
    for c in comparisons:
        preferences[c.preference] += 1
    return AnalyticsSnapshot(
        average_ratings=average_ratings,
        preferences=preferences,
        comparisons=len(comparisons),
    )


def overall_average(snapshot: AnalyticsSnapshot, model_class: str) -> float:
    """Mean of the three category means for one model class."""
    means = snapshot.average_ratings[model_class]
    return sum(means[c] for c in RATING_CATEGORIES) / len(RATING_CATEGORIES)


def score(snapshot: AnalyticsSnapshot, model_class: str, metric: str) -> float:
    if metric == AVERAGE:
        return overall_average(snapshot, model_class)
    return snapshot.average_ratings[model_class][metric]


def difference(snapshot: AnalyticsSnapshot, metric: str) -> float:
    """Proprietary minus open source for a category or AVERAGE."""
    return score(snapshot, PROPRIETARY, metric) - score(snapshot, OPEN_SOURCE, metric)


def format_score(value: float) -> str:
    """One decimal place, halves rounded away from zero (2.25 -> "2.3")."""
    return str(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
