"""Session state updates. Every mutation of SessionState goes through here."""

import copy
import logging

from config.config_loader import AppConfig
from src.acquisition import AcquisitionError, ValidationError, acquire_summaries
from src.analytics import compute_analytics
from src.models import (
    MODEL_CLASSES,
    OPEN_SOURCE,
    PROPRIETARY,
    RATING_CATEGORIES,
    AnalyticsSnapshot,
    Comparison,
    Credentials,
    Rating,
    SessionState,
    SummaryRequest,
)
from src.providers.base import SummaryProvider
from src.text_input import SAMPLE_TEXT

logger = logging.getLogger(__name__)

RATING_RANGE = range(1, 6)


def _check_class(model_class: str) -> None:
    if model_class not in MODEL_CLASSES:
        raise ValidationError(f"Unknown model class: {model_class}")


def new_session(config: AppConfig, credentials: Credentials | None = None) -> SessionState:
    return SessionState(
        open_source_model=config.defaults.open_source_model,
        proprietary_model=config.defaults.proprietary_model,
        credentials=credentials or Credentials(),
    )


def set_text(state: SessionState, text: str) -> None:
    state.text = text


def use_sample_text(state: SessionState) -> None:
    state.text = SAMPLE_TEXT


def clear_text(state: SessionState) -> None:
    state.text = ""


def select_model(state: SessionState, model_class: str, model_id: str) -> None:
    _check_class(model_class)
    if model_class == OPEN_SOURCE:
        state.open_source_model = model_id
    else:
        state.proprietary_model = model_id


def set_credential(state: SessionState, model_class: str, key: str) -> None:
    _check_class(model_class)
    if model_class == OPEN_SOURCE:
        state.credentials.open_source_key = key
    else:
        state.credentials.proprietary_key = key


def set_rating(state: SessionState, model_class: str, category: str, value: int) -> None:
    """Record one 1..5 rating. Last write wins."""
    _check_class(model_class)
    if category not in RATING_CATEGORIES:
        raise ValidationError(f"Unknown rating category: {category}")
    if value not in RATING_RANGE:
        raise ValidationError(f"Rating must be between 1 and 5, got {value}")
    setattr(state.ratings[model_class], category, value)


def set_preference(state: SessionState, model_class: str) -> None:
    _check_class(model_class)
    state.preference = model_class


def _reset_current(state: SessionState) -> None:
    state.ratings = {OPEN_SOURCE: Rating(), PROPRIETARY: Rating()}
    state.preference = None


async def generate_summaries(
    state: SessionState,
    config: AppConfig,
    open_source: SummaryProvider | None = None,
    proprietary: SummaryProvider | None = None,
) -> bool:
    """Request both summaries and publish them into the session.

    On failure the error message is published and the current summaries are
    left as they were. Returns True when new summaries were published.
    """
    if state.is_loading:
        logger.warning("Summary request already in flight, ignoring new request")
        return False

    request = SummaryRequest(
        source_text=state.text,
        open_source_model=state.open_source_model,
        proprietary_model=state.proprietary_model,
        credentials=state.credentials,
    )

    state.is_loading = True
    try:
        result = await acquire_summaries(request, config, open_source, proprietary)
    except ValidationError as exc:
        state.error = str(exc)
        return False
    except AcquisitionError as exc:
        state.error = exc.user_message
        return False
    finally:
        state.is_loading = False

    state.summaries = result
    state.error = ""
    _reset_current(state)
    return True


def record_comparison(state: SessionState) -> Comparison:
    """Close the current comparison and add it to the session history.

    Raises:
        ValidationError: No summaries yet, a rating is unset, or no preference.
    """
    if state.summaries is None:
        raise ValidationError("Generate summaries before rating them")
    for model_class in MODEL_CLASSES:
        for category in RATING_CATEGORIES:
            if getattr(state.ratings[model_class], category) not in RATING_RANGE:
                raise ValidationError(f"Missing {category} rating for {model_class}")
    if state.preference is None:
        raise ValidationError("Choose which summary you prefer")

    comparison = Comparison(
        open_source_model=state.summaries.open_source.model,
        proprietary_model=state.summaries.proprietary.model,
        ratings=copy.deepcopy(state.ratings),
        preference=state.preference,
    )
    state.comparisons.append(comparison)
    state.summaries = None
    _reset_current(state)
    logger.debug("Recorded comparison %d", len(state.comparisons))
    return comparison


def session_analytics(state: SessionState) -> AnalyticsSnapshot:
    return compute_analytics(state.comparisons)
