"""Pure dataclasses for the summary comparison session. No logic, no deps."""

from dataclasses import dataclass, field

OPEN_SOURCE = "open_source"
PROPRIETARY = "proprietary"
MODEL_CLASSES = (OPEN_SOURCE, PROPRIETARY)

RATING_CATEGORIES = ("clarity", "accuracy", "conciseness")


@dataclass
class Credentials:
    open_source_key: str = ""
    proprietary_key: str = ""


@dataclass
class SummaryRequest:
    source_text: str
    open_source_model: str
    proprietary_model: str
    credentials: Credentials


@dataclass
class SummaryResponse:
    provider: str          # "huggingface", "openai", "claude"
    model: str             # model id the summary came from
    model_class: str       # OPEN_SOURCE or PROPRIETARY
    content: str
    latency_sec: float
    token_count: int | None
    placeholder: bool = False   # True when no provider was actually called


@dataclass
class ProviderOutcome:
    model_class: str
    response: SummaryResponse | None = None
    error: Exception | None = None


@dataclass
class DualOutcome:
    open_source: ProviderOutcome
    proprietary: ProviderOutcome


@dataclass
class SummaryResult:
    open_source: SummaryResponse
    proprietary: SummaryResponse


@dataclass
class Rating:
    clarity: int = 0       # 0 = unset, otherwise 1..5
    accuracy: int = 0
    conciseness: int = 0


@dataclass
class Comparison:
    open_source_model: str
    proprietary_model: str
    ratings: dict[str, Rating]
    preference: str


@dataclass
class AnalyticsSnapshot:
    average_ratings: dict[str, dict[str, float]]
    preferences: dict[str, int]
    comparisons: int = 0


@dataclass
class SessionState:
    open_source_model: str
    proprietary_model: str
    credentials: Credentials = field(default_factory=Credentials)
    text: str = ""
    summaries: SummaryResult | None = None
    ratings: dict[str, Rating] = field(
        default_factory=lambda: {OPEN_SOURCE: Rating(), PROPRIETARY: Rating()}
    )
    preference: str | None = None
    error: str = ""
    is_loading: bool = False
    comparisons: list[Comparison] = field(default_factory=list)
