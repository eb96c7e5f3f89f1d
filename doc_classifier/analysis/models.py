"""Structured results of document analysis.

Fields are read leniently from the model's JSON: a missing or mistyped key
falls back to an empty value instead of failing the request.
"""

from dataclasses import asdict, dataclass, field


def _text(payload: dict[str, object], key: str, default: str = "") -> str:
    value = payload.get(key)
    if value is None:
        return default
    return str(value)


def _optional_text(payload: dict[str, object], key: str) -> str | None:
    value = payload.get(key)
    if value is None or value == "":
        return None
    return str(value)


def _text_list(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


def _flag(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "yes", "1"}
    return bool(value)


@dataclass(frozen=True)
class ClassificationResult:
    category: str
    subcategory: str | None = None
    confidence: str = ""
    explanation: str = ""
    detected_language: str = ""
    keywords: list[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: dict[str, object]) -> "ClassificationResult":
        return cls(
            category=_text(payload, "category", "Other"),
            subcategory=_optional_text(payload, "subcategory"),
            confidence=_text(payload, "confidence").lower(),
            explanation=_text(payload, "explanation"),
            detected_language=_text(payload, "detected_language"),
            keywords=_text_list(payload.get("keywords")),
        )

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class ImportantDetails:
    dates: list[str] = field(default_factory=list)
    amounts: list[str] = field(default_factory=list)
    parties: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: object) -> "ImportantDetails":
        if not isinstance(payload, dict):
            return cls()
        return cls(
            dates=_text_list(payload.get("dates")),
            amounts=_text_list(payload.get("amounts")),
            parties=_text_list(payload.get("parties")),
            locations=_text_list(payload.get("locations")),
        )


@dataclass(frozen=True)
class SummaryResult:
    main_purpose: str = ""
    key_points: list[str] = field(default_factory=list)
    important_details: ImportantDetails = field(default_factory=ImportantDetails)
    action_items: list[str] = field(default_factory=list)
    summary: str = ""
    urgency_level: str = ""
    requires_follow_up: bool = False

    @classmethod
    def from_payload(cls, payload: dict[str, object]) -> "SummaryResult":
        return cls(
            main_purpose=_text(payload, "main_purpose"),
            key_points=_text_list(payload.get("key_points")),
            important_details=ImportantDetails.from_payload(payload.get("important_details")),
            action_items=_text_list(payload.get("action_items")),
            summary=_text(payload, "summary"),
            urgency_level=_text(payload, "urgency_level").lower(),
            requires_follow_up=_flag(payload.get("requires_follow_up", False)),
        )

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class DocumentAnalysis:
    classification: ClassificationResult
    summary: SummaryResult
