from doc_classifier.analysis.agent import DocumentAgent
from doc_classifier.analysis.factory import build_agent
from doc_classifier.analysis.models import ClassificationResult, DocumentAnalysis, SummaryResult

__all__ = [
    "ClassificationResult",
    "DocumentAgent",
    "DocumentAnalysis",
    "SummaryResult",
    "build_agent",
]
