from .scorecard_extractor import extract_scorecard, parse_scorecard, GeminiScorecardExtractor
from .exceptions import ExtractionError, ExtractionServiceError, InvalidFormatError

__all__ = [
    "extract_scorecard",
    "parse_scorecard",
    "GeminiScorecardExtractor",
    "ExtractionError",
    "ExtractionServiceError",
    "InvalidFormatError",
]
