"""SEOScope category analyzers package."""

from analyzers.base import (
    BaseAnalyzer,
    CategoryResult,
    Issue,
    IssueType,
    Level,
    PageContext,
    Suggestion,
)
from analyzers.content import ContentAnalyzer
from analyzers.headings import HeadingAnalyzer
from analyzers.images import ImageAnalyzer
from analyzers.links import LinkAnalyzer
from analyzers.local_seo import LocalSEOAnalyzer
from analyzers.meta import MetaTagAnalyzer
from analyzers.mobile import MobileAnalyzer
from analyzers.schema import SchemaAnalyzer
from analyzers.security import SecurityAnalyzer
from analyzers.signals import FixedSignalSource, RandomSignalSource, SignalSource

__all__ = [
    "BaseAnalyzer",
    "CategoryResult",
    "Issue",
    "IssueType",
    "Level",
    "PageContext",
    "Suggestion",
    "ContentAnalyzer",
    "HeadingAnalyzer",
    "ImageAnalyzer",
    "LinkAnalyzer",
    "LocalSEOAnalyzer",
    "MetaTagAnalyzer",
    "MobileAnalyzer",
    "SchemaAnalyzer",
    "SecurityAnalyzer",
    "FixedSignalSource",
    "RandomSignalSource",
    "SignalSource",
]
