"""Security signals analyzer."""

import logging
from urllib.parse import urlparse

from analyzers.base import (
    BaseAnalyzer,
    CategoryResult,
    Issue,
    IssueType,
    Level,
    PageContext,
    clamp_score,
)
from analyzers.signals import SignalSource

logger = logging.getLogger(__name__)


class SecurityAnalyzer(BaseAnalyzer):
    """
    Analyzes website security posture.

    Checks:
    - HTTPS (scheme of the analyzed URL)
    - Security headers (simulated)
    - Mixed content (simulated)
    - SSL certificate validity (simulated, never valid without HTTPS)
    """

    # Deductions per failed check
    PENALTIES = {
        "https": 30,
        "security_headers": 15,
        "mixed_content": 20,
        "certificate": 25,
    }

    def __init__(self, signals: SignalSource):
        self.signals = signals

    @property
    def name(self) -> str:
        return "security"

    def analyze(self, page: PageContext) -> CategoryResult:
        has_https = urlparse(page.url).scheme.lower() == "https"
        has_security_headers = self.signals.flag("security.headers", 0.6)
        mixed_content = self.signals.flag("security.mixed_content", 0.2)
        certificate_valid = has_https and self.signals.flag("security.certificate", 0.9)

        result = CategoryResult(
            score=100,
            details={
                "hasHTTPS": has_https,
                "hasSecurityHeaders": has_security_headers,
                "mixedContent": mixed_content,
                "certificateValid": certificate_valid,
            },
        )

        if not has_https:
            logger.debug(f"{page.url} is not served over HTTPS")
            result.issues.append(
                Issue(
                    type=IssueType.ERROR,
                    category="Security",
                    message="Website not using HTTPS",
                    impact=Level.HIGH,
                )
            )
            result.score -= self.PENALTIES["https"]

        if not has_security_headers:
            result.issues.append(
                Issue(
                    type=IssueType.WARNING,
                    category="Security",
                    message="Missing important security headers",
                    impact=Level.MEDIUM,
                )
            )
            result.score -= self.PENALTIES["security_headers"]

        if mixed_content:
            result.issues.append(
                Issue(
                    type=IssueType.WARNING,
                    category="Security",
                    message="Mixed content detected (HTTP resources on HTTPS page)",
                    impact=Level.MEDIUM,
                )
            )
            result.score -= self.PENALTIES["mixed_content"]

        if not certificate_valid:
            result.issues.append(
                Issue(
                    type=IssueType.ERROR,
                    category="Security",
                    message="SSL certificate issues detected",
                    impact=Level.HIGH,
                )
            )
            result.score -= self.PENALTIES["certificate"]

        result.score = clamp_score(result.score)
        return result
