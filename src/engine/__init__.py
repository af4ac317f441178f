"""SEOScope analysis engine package."""
