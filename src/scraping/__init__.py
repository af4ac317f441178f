"""SEOScope page fetching package."""
