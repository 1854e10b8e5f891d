"""
News Module
===========

Headline listing and article structuring for the news client:
- Upstream fetchers (AI gateway, search API)
- Normalization of upstream payloads into canonical articles
- Built-in fallback sets when parsing fails
- AI structuring pass for a single article
"""
