"""
Built-in articles served when an upstream payload cannot be parsed.

The AI gateway and the search API keep separate sets; the wording differs per
provider and the two are not merged.
"""

from typing import Any, Dict, List, Optional, Sequence

from ..models.article import Article
from ...utils.date_utils import utc_now_iso


AI_GATEWAY_FALLBACK_ARTICLES: Sequence[Dict[str, Any]] = (
    {
        "title": "India's Technology Sector Shows Strong Growth in 2025",
        "description": "The Indian tech industry continues to demonstrate robust expansion with significant investments in AI and digital infrastructure.",
        "content": "India's technology sector has shown remarkable resilience and growth in the first quarter of 2025. Major tech companies are expanding operations and investing heavily in artificial intelligence and machine learning capabilities. The government's Digital India initiative continues to support this growth trajectory.",
        "source": "Tech India",
        "author": "Business Desk",
        "urlToImage": "https://images.unsplash.com/photo-1451187580459-43490279c0fa?w=800&q=80",
        "category": "technology",
    },
    {
        "title": "New Infrastructure Projects Announced Across Major Cities",
        "description": "Government unveils ambitious infrastructure development plans focusing on metro connectivity and smart city initiatives.",
        "content": "The Ministry of Urban Development has announced a series of new infrastructure projects aimed at improving connectivity and urban living standards. These projects include metro expansions, smart traffic management systems, and green energy initiatives.",
        "source": "India Today",
        "author": "Infrastructure Desk",
        "urlToImage": "https://images.unsplash.com/photo-1464938050520-ef2270bb8ce8?w=800&q=80",
        "category": "business",
    },
    {
        "title": "Indian Cricket Team Prepares for International Series",
        "description": "The national cricket team is gearing up for the upcoming international tournament with intensive training sessions.",
        "content": "The Indian cricket team has intensified its preparation for the upcoming international series. The coaching staff has implemented new training regimens focusing on fitness and strategic gameplay.",
        "source": "Sports India",
        "author": "Sports Reporter",
        "urlToImage": "https://images.unsplash.com/photo-1531415074968-036ba1b575da?w=800&q=80",
        "category": "sports",
    },
)


SEARCH_API_FALLBACK_ARTICLES: Sequence[Dict[str, Any]] = (
    {
        "title": "Indian Tech Industry Records Strong Growth in 2025",
        "description": "India's technology companies report steady expansion as investment in AI and digital public infrastructure accelerates.",
        "content": "India's technology industry has recorded strong growth through 2025, with leading firms expanding hiring and research in artificial intelligence. Digital public infrastructure programmes continue to open new markets for domestic start-ups.",
        "source": "Tech Desk",
        "author": "Technology Desk",
        "urlToImage": "https://images.unsplash.com/photo-1518770660439-4636190af475?w=800&q=80",
        "category": "technology",
    },
    {
        "title": "Major Cities Get New Metro and Smart City Projects",
        "description": "A fresh round of urban infrastructure projects targets metro connectivity, traffic management and cleaner energy.",
        "content": "Urban planners have unveiled a new round of infrastructure projects across major Indian cities. The plans cover metro line extensions, smart traffic systems and renewable energy installations intended to improve daily commutes.",
        "source": "Business Wire India",
        "author": "Economy Desk",
        "urlToImage": "https://images.unsplash.com/photo-1477959858617-67f85cf4f1df?w=800&q=80",
        "category": "business",
    },
    {
        "title": "India's Cricket Squad Steps Up Training Ahead of Series",
        "description": "The national side has begun an intensive training camp ahead of its next international series.",
        "content": "India's cricket squad has stepped up its training ahead of the coming international series. Coaches are focusing on fitness, fielding drills and match scenarios as the selectors finalise the touring party.",
        "source": "Sports Desk",
        "author": "Sports Reporter",
        "urlToImage": "https://images.unsplash.com/photo-1540747913346-19e32dc3e97e?w=800&q=80",
        "category": "sports",
    },
)


def build_fallback_articles(templates: Sequence[Dict[str, Any]], published_at: Optional[str] = None) -> List[Article]:
    """Materialize a fallback set, stamping every article with one timestamp."""
    published_at = published_at or utc_now_iso()
    return [
        Article(
            title=template["title"],
            description=template["description"],
            content=template["content"],
            source={"name": template["source"]},
            author=template.get("author"),
            url=template.get("url", "#"),
            url_to_image=template["urlToImage"],
            published_at=published_at,
            category=template["category"],
        )
        for template in templates
    ]
