from .article import Article, ArticleSource
from .enums import ProviderKind

__all__ = [
    'Article',
    'ArticleSource',
    'ProviderKind'
]
