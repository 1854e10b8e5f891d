from .headline_service import HeadlineService, create_headline_service
from .structuring_service import StructuringService

__all__ = [
    'HeadlineService',
    'StructuringService',
    'create_headline_service'
]
