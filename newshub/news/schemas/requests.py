"""News API request schemas"""

from typing import Optional
from pydantic import BaseModel, Field, model_validator


class StructureArticleRequest(BaseModel):
    """Request body for the AI structuring pass"""
    title: str = Field(..., min_length=1, description="Article headline")
    content: str = Field(default="", description="Article body")
    description: Optional[str] = Field(default=None, description="Used when content is empty")

    @model_validator(mode="after")
    def require_text(self):
        if not self.content.strip():
            if not self.description or not self.description.strip():
                raise ValueError("content or description is required")
            self.content = self.description
        return self
