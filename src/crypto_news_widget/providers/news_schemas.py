from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class NewsItem(BaseModel):
    title: str
    body: str
    url: str
    image_url: str
    published_at: Optional[datetime] = None
