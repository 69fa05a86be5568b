"""卡片数据模型。"""
import uuid
from typing import List

from pydantic import BaseModel, Field


class Card(BaseModel):
    """一张卡片：标题、描述、标签。"""
    id: str = Field(default_factory=lambda: uuid.uuid4().hex, description="卡片 ID")
    title: str = Field(..., description="标题")
    description: str = Field("", description="描述")
    tags: List[str] = Field(default_factory=list, description="标签")
