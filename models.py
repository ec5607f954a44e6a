"""
Persisted entities held by the storage engine.
Each one is created only by a storage write and never mutated afterwards.
"""

from typing import Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from schemas import CamelModel, PortfolioData


class Entity(CamelModel):
    # Built by the storage engine with snake_case keyword arguments
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class User(Entity):
    id: int
    username: str
    password: str


class Portfolio(Entity):
    id: int
    user_id: Optional[int] = None
    data: PortfolioData


class ContactMessage(Entity):
    id: int
    portfolio_id: int = Field(..., description="Portfolio the message was sent to")
    name: str
    email: str
    message: str
    created_at: str = Field(..., description="ISO-8601 UTC timestamp")
