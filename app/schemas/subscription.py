# app/schemas/subscription.py
from datetime import datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel


class SubscriptionRead(SQLModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    plan_id: str
    purchased_at: datetime
