# core/models.py

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Category(str, Enum):
    FOOD = "food"
    TRANSPORT = "transport"
    SIGHTSEEING = "sightseeing"


@dataclass
class Activity:
    id: str
    name: str
    cost: float
    category: Category
    start_time: dt.datetime

@dataclass
class Trip:
    id: str
    destination: str
    start_date: dt.date
    activities: List[Activity] = field(default_factory=list)
    budget: Optional[float] = None

@dataclass
class DestinationInfo:
    currency: str
    flag: str
