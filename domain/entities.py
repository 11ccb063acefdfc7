from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class Task:
    id: int
    title: str
    description: Optional[str] = None
    due_date: Optional[date] = None
    priority: Optional[Priority] = None
