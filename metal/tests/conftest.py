# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Centralized test configuration for pytest.

This file is automatically loaded by pytest and provides:
- Environment variable loading via dotenv
- Logging setup
- Shared record fixtures
"""

from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any

import pytest
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from metal.config import setup_logging

# Load environment variables once for all tests
load_dotenv()
setup_logging()


class RoomSettings(BaseModel):
    """Pydantic record with declared fields only."""

    chat: bool = True
    recording: bool = False


class FrozenSettings(BaseModel):
    """Pydantic record that rejects assignment."""

    model_config = ConfigDict(frozen=True)

    chat: bool = True


class MeetingNotes(BaseModel):
    """Pydantic record that keeps extra fields."""

    model_config = ConfigDict(extra="allow")

    title: str


class Participant:
    """Plain object record with a class attribute that is not an own key."""

    role = "guest"

    def __init__(self, name: str, muted: bool = False) -> None:
        self.name = name
        self.muted = muted

    def greeting(self) -> str:
        return f"Hello {self.name}"


@dataclass(slots=True)
class Seat:
    """Slotted dataclass record with no instance __dict__."""

    row: str
    number: int


@pytest.fixture
def room_config() -> dict[str, Any]:
    """Nested room configuration used by lookup tests."""
    return {
        "media": {"video": True, "audio": True},
        "capabilities": {"chat": True, "recording": False},
        "interaction": {"prejoin": None},
    }


@pytest.fixture
def participant() -> Participant:
    """A plain object record."""
    return Participant("Ada")


@pytest.fixture
def namespace() -> SimpleNamespace:
    """A SimpleNamespace record."""
    return SimpleNamespace(a=1, b=2)
