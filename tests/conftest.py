from __future__ import annotations

from datetime import datetime

import pytest

from data_store import CargoStore
from models import CargoRecord, PENDING

NOW = datetime(2024, 11, 25, 12, 0)


def make_cargo(seq: int, status: str = PENDING, departure: datetime | None = None) -> CargoRecord:
    return CargoRecord(
        id=f"CARGO{seq:03d}",
        name=f"Cargo {seq}",
        origin="Moscow",
        destination="Kazan",
        departure_date=departure or datetime(2024, 11, 1, 9, 0),
        status=status,
    )


@pytest.fixture
def store() -> CargoStore:
    """Seeded store whose clock sits between the two seeded departures."""
    return CargoStore(clock=lambda: NOW)


def fill_draft(store: CargoStore, departure: datetime = datetime(2024, 12, 1, 14, 30)) -> None:
    store.update_draft("name", "Steel pipes")
    store.update_draft("origin", "Samara")
    store.update_draft("destination", "Omsk")
    store.update_draft("departure_date", departure)
