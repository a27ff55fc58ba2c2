from dataclasses import dataclass
from datetime import datetime
from typing import Optional

PENDING = "pending"
IN_TRANSIT = "in_transit"
DELIVERED = "delivered"

# Filter value that lets every status through
ALL_STATUSES = "all_statuses"

CARGO_STATUSES = [
    {"value": PENDING, "label": "Awaiting dispatch", "color": "orange"},
    {"value": IN_TRANSIT, "label": "In transit", "color": "blue"},
    {"value": DELIVERED, "label": "Delivered", "color": "green"},
]
STATUS_VALUES = [s["value"] for s in CARGO_STATUSES]

CITIES = [
    "Moscow", "Saint Petersburg", "Kazan", "Nizhny Novgorod",
    "Yekaterinburg", "Novosibirsk", "Chelyabinsk", "Samara", "Ufa", "Omsk",
]


@dataclass
class CargoRecord:
    id: str
    name: str
    origin: str
    destination: str
    departure_date: datetime
    status: str = PENDING


@dataclass
class DraftCargo:
    """Form input for a cargo that has not been added yet."""

    name: str = ""
    origin: str = ""
    destination: str = ""
    departure_date: Optional[datetime] = None

    def missing_fields(self):
        missing = []
        if not (self.name or "").strip():
            missing.append("name")
        if not self.origin:
            missing.append("origin")
        if not self.destination:
            missing.append("destination")
        if not self.departure_date:
            missing.append("departure_date")
        return missing


def status_label(status):
    for s in CARGO_STATUSES:
        if s["value"] == status:
            return s["label"]
    return status
