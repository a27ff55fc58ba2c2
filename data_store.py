import logging
from dataclasses import fields, replace
from datetime import datetime

from models import ALL_STATUSES, CargoRecord, DraftCargo, IN_TRANSIT, PENDING, STATUS_VALUES
from utils import (
    EARLY_DELIVERY_MESSAGE, ITEMS_PER_PAGE, MISSING_FIELDS_MESSAGE,
    InvalidTransitionError, ValidationError,
    apply_filter_and_paginate, check_transition, generate_cargo_id, last_cargo_seq, validate_draft,
)

logger = logging.getLogger(__name__)

DRAFT_FIELDS = {f.name for f in fields(DraftCargo)}


def seed_cargo():
    return [
        CargoRecord(
            id="CARGO001",
            name="Construction materials",
            status=IN_TRANSIT,
            origin="Moscow",
            destination="Kazan",
            departure_date=datetime(2024, 11, 24, 8, 0),
        ),
        CargoRecord(
            id="CARGO002",
            name="Fragile cargo",
            status=PENDING,
            origin="Saint Petersburg",
            destination="Yekaterinburg",
            departure_date=datetime(2024, 11, 26, 10, 30),
        ),
    ]


class CargoStore:
    """In-memory state behind the cargo form and table.

    The event handlers (``update_draft``, ``submit_draft``, ``set_status``,
    ``set_filter``, ``set_page``) are the only methods that mutate it.
    """

    def __init__(self, records=None, clock=datetime.now, page_size=ITEMS_PER_PAGE):
        self.cargo_list = seed_cargo() if records is None else list(records)
        self.draft = DraftCargo()
        self.status_filter = ALL_STATUSES
        self.current_page = 1
        self.form_error = ""
        self.notifications = []
        self.page_size = page_size
        self._clock = clock
        self._last_seq = last_cargo_seq(self.cargo_list)

    def update_draft(self, field, value):
        if field not in DRAFT_FIELDS:
            raise AttributeError(f"DraftCargo has no field {field!r}")
        setattr(self.draft, field, value)

    def submit_draft(self):
        try:
            validate_draft(self.draft)
        except ValidationError as exc:
            logger.warning("Rejected cargo draft: %s", exc)
            self.form_error = MISSING_FIELDS_MESSAGE
            return None

        self._last_seq += 1
        cargo = CargoRecord(
            id=generate_cargo_id(self._last_seq),
            name=self.draft.name,
            origin=self.draft.origin,
            destination=self.draft.destination,
            departure_date=self.draft.departure_date,
            status=PENDING,
        )
        self.cargo_list.append(cargo)
        self.draft = DraftCargo()
        self.form_error = ""
        logger.info("Added cargo %s (%s -> %s)", cargo.id, cargo.origin, cargo.destination)
        return cargo

    def find(self, cargo_id):
        for idx, cargo in enumerate(self.cargo_list):
            if cargo.id == cargo_id:
                return idx, cargo
        return None, None

    def set_status(self, cargo_id, new_status):
        if new_status not in STATUS_VALUES:
            raise ValueError(f"Unknown cargo status: {new_status!r}")

        idx, cargo = self.find(cargo_id)
        if cargo is None:
            logger.debug("Ignoring status change for unknown cargo %s", cargo_id)
            return False

        try:
            check_transition(cargo, new_status, self._clock())
        except InvalidTransitionError as exc:
            logger.warning("Rejected status change: %s", exc)
            self.notifications.append(EARLY_DELIVERY_MESSAGE)
            return False

        self.cargo_list[idx] = replace(cargo, status=new_status)
        logger.info("Cargo %s: %s -> %s", cargo_id, cargo.status, new_status)
        return True

    def set_filter(self, status_filter):
        if status_filter != ALL_STATUSES and status_filter not in STATUS_VALUES:
            raise ValueError(f"Unknown status filter: {status_filter!r}")
        self.status_filter = status_filter
        self.current_page = 1

    def set_page(self, page):
        if not isinstance(page, int) or page < 1:
            raise ValueError(f"Page numbers are integers starting at 1, got {page!r}")
        self.current_page = page

    def view(self):
        return apply_filter_and_paginate(
            self.cargo_list, self.status_filter, self.current_page, self.page_size
        )

    def pop_notifications(self):
        pending, self.notifications = self.notifications, []
        return pending
