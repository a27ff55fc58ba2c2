import math
from collections import namedtuple

import pandas as pd

from models import ALL_STATUSES, DELIVERED, status_label

CARGO_ID_PREFIX = "CARGO"
ITEMS_PER_PAGE = 10
DATE_FORMAT = "%d.%m.%Y %H:%M"

MISSING_FIELDS_MESSAGE = "Fill in all fields"
EARLY_DELIVERY_MESSAGE = "Cannot mark as delivered: the departure date has not been reached yet"

Page = namedtuple("Page", ["items", "total_pages"])


class CargoError(Exception):
    """Base class for errors the cargo form reports back to the user."""


class ValidationError(CargoError):
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"missing fields: {', '.join(self.missing)}")


class InvalidTransitionError(CargoError):
    def __init__(self, cargo_id, status):
        self.cargo_id = cargo_id
        self.status = status
        super().__init__(f"{cargo_id} -> {status}: departure date not yet reached")


# ID generators
def generate_cargo_id(seq):
    return f"{CARGO_ID_PREFIX}{seq:03d}"

def parse_cargo_seq(cargo_id):
    return int(cargo_id[len(CARGO_ID_PREFIX):])

def last_cargo_seq(records):
    if not records:
        return 0
    return parse_cargo_seq(records[-1].id)


# Cargo flow
def validate_draft(draft):
    missing = draft.missing_fields()
    if missing:
        raise ValidationError(missing)

def check_transition(cargo, new_status, now):
    """Raise InvalidTransitionError if ``cargo`` may not move to ``new_status`` at ``now``.

    Only delivery is guarded: a cargo cannot be delivered before it departs.
    Every other move, including going back from delivered, is allowed.
    """
    if new_status == DELIVERED and cargo.departure_date > now:
        raise InvalidTransitionError(cargo.id, new_status)


# Table view
def filter_by_status(records, status_filter):
    if status_filter == ALL_STATUSES:
        return list(records)
    return [cargo for cargo in records if cargo.status == status_filter]

def apply_filter_and_paginate(records, status_filter, page, page_size=ITEMS_PER_PAGE):
    filtered = filter_by_status(records, status_filter)
    total_pages = math.ceil(len(filtered) / page_size)
    start = (page - 1) * page_size
    return Page(filtered[start:start + page_size], total_pages)

def cargo_frame(records):
    rows = []
    for cargo in records:
        rows.append({
            "ID": cargo.id,
            "Name": cargo.name,
            "Status": status_label(cargo.status),
            "Origin": cargo.origin,
            "Destination": cargo.destination,
            "Departure": cargo.departure_date.strftime(DATE_FORMAT),
        })
    return pd.DataFrame(rows, columns=["ID", "Name", "Status", "Origin", "Destination", "Departure"])
