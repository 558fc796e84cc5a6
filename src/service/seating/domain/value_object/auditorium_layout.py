"""
Auditorium layout value object

An auditorium is an ordered list of rows. Each row has a label, a seat count
and per-seat type overrides; seats are numbered 1..seat_count and every seat
without an override is STANDARD.

Two stored shapes are accepted by `AuditoriumLayout.from_dict`:

1. Row list:
   {"rows": [{"label": "A", "seat_count": 10, "seat_types": {"1": "WHEELCHAIR"}}]}
   A row may instead list its seats: {"label": "A", "seats": [{"number": 1, "type": "GAP"}]}

2. Seat-map configuration (percent based VIP zones):
   {"rowsConfig": [{"row": "A", "seatCount": 10}],
    "accessible": [{"row": "A", "seats": [1, 2]}],
    "vipZones": [{"rows": ["A"], "fromPercent": 0.3, "toPercent": 0.7}]}
   A VIP zone covers seats floor(from * count) + 1 .. ceil(to * count).
   Accessible seats win over VIP.
"""

from collections.abc import Iterator, Mapping
import math
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.seating.domain.enum.seat_type import SeatType


def normalize_row_label(label: Any) -> str:
    return str(label).strip().upper()


def format_seat_id(row: str, number: int) -> str:
    return f'{normalize_row_label(row)}{number}'


@attrs.frozen
class SeatCoordinate:
    row: str
    number: int
    seat_type: SeatType

    @property
    def seat_id(self) -> str:
        return format_seat_id(self.row, self.number)


@attrs.frozen
class RowLayout:
    label: str = attrs.field(converter=normalize_row_label)
    seat_count: int = attrs.field()
    seat_types: Mapping[int, SeatType] = attrs.field(factory=dict)

    @label.validator
    def _check_label(self, attribute: attrs.Attribute, value: str) -> None:
        if not value:
            raise DomainError('Row label must not be empty')

    @seat_count.validator
    def _check_seat_count(self, attribute: attrs.Attribute, value: int) -> None:
        if not isinstance(value, int) or value < 1:
            raise DomainError(f'Row {self.label} must have at least one seat')

    @seat_types.validator
    def _check_seat_types(self, attribute: attrs.Attribute, value: Mapping[int, SeatType]) -> None:
        out_of_range = [number for number in value if not 1 <= number <= self.seat_count]
        if out_of_range:
            raise DomainError(
                f'Row {self.label} has type overrides outside 1..{self.seat_count}: {out_of_range}'
            )

    def seat_type_of(self, number: int) -> SeatType:
        return self.seat_types.get(number, SeatType.STANDARD)


@attrs.frozen
class AuditoriumLayout:
    rows: tuple[RowLayout, ...] = attrs.field(converter=tuple)

    @rows.validator
    def _check_unique_labels(self, attribute: attrs.Attribute, value: tuple[RowLayout, ...]) -> None:
        seen: set[str] = set()
        for row in value:
            if row.label in seen:
                raise DomainError(f'Duplicate row label: {row.label}')
            seen.add(row.label)

        # Ids carry no separator, so row A seat 11 and row A1 seat 1 are both A11
        seat_ids: set[str] = set()
        for row in value:
            for number in range(1, row.seat_count + 1):
                seat_id = format_seat_id(row.label, number)
                if seat_id in seat_ids:
                    raise DomainError(f'Seat id {seat_id} is produced by more than one row')
                seat_ids.add(seat_id)

    @property
    def total_seats(self) -> int:
        return sum(row.seat_count for row in self.rows)

    def expand(self) -> Iterator[SeatCoordinate]:
        """Yield every seat coordinate in layout order"""
        for row in self.rows:
            for number in range(1, row.seat_count + 1):
                yield SeatCoordinate(row=row.label, number=number, seat_type=row.seat_type_of(number))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional['AuditoriumLayout']:
        """Parse a stored layout. Returns None when the document describes no rows."""
        if not data:
            return None
        if data.get('rows'):
            rows = [_parse_row(row) for row in data['rows']]
        elif data.get('rowsConfig'):
            rows = _parse_seat_map_config(data)
        else:
            return None
        return cls(rows=rows) if rows else None


def _parse_seat_type(value: Any) -> SeatType:
    try:
        return SeatType(str(value).strip().upper())
    except ValueError as e:
        raise DomainError(f'Unknown seat type: {value}') from e


def _parse_row(row: Mapping[str, Any]) -> RowLayout:
    label = row.get('label', row.get('row'))
    if label is None:
        raise DomainError('Row is missing its label')

    if 'seats' in row and isinstance(row['seats'], list):
        # Explicit seat list: the highest number wins, unlisted numbers are gaps
        listed = {int(seat['number']): seat.get('type', SeatType.STANDARD) for seat in row['seats']}
        seat_count = max(listed, default=0)
        seat_types = {
            number: _parse_seat_type(listed[number]) if number in listed else SeatType.GAP
            for number in range(1, seat_count + 1)
        }
    else:
        seat_count = int(row.get('seat_count', row.get('seatCount', row.get('seats', 0))))
        raw_types = row.get('seat_types', row.get('seatTypes')) or {}
        seat_types = {int(number): _parse_seat_type(kind) for number, kind in raw_types.items()}

    return RowLayout(
        label=label,
        seat_count=seat_count,
        seat_types={
            number: kind for number, kind in seat_types.items() if kind != SeatType.STANDARD
        },
    )


def _parse_seat_map_config(data: Mapping[str, Any]) -> list[RowLayout]:
    counts: dict[str, int] = {}
    for row_config in data.get('rowsConfig') or []:
        label = normalize_row_label(row_config['row'])
        if label in counts:
            raise DomainError(f'Duplicate row label: {label}')
        seat_count = int(row_config['seatCount'])
        if seat_count > 0:
            counts[label] = seat_count

    overrides: dict[str, dict[int, SeatType]] = {label: {} for label in counts}

    for zone in data.get('vipZones') or []:
        for zone_row in zone.get('rows') or []:
            label = normalize_row_label(zone_row)
            if label not in counts:
                continue
            seat_count = counts[label]
            start = math.floor(float(zone['fromPercent']) * seat_count) + 1
            end = math.ceil(float(zone['toPercent']) * seat_count)
            for number in range(max(start, 1), min(end, seat_count) + 1):
                overrides[label][number] = SeatType.VIP

    # Applied last so accessibility wins over VIP
    for accessible in data.get('accessible') or []:
        label = normalize_row_label(accessible['row'])
        if label not in counts:
            continue
        for number in accessible.get('seats') or []:
            if 1 <= int(number) <= counts[label]:
                overrides[label][int(number)] = SeatType.WHEELCHAIR

    return [
        RowLayout(label=label, seat_count=seat_count, seat_types=overrides[label])
        for label, seat_count in counts.items()
    ]
