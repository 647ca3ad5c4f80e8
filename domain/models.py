from dataclasses import dataclass
from typing import Dict, Optional, Any, List
import datetime as _dt

from domain.constants import REQUIRED_FIELDS, FIELD_LABELS, MIN_MANUFACTURED_YEAR, max_manufactured_year
from utils.dates import to_calendar_date, today


@dataclass
class VehicleRegistration:
    owner_id: str
    plate_no: str
    manufacturer: str
    manufactured_year: Optional[int]
    vehicle: str  # type / description, e.g. Sedan
    owner: str
    model: str = ''
    color: str = ''
    registration_date: Optional[_dt.date] = None
    id: Optional[str] = None  # server-assigned `_id`

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for create/update. The identifier travels in the URL only."""
        payload = {
            'ownerId': self.owner_id,
            'plateNo': self.plate_no,
            'manufacturer': self.manufacturer,
            'model': self.model,
            'manufacturedYear': int(self.manufactured_year),
            'vehicle': self.vehicle,
            'color': self.color,
            'owner': self.owner,
        }
        if self.registration_date is not None:
            payload['registrationDate'] = self.registration_date.isoformat()
        return payload


def _year_or_none(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


_WIRE_KEYS = {'_id', 'ownerId', 'plateNo', 'manufacturer', 'model', 'manufacturedYear',
              'vehicle', 'color', 'owner', 'registrationDate'}


def registration_from_dict(d: Dict[str, Any]) -> VehicleRegistration:
    """Safe conversion from a backend record, dropping unknown keys (`__v`, timestamps)."""
    filtered = {k: v for k, v in d.items() if k in _WIRE_KEYS}
    return VehicleRegistration(
        id=filtered.get('_id'),
        owner_id=filtered.get('ownerId') or '',
        plate_no=filtered.get('plateNo') or '',
        manufacturer=filtered.get('manufacturer') or '',
        manufactured_year=_year_or_none(filtered.get('manufacturedYear')),
        vehicle=filtered.get('vehicle') or '',
        owner=filtered.get('owner') or '',
        model=filtered.get('model') or '',
        color=filtered.get('color') or '',
        registration_date=to_calendar_date(filtered.get('registrationDate')),
    )


def parse_year(raw: Any) -> int:
    """Coerce a form year value to int and check the accepted range."""
    if isinstance(raw, bool):
        raise ValueError('Manufactured Year must be a whole number.')
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValueError('Manufactured Year must be a whole number.')
        year = int(raw)
    else:
        text = str(raw).strip() if raw is not None else ''
        if not text:
            raise ValueError('Manufactured Year is required.')
        try:
            year = int(text, 10)
        except ValueError:
            raise ValueError('Manufactured Year must be a whole number.') from None
    upper = max_manufactured_year()
    if not MIN_MANUFACTURED_YEAR <= year <= upper:
        raise ValueError(f'Manufactured Year must be between {MIN_MANUFACTURED_YEAR} and {upper}.')
    return year


def validate_form(form: Dict[str, Any]) -> List[str]:
    """Return every validation problem in the raw form values (empty list when valid)."""
    errors = []
    for key in REQUIRED_FIELDS:
        if not str(form.get(key) or '').strip():
            errors.append(f'{FIELD_LABELS[key]} is required.')
    try:
        parse_year(form.get('manufacturedYear'))
    except ValueError as e:
        errors.append(str(e))
    return errors


def registration_from_form(form: Dict[str, Any], registration_id: Optional[str] = None) -> VehicleRegistration:
    """Build a submission from form values keyed by wire names.

    Raises ValueError listing all problems. An empty registration date
    defaults to the submission day.
    """
    errors = validate_form(form)
    if errors:
        raise ValueError(' '.join(errors))
    return VehicleRegistration(
        id=registration_id,
        owner_id=str(form['ownerId']).strip(),
        plate_no=str(form['plateNo']).strip(),
        manufacturer=str(form['manufacturer']).strip(),
        manufactured_year=parse_year(form['manufacturedYear']),
        vehicle=str(form['vehicle']).strip(),
        owner=str(form['owner']).strip(),
        model=str(form.get('model') or '').strip(),
        color=str(form.get('color') or '').strip(),
        registration_date=to_calendar_date(form.get('registrationDate')) or today(),
    )


def form_defaults(record: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Initial form values: blank with today's date, or copied from an existing record."""
    if record is None:
        return {
            'ownerId': '', 'plateNo': '', 'manufacturer': '', 'model': '',
            'manufacturedYear': None, 'vehicle': '', 'color': '', 'owner': '',
            'registrationDate': today(),
        }
    existing = registration_from_dict(record)
    return {
        'ownerId': existing.owner_id,
        'plateNo': existing.plate_no,
        'manufacturer': existing.manufacturer,
        'model': existing.model,
        'manufacturedYear': existing.manufactured_year,
        'vehicle': existing.vehicle,
        'color': existing.color,
        'owner': existing.owner,
        'registrationDate': existing.registration_date,
    }
