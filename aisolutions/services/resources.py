"""
Resource Manager

One list / filter / create-or-update / delete cycle, parameterized by a
TableDescriptor, shared by every admin content screen. The manager keeps a
local copy of the table's rows and an optional form draft; every remote
failure is logged and surfaced through `notify` and leaves the manager in a
consistent, interactive state.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional
from flask import flash
from aisolutions.services.storage import StorageError
from aisolutions.services.text import join_csv, split_csv

logger = logging.getLogger(__name__)

MATCH_ALL = 'all'

_TRUE_STRINGS = {'1', 'true', 'yes', 'on'}


class ValidationError(ValueError):
    """A draft failed validation before any remote call was made."""


@dataclass
class TableDescriptor:
    """Everything the generic manager needs to know about one content table."""
    key: str
    label: str
    plural: str
    model: type
    form_fields: tuple
    required: tuple = ()
    list_fields: tuple = ()
    int_fields: tuple = ()
    bool_fields: tuple = ()
    int_bounds: dict = field(default_factory=dict)
    choices: dict = field(default_factory=dict)
    defaults: dict = field(default_factory=dict)
    statuses: tuple = ()
    filters: dict = field(default_factory=dict)
    search_fields: tuple = ()
    order_by: object = None
    list_filter: Optional[dict] = None
    owner_field: Optional[str] = None
    toggles: dict = field(default_factory=dict)
    columns: tuple = ()
    editable: bool = True
    prepare: Optional[Callable] = None
    on_toggle: Optional[Callable] = None

    def blank_draft(self):
        draft = {}
        for name in self.form_fields:
            if name in self.bool_fields:
                draft[name] = False
            else:
                draft[name] = ''
        draft.update(self.defaults)
        return draft

    def draft_from_form(self, form):
        """Read a submitted HTML form into a draft (unchecked boxes are absent)."""
        draft = {}
        for name in self.form_fields:
            if name in self.bool_fields:
                draft[name] = as_bool(form.get(name))
            else:
                draft[name] = form.get(name, '')
        return draft


def as_bool(value):
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_STRINGS


def _label(name):
    return name.replace("_", " ").capitalize()


def _is_match_all(value):
    return value is None or value == '' or value == MATCH_ALL


def _field_matches(value, needle):
    if value is None:
        return False
    if isinstance(value, (list, tuple)):
        return any(needle in str(item).lower() for item in value)
    return needle in str(value).lower()


def apply_filters(rows, search_term='', filters=None, search_fields=()):
    """Derived view of `rows`; the input list is never modified.

    The search term is a case-insensitive substring matched against any of
    `search_fields`; each categorical filter must match exactly unless it is
    the "all" sentinel (or empty).
    """
    needle = (search_term or '').lower()
    active = {name: value for name, value in (filters or {}).items() if not _is_match_all(value)}
    result = []
    for row in rows:
        if needle and not any(_field_matches(row.get(name), needle) for name in search_fields):
            continue
        if any(row.get(name) != value for name, value in active.items()):
            continue
        result.append(row)
    return result


class ResourceManager:
    """Keep a local list in sync with one table and drive its edit form."""

    def __init__(self, descriptor, store, notify=None, actor=None):
        self.descriptor = descriptor
        self.store = store
        self.notify = notify or flash
        self.actor = actor
        self.rows = []
        self.draft = None
        self.editing_id = None
        self.loaded = False

    @property
    def form_open(self):
        return self.draft is not None

    @property
    def is_editing(self):
        return self.editing_id is not None

    def load(self):
        d = self.descriptor
        try:
            self.rows = self.store.list(d.list_filter, order_by=d.order_by)
        except StorageError:
            logger.exception('Failed to fetch %s', d.plural)
            self.notify(f'Failed to fetch {d.plural}', 'danger')
            return False
        self.loaded = True
        return True

    def filtered(self, search_term='', filters=None):
        return apply_filters(self.rows, search_term, filters, self.descriptor.search_fields)

    def find(self, row_id):
        for row in self.rows:
            if row['id'] == row_id:
                return row
        return None

    def begin_create(self):
        self.editing_id = None
        self.draft = self.descriptor.blank_draft()
        return self.draft

    def begin_edit(self, row):
        d = self.descriptor
        draft = {}
        for name in d.form_fields:
            value = row.get(name)
            if name in d.list_fields:
                draft[name] = join_csv(value)
            elif name in d.bool_fields:
                draft[name] = bool(value)
            elif value is None:
                draft[name] = ''
            else:
                draft[name] = value
        self.editing_id = row['id']
        self.draft = draft
        return draft

    def close_form(self):
        self.draft = None
        self.editing_id = None

    def _clean(self, draft):
        """Validate a draft and derive the row values it stands for."""
        d = self.descriptor
        for name in d.required:
            if str(draft.get(name, '') or '').strip() == '':
                raise ValidationError(f'{_label(name)} is required')

        values = {}
        for name in d.form_fields:
            raw = draft.get(name)
            if name in d.list_fields:
                values[name] = split_csv(raw) if isinstance(raw, str) else [str(v).strip() for v in raw or [] if str(v).strip()]
            elif name in d.bool_fields:
                values[name] = as_bool(raw)
            elif name in d.int_fields:
                if raw is None or str(raw).strip() == '':
                    values[name] = None
                    continue
                try:
                    number = int(str(raw).strip())
                except ValueError:
                    raise ValidationError(f'{_label(name)} must be a whole number') from None
                low, high = d.int_bounds.get(name, (None, None))
                if high is None and low is not None and number < low:
                    raise ValidationError(f'{_label(name)} must be at least {low}')
                if (low is not None and number < low) or (high is not None and number > high):
                    raise ValidationError(f'{_label(name)} must be between {low} and {high}')
                values[name] = number
            else:
                text = raw.strip() if isinstance(raw, str) else raw
                values[name] = text if text != '' else None

        if 'status' in values and d.statuses:
            if values['status'] is None:
                values['status'] = d.defaults.get('status', d.statuses[0])
            if values['status'] not in d.statuses:
                raise ValidationError(f'Status must be one of: {", ".join(d.statuses)}')
        for name, allowed in d.choices.items():
            if values.get(name) is not None and values[name] not in allowed:
                raise ValidationError(f'{_label(name)} must be one of: {", ".join(allowed)}')

        if d.prepare:
            values = d.prepare(values)
        return values

    def submit(self, draft=None):
        """Create or update from the draft. Returns True when the row was saved."""
        d = self.descriptor
        if draft is not None:
            self.draft = dict(draft)
        elif self.draft is None:
            self.begin_create()

        try:
            values = self._clean(self.draft)
        except ValidationError as e:
            self.notify(str(e), 'danger')
            return False

        try:
            if self.is_editing:
                self.store.update(self.editing_id, values)
                self.notify(f'{d.label} updated successfully', 'success')
            else:
                if d.owner_field and self.actor is not None:
                    values[d.owner_field] = self.actor.id
                self.store.insert(values)
                self.notify(f'{d.label} created successfully', 'success')
        except StorageError:
            logger.exception('Failed to save %s', d.label.lower())
            self.notify(f'Failed to save {d.label.lower()}', 'danger')
            return False

        self.close_form()
        self.load()
        return True

    def remove(self, row_id, confirmed=False):
        """Delete a row for good; nothing is issued without confirmation."""
        d = self.descriptor
        if not confirmed:
            self.notify(f'Deletion of the {d.label.lower()} was not confirmed', 'warning')
            return False
        try:
            self.store.delete(row_id)
        except StorageError:
            logger.exception('Failed to delete %s %s', d.label.lower(), row_id)
            self.notify(f'Failed to delete {d.label.lower()}', 'danger')
            return False
        self.notify(f'{d.label} deleted successfully', 'success')
        self.load()
        return True

    def toggle_field(self, row_id, field_name, value):
        """Update exactly one whitelisted field (plus any hook-derived stamp)."""
        d = self.descriptor
        if field_name not in d.toggles:
            self.notify(f'{field_name} cannot be changed from the list', 'danger')
            return False
        allowed = d.toggles[field_name]
        if allowed is None:
            value = as_bool(value)
        elif value not in allowed:
            self.notify(f'{field_name.capitalize()} must be one of: {", ".join(allowed)}', 'danger')
            return False

        partial = {field_name: value}
        if d.on_toggle:
            partial.update(d.on_toggle(field_name, value))
        try:
            self.store.update(row_id, partial)
        except StorageError:
            logger.exception('Failed to update %s of %s %s', field_name, d.label.lower(), row_id)
            self.notify(f'Failed to update {field_name}', 'danger')
            return False
        self.notify(f'{field_name.capitalize()} updated successfully', 'success')
        self.load()
        return True
