"""
Table Storage Service

The data-access contract every content screen relies on. Rows cross this
boundary as plain dicts; every failure surfaces as StorageError after the
session has been rolled back.
"""

import logging
from sqlalchemy.exc import SQLAlchemyError
from aisolutions.extensions import db

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """A remote table operation failed (database error, bad column, missing row)."""


class TableStore:
    """list / get / insert / update / delete / count over one model's table."""

    def __init__(self, model):
        self.model = model
        self.columns = set(model.field_names())

    @property
    def table(self):
        return self.model.__tablename__

    def _column(self, name):
        if name not in self.columns:
            raise StorageError(f'{self.table} has no column {name!r}')
        return getattr(self.model, name)

    def _query(self, filter_equals):
        query = self.model.query
        for name, value in (filter_equals or {}).items():
            query = query.filter(self._column(name) == value)
        return query

    def _ordering(self, order_by, ascending):
        if not order_by:
            return []
        if isinstance(order_by, str):
            order_by = [(order_by, ascending)]
        clauses = []
        for name, asc in order_by:
            column = self._column(name)
            clauses.append(column.asc() if asc else column.desc())
        return clauses

    def _fail(self, action, error):
        db.session.rollback()
        logger.warning('%s on %s failed: %s', action, self.table, error)
        raise StorageError(f'Could not {action} {self.table}: {error}') from error

    def list(self, filter_equals=None, order_by=None, ascending=True):
        """Fetch every row matching `filter_equals`, optionally ordered.

        `order_by` is a column name (direction from `ascending`) or a list of
        (column, ascending) pairs.
        """
        try:
            query = self._query(filter_equals)
            clauses = self._ordering(order_by, ascending)
            if clauses:
                query = query.order_by(*clauses)
            return [row.to_dict() for row in query.all()]
        except SQLAlchemyError as e:
            self._fail('list', e)

    def get(self, row_id):
        try:
            row = db.session.get(self.model, row_id)
        except SQLAlchemyError as e:
            self._fail('read', e)
        return row.to_dict() if row is not None else None

    def insert(self, row):
        values = {name: value for name, value in row.items() if name != 'id'}
        for name in values:
            self._column(name)
        instance = self.model(**values)
        try:
            db.session.add(instance)
            db.session.commit()
        except SQLAlchemyError as e:
            self._fail('insert into', e)
        return instance.to_dict()

    def update(self, row_id, partial):
        values = {name: value for name, value in partial.items() if name != 'id'}
        for name in values:
            self._column(name)
        try:
            instance = db.session.get(self.model, row_id)
            if instance is None:
                raise StorageError(f'{self.table} row {row_id} not found')
            for name, value in values.items():
                setattr(instance, name, value)
            db.session.commit()
        except SQLAlchemyError as e:
            self._fail('update', e)

    def delete(self, row_id):
        try:
            instance = db.session.get(self.model, row_id)
            if instance is None:
                raise StorageError(f'{self.table} row {row_id} not found')
            db.session.delete(instance)
            db.session.commit()
        except SQLAlchemyError as e:
            self._fail('delete from', e)

    def count(self, filter_equals=None):
        try:
            return self._query(filter_equals).count()
        except SQLAlchemyError as e:
            self._fail('count', e)
