"""
Admin Session Gate

Owns the single "current admin identity" for a client. The identity is
persisted as a JSON blob under a fixed key in a client-side store (the signed
Flask session cookie in the app, a plain dict in tests), restored on every
request and never re-validated against the database afterwards. Its presence
is the only authorization signal the admin area uses.

Credential checks are delegated to AdminAuthenticator, which verifies the
submitted secret against a salted hash.
"""

import json
import logging
from dataclasses import asdict, dataclass
from werkzeug.security import check_password_hash, generate_password_hash
from aisolutions.models.base import utcnow
from aisolutions.services.storage import StorageError

logger = logging.getLogger(__name__)

STORAGE_KEY = 'adminUser'

UNKNOWN = 'unknown'
ANONYMOUS = 'anonymous'
AUTHENTICATED = 'authenticated'

INVALID_CREDENTIALS = 'Invalid credentials'
LOGIN_FAILED = 'Login failed'


@dataclass(frozen=True)
class AdminIdentity:
    id: int
    email: str
    name: str
    role: str

    @classmethod
    def from_row(cls, row):
        return cls(id=row['id'], email=row['email'], name=row['name'], role=row['role'])

    @classmethod
    def from_blob(cls, blob):
        """Parse a persisted identity; raises ValueError when malformed."""
        data = json.loads(blob) if isinstance(blob, (str, bytes)) else blob
        if not isinstance(data, dict):
            raise ValueError('identity blob is not an object')
        missing = [name for name in ('id', 'email', 'name', 'role') if name not in data]
        if missing:
            raise ValueError(f'identity blob is missing {", ".join(missing)}')
        return cls(id=data['id'], email=data['email'], name=data['name'], role=data['role'])

    def to_blob(self):
        return json.dumps(asdict(self))


class AdminAuthenticator:
    """Verify admin credentials against the admin_users table."""

    def __init__(self, store, min_password_length=6):
        self.store = store
        self.min_password_length = min_password_length

    def _find(self, email):
        rows = self.store.list({'email': (email or '').strip().lower()})
        return rows[0] if rows else None

    def authenticate(self, email, secret):
        """Return the matching AdminIdentity, or None for a bad email/secret pair.

        Storage failures propagate as StorageError.
        """
        row = self._find(email)
        if row is None or not check_password_hash(row['password_hash'], secret or ''):
            return None
        return AdminIdentity.from_row(row)

    def change_password(self, identity, current, new, confirm):
        """Replace the stored hash. Returns an error message, or None on success."""
        if new != confirm:
            return 'New passwords do not match'
        if len(new or '') < self.min_password_length:
            return f'Password must be at least {self.min_password_length} characters long'
        try:
            row = self.store.get(identity.id)
            if row is None or not check_password_hash(row['password_hash'], current or ''):
                return 'Current password is incorrect'
            self.store.update(identity.id, {
                'password_hash': generate_password_hash(new, method='pbkdf2:sha256'),
                'updated_at': utcnow(),
            })
        except StorageError:
            logger.exception('Password change failed for admin %s', identity.id)
            return 'Failed to update password'
        logger.info('Admin %s changed their password', identity.email)
        return None


class SessionGate:
    """Answer "is there an authenticated admin?" and provide login/logout."""

    def __init__(self, store, authenticator):
        self.store = store
        self.authenticator = authenticator
        self.state = UNKNOWN
        self._identity = None
        self._listeners = []

    @property
    def restored(self):
        return self.state != UNKNOWN

    @property
    def is_authenticated(self):
        return self._identity is not None

    def current_identity(self):
        return self._identity

    def on_change(self, callback):
        """Subscribe to identity changes; returns a function that unsubscribes."""
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)
        return unsubscribe

    def _set(self, identity):
        self._identity = identity
        self.state = AUTHENTICATED if identity is not None else ANONYMOUS
        for callback in list(self._listeners):
            callback(identity)

    def restore(self):
        """Adopt the persisted identity if it is present and well-formed."""
        identity = None
        blob = self.store.get(STORAGE_KEY)
        if blob is not None:
            try:
                identity = AdminIdentity.from_blob(blob)
            except (ValueError, TypeError) as e:
                logger.warning('Ignoring malformed admin session: %s', e)
        self._set(identity)
        return identity

    def login(self, email, secret):
        """Returns None on success, otherwise a message that does not reveal the cause."""
        try:
            identity = self.authenticator.authenticate(email, secret)
        except StorageError:
            logger.exception('Admin login lookup failed')
            return LOGIN_FAILED
        if identity is None:
            logger.info('Rejected admin login for %r', email)
            return INVALID_CREDENTIALS
        self.store[STORAGE_KEY] = identity.to_blob()
        self._set(identity)
        return None

    def logout(self):
        self.store.pop(STORAGE_KEY, None)
        if self._identity is not None or self.state == UNKNOWN:
            self._set(None)
