import pytest

from aisolutions.services.descriptors import BLOGS, CONTACTS, EVENTS, PORTFOLIO, TESTIMONIALS
from aisolutions.services.resources import ResourceManager, apply_filters
from aisolutions.services.session_gate import AdminIdentity
from aisolutions.services.storage import StorageError, TableStore

EDITOR = AdminIdentity(id=1, email='admin@aisolutions.com', name='Site Administrator', role='admin')

ROWS = [
    {'id': 1, 'title': 'Scaling Flask', 'category': 'Engineering', 'status': 'published', 'tags': ['web', 'python']},
    {'id': 2, 'title': 'AI in Retail', 'category': 'AI', 'status': 'draft', 'tags': ['ai']},
    {'id': 3, 'title': 'Hiring Engineers', 'category': 'Careers', 'status': 'published', 'tags': []},
    {'id': 4, 'title': 'Untitled', 'category': None, 'status': 'archived', 'tags': None},
]


class FailingStore:
    """Wraps a store and fails the operations named in `failing`."""

    def __init__(self, store, failing=()):
        self.store = store
        self.failing = set(failing)

    def __getattr__(self, name):
        if name in self.failing:
            def fail(*args, **kwargs):
                raise StorageError(f'{name} failed')
            return fail
        return getattr(self.store, name)


def blog_draft(**overrides):
    draft = BLOGS.blank_draft()
    draft.update(title='Hello, World!  Title', content='Body text', category='AI', tags='ai, web dev ,  ')
    draft.update(overrides)
    return draft


@pytest.fixture()
def blogs(app_context, notices):
    return ResourceManager(BLOGS, TableStore(BLOGS.model), notify=notices, actor=EDITOR)


@pytest.fixture()
def contacts(app_context, notices):
    store = TableStore(CONTACTS.model)
    row = store.insert({'name': 'Dana', 'email': 'dana@example.com', 'phone': '555-0100',
                        'subject': 'Quote', 'message': 'Need a chatbot', 'status': 'new', 'priority': 'normal'})
    manager = ResourceManager(CONTACTS, store, notify=notices)
    manager.load()
    return manager, row


# -----------------------------------------------------------------------------
# apply_filters
# -----------------------------------------------------------------------------

def test_filters_match_all_returns_everything_in_order():
    result = apply_filters(ROWS, '', {'status': 'all'}, ('title', 'category'))
    assert result == ROWS
    assert result is not ROWS


def test_filters_no_match_is_empty():
    assert apply_filters(ROWS, 'zzz-no-such-thing', {'status': 'all'}, ('title', 'category')) == []


def test_filters_search_is_case_insensitive_across_fields():
    ids = [r['id'] for r in apply_filters(ROWS, 'ENGINEER', None, ('title', 'category'))]
    assert ids == [1, 3]


def test_filters_search_list_fields():
    ids = [r['id'] for r in apply_filters(ROWS, 'PYTH', None, ('title', 'tags'))]
    assert ids == [1]


def test_filters_and_across_dimensions():
    rows = apply_filters(ROWS, 'engineer', {'status': 'published', 'category': 'Careers'}, ('title', 'category'))
    assert [r['id'] for r in rows] == [3]


def test_filters_search_term_is_not_trimmed():
    ids = [r['id'] for r in apply_filters(ROWS, ' ', None, ('title',))]
    assert ids == [1, 2, 3]
    assert apply_filters(ROWS, ' flask ', None, ('title',)) == []


def test_filters_do_not_mutate_input():
    before = [dict(r) for r in ROWS]
    apply_filters(ROWS, 'ai', {'status': 'draft'}, ('title',))
    assert ROWS == before


# -----------------------------------------------------------------------------
# ResourceManager
# -----------------------------------------------------------------------------

def test_create_blog_derives_slug_tags_and_owner(blogs, notices):
    blogs.begin_create()
    assert blogs.submit(blog_draft(status='published'))
    assert not blogs.form_open

    [row] = blogs.rows
    assert row['slug'] == 'hello-world-title'
    assert row['tags'] == ['ai', 'web dev']
    assert row['published_at'] is not None
    assert row['author_id'] == EDITOR.id
    assert ('success', 'Blog created successfully') in notices.messages


def test_draft_blog_has_no_publish_time(blogs):
    blogs.begin_create()
    assert blogs.submit(blog_draft(slug='My Custom Slug'))
    [row] = blogs.rows
    assert row['status'] == 'draft'
    assert row['published_at'] is None
    assert row['slug'] == 'my-custom-slug'


def test_begin_edit_flattens_lists(blogs):
    blogs.begin_create()
    blogs.submit(blog_draft())
    draft = blogs.begin_edit(blogs.rows[0])
    assert draft['tags'] == 'ai, web dev'
    assert draft['excerpt'] == ''
    assert blogs.is_editing


def test_edit_updates_existing_row(blogs):
    blogs.begin_create()
    blogs.submit(blog_draft())
    row = blogs.rows[0]

    draft = blogs.begin_edit(row)
    draft['title'] = 'Renamed'
    draft['status'] = 'published'
    assert blogs.submit(draft)
    [updated] = blogs.rows
    assert updated['id'] == row['id']
    assert updated['title'] == 'Renamed'
    assert updated['published_at'] is not None


def test_validation_error_keeps_draft_and_skips_insert(blogs, notices):
    blogs.begin_create()
    draft = blog_draft(title='   ')
    assert not blogs.submit(draft)
    assert blogs.form_open
    assert blogs.draft['content'] == 'Body text'
    assert blogs.store.count() == 0
    assert notices.messages[-1] == ('danger', 'Title is required')


def test_status_outside_vocabulary_is_rejected(blogs, notices):
    blogs.begin_create()
    assert not blogs.submit(blog_draft(status='live'))
    assert blogs.store.count() == 0
    assert notices.messages[-1][0] == 'danger'


def test_event_numbers_and_highlights(app_context, notices):
    manager = ResourceManager(EVENTS, TableStore(EVENTS.model), notify=notices, actor=EDITOR)
    draft = manager.begin_create()
    assert draft['max_attendees'] == 100
    draft.update(title='Launch', description='Product launch', event_date='2026-11-02', event_time='10:00 AM',
                 location='Kathmandu', event_type='Product Launch', max_attendees='250',
                 highlights='Demos, Networking,')
    assert manager.submit(draft)
    [row] = manager.rows
    assert row['max_attendees'] == 250
    assert row['highlights'] == ['Demos', 'Networking']
    assert row['created_by'] == EDITOR.id

    edit = manager.begin_edit(row)
    assert edit['max_attendees'] == 250
    assert edit['highlights'] == 'Demos, Networking'


def test_event_rejects_non_numeric_attendance(app_context, notices):
    manager = ResourceManager(EVENTS, TableStore(EVENTS.model), notify=notices)
    draft = manager.begin_create()
    draft.update(title='Launch', description='d', event_date='2026-11-02', event_time='10:00',
                 location='Office', event_type='Seminar', max_attendees='lots')
    assert not manager.submit(draft)
    assert notices.messages[-1] == ('danger', 'Max attendees must be a whole number')


def test_testimonial_rating_bounds(app_context, notices):
    manager = ResourceManager(TESTIMONIALS, TableStore(TESTIMONIALS.model), notify=notices)
    draft = manager.begin_create()
    draft.update(name='Sam', text='Great work', rating='7')
    assert not manager.submit(draft)
    draft['rating'] = '4'
    assert manager.submit(draft)
    assert manager.rows[0]['rating'] == 4
    assert manager.rows[0]['featured'] is False


def test_remove_requires_confirmation(blogs):
    blogs.begin_create()
    blogs.submit(blog_draft())
    row_id = blogs.rows[0]['id']

    assert not blogs.remove(row_id)
    assert blogs.store.get(row_id) is not None

    assert blogs.remove(row_id, confirmed=True)
    assert all(r['id'] != row_id for r in blogs.rows)
    assert blogs.store.get(row_id) is None


def test_status_toggle_changes_only_status_and_resolution(contacts):
    manager, before = contacts
    assert manager.toggle_field(before['id'], 'status', 'resolved')
    after = manager.store.get(before['id'])

    assert after['status'] == 'resolved'
    assert after['resolved_at'] is not None
    for name in ('name', 'email', 'phone', 'subject', 'message', 'priority', 'assigned_to', 'created_at'):
        assert after[name] == before[name]


def test_priority_toggle(contacts):
    manager, row = contacts
    assert manager.toggle_field(row['id'], 'priority', 'urgent')
    assert manager.find(row['id'])['priority'] == 'urgent'
    assert manager.find(row['id'])['resolved_at'] is None


def test_toggle_rejects_unknown_field_and_value(contacts, notices):
    manager, row = contacts
    assert not manager.toggle_field(row['id'], 'message', 'hacked')
    assert not manager.toggle_field(row['id'], 'status', 'deleted')
    assert manager.store.get(row['id'])['message'] == 'Need a chatbot'
    assert manager.store.get(row['id'])['status'] == 'new'


def test_featured_toggle_coerces_booleans(app_context, notices):
    store = TableStore(TESTIMONIALS.model)
    row = store.insert({'name': 'Ana', 'text': 'Superb', 'rating': 5})
    manager = ResourceManager(TESTIMONIALS, store, notify=notices)
    assert manager.toggle_field(row['id'], 'featured', 'true')
    assert store.get(row['id'])['featured'] is True
    assert manager.toggle_field(row['id'], 'featured', 'false')
    assert store.get(row['id'])['featured'] is False


def test_last_update_wins(app_context):
    store = TableStore(PORTFOLIO.model)
    row = store.insert({'title': 'Chatbots', 'description': 'Bots', 'category': 'AI'})
    store.update(row['id'], {'title': 'First edit', 'price_range': '$1k'})
    store.update(row['id'], {'title': 'Second edit'})
    after = store.get(row['id'])
    assert after['title'] == 'Second edit'
    assert after['price_range'] == '$1k'


# -----------------------------------------------------------------------------
# Failure handling
# -----------------------------------------------------------------------------

def test_failed_load_keeps_previous_rows(blogs, notices):
    blogs.begin_create()
    blogs.submit(blog_draft())
    previous = list(blogs.rows)

    blogs.store = FailingStore(blogs.store, failing={'list'})
    assert not blogs.load()
    assert blogs.rows == previous
    assert notices.messages[-1] == ('danger', 'Failed to fetch blogs')


def test_failed_submit_keeps_form_open(blogs, notices):
    blogs.store = FailingStore(blogs.store, failing={'insert'})
    blogs.begin_create()
    assert not blogs.submit(blog_draft())
    assert blogs.form_open
    assert blogs.draft['title'] == 'Hello, World!  Title'
    assert notices.messages[-1] == ('danger', 'Failed to save blog')


def test_failed_delete_leaves_list(blogs, notices):
    blogs.begin_create()
    blogs.submit(blog_draft())
    rows = list(blogs.rows)
    blogs.store = FailingStore(blogs.store, failing={'delete'})
    assert not blogs.remove(rows[0]['id'], confirmed=True)
    assert blogs.rows == rows


def test_duplicate_slug_surfaces_as_failure(blogs, notices):
    blogs.begin_create()
    assert blogs.submit(blog_draft())
    blogs.begin_create()
    assert not blogs.submit(blog_draft())
    assert notices.messages[-1] == ('danger', 'Failed to save blog')
    assert blogs.store.count() == 1


# -----------------------------------------------------------------------------
# TableStore
# -----------------------------------------------------------------------------

def test_store_rejects_unknown_columns(app_context):
    store = TableStore(BLOGS.model)
    with pytest.raises(StorageError):
        store.list({'no_such_column': 1})
    with pytest.raises(StorageError):
        store.list(order_by='no_such_column')


def test_store_missing_rows(app_context):
    store = TableStore(BLOGS.model)
    assert store.get(999) is None
    with pytest.raises(StorageError):
        store.update(999, {'title': 'x'})
    with pytest.raises(StorageError):
        store.delete(999)


def test_store_count_with_filter(app_context):
    store = TableStore(CONTACTS.model)
    for status in ('new', 'new', 'resolved'):
        store.insert({'name': 'N', 'email': 'n@example.com', 'message': 'm', 'status': status})
    assert store.count() == 3
    assert store.count({'status': 'new'}) == 2
