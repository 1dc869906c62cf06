# zepkit

Storage and presentation helpers for long-term chat memory:

- sessions, users and conversation summaries kept in a SQLite database
  (`zepkit.database`, `zepkit.sessions`, `zepkit.users`, `zepkit.summaries`),
- small building blocks for an admin web interface: paginated tables, pages
  with a sidebar menu, HTML escaping and syntax-highlighted JSON
  (`zepkit.table`, `zepkit.page`, `zepkit.web_funcs`, `zepkit.highlight`,
  `zepkit.icons`),
- the arithmetic and background build step for IVFFlat vector indexes
  (`zepkit.indexer`).

## Installation

```
pip install zepkit
```

To run the tests:

```
pip install "zepkit[test]"
pytest
```

## Sessions and users

```python
from zepkit.database import Database
from zepkit.models import CreateSessionRequest, CreateUserRequest, UpdateSessionRequest
from zepkit.sessions import SessionStore
from zepkit.users import UserStore

with Database(":memory:") as db:
    users = UserStore(db)
    users.create(CreateUserRequest(user_id="alice", email="alice@example.com"))

    sessions = SessionStore(db)
    sessions.create(
        CreateSessionRequest(session_id="s1", user_id="alice", metadata={"key": "value"})
    )

    # New metadata is deep-merged into what is already stored.
    updated = sessions.update(
        UpdateSessionRequest(session_id="s1", metadata={"topic": "travel"}), False
    )
    print(updated.metadata)  # {'key': 'value', 'topic': 'travel'}

    page = sessions.list_all_ordered(1, 10, "created_at", False)
    print(page.total_count, [s.session_id for s in page.sessions])
```

`Database(path)` opens (or creates) a SQLite file, or an in-memory database
with `":memory:"`, and creates its tables. It is a context manager that closes
the connection on exit.

Behaviour worth knowing:

- Looking up a missing or deleted record raises `NotFoundError`.
- Creating a session with an empty id raises `ValueError`; a duplicate session
  id, a duplicate user id or an unknown user raises `BadRequestError`.
- `SessionStore.delete` soft-deletes a session together with its messages,
  message embeddings and summaries. `SessionStore.update` on a deleted session
  brings the session back; its summaries stay deleted.
- `UserStore.update` only changes fields given a non-empty value; missing
  metadata leaves the stored metadata untouched.
- Callers that are not privileged (`is_privileged=False`) cannot set the
  reserved `"system"` metadata key.
- `UserStore.delete` soft-deletes the user and all of the user's sessions.
- `list_all(cursor, limit)` returns records with an id above `cursor`, in id
  order; `list_all_ordered(page_number, page_size, order_by, asc)` returns one
  page plus the total count. Ordering by an unknown column raises `ValueError`.
- Database failures are raised as `StorageError`.

## Summaries

```python
from zepkit.database import Database
from zepkit.models import CreateSessionRequest, Summary
from zepkit.sessions import SessionStore
from zepkit.summaries import get_summary, get_summary_list, put_summary

with Database() as db:
    SessionStore(db).create(CreateSessionRequest(session_id="s1"))
    put_summary(db, "s1", Summary(content="The user is planning a trip."))
    latest = get_summary(db, "s1")            # most recent summary, or None
    listing = get_summary_list(db, "s1", 1, 5)  # oldest first, one page
```

An empty session id raises `StorageError`.

`zepkit.sample_data.test_messages()` returns a sample conversation as a list of
`Message` objects, handy for exercising the stores.

## Admin web helpers

```python
from zepkit.page import new_page, slugify
from zepkit.table import Column, Table
from zepkit.web_funcs import json_serialize_html, percent

table = Table("sessions", [Column("Created", True, "created_at")])
table.parse_query_params({"page": ["2"], "order": ["created_at"], "asc": ["true"]})
table.offset()                        # 10
table.table_path("/admin/sessions")   # "/admin/sessions?order=created_at&asc=true"

slugify("Session Details")            # "sessiondetails"
percent(1, 4)                         # 25
json_serialize_html({"name": "<b>"})  # HTML-escaped JSON, highlighted as HTML
```

`Table.parse_query_params` also accepts a query string such as
`"page=2&order=created_at"`; values that do not parse are ignored and the
defaults (page 1, 10 rows, `created_at`, descending) remain.

`Page.render(headers, renderer)` picks what to render and hands it to your
`renderer(entry_template, template_files, page)` callable: an htmx request
(`HX-Request: true`) gets only the page's `"Content"` template, any other
request the full `"Layout"` together with `LAYOUT_TEMPLATES`.
`web_funcs.template_funcs()` returns the helpers a template engine can expose
(`Percent`, `ToJSON`, `CommaInt`, `RelativeTime`).

`highlight.code_highlight(code, lexer)` returns Pygments-highlighted HTML with
inline styles, wrapped in a `<pre>` that wraps long lines; an unknown lexer
name raises `ValueError`.

## Vector indexes

```python
from zepkit.indexer import DocumentCollection, new_vector_col_index

collection = DocumentCollection(name="docs", table_name="docstore_docs_384")
index = new_vector_col_index(backend, collection)   # backend: your IndexBackend
index.list_count, index.probe_count
worker = index.create_index(force=False)
worker.join()
```

`new_vector_col_index` counts the collection's rows through an `IndexBackend`
and sets the list count (1 up to 1,000 rows, rows/1000 up to 1,000,000, the
square root above that) and the probe count (square root of the list count).
`create_index` refuses any distance function other than cosine and, unless
`force` is set, collections with fewer than 10,000 rows. Otherwise it drops
and rebuilds the index on a background thread, which it returns, and marks
the collection as indexed with its list and probe counts. Only one build per
collection runs at a time.

## What the package does not do

- It has no web server, no HTTP routes and no bundled HTML templates; `Page`
  and `Table` only prepare data for a template engine you supply.
- It offers no functions to store or fetch chat messages or message
  embeddings. Their tables exist only so that deleting a session also
  soft-deletes rows written there by other code.
- It does not talk to a vector database. `IndexBackend` is an abstract class;
  the storage that counts rows and builds indexes must be provided by you.
- There is no command-line program.