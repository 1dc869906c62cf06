from zepkit import sample_data


def test_conversation_length_and_opening():
    messages = sample_data.test_messages()
    assert len(messages) == 20
    assert messages[0].role == "user"
    assert messages[0].content == "Hello"
    assert messages[0].metadata is None


def test_roles_alternate():
    roles = [m.role for m in sample_data.test_messages()]
    assert roles[0::2] == ["user"] * 10
    assert roles[1::2] == ["assistant"] * 10


def test_metadata_of_early_messages():
    messages = sample_data.test_messages()
    assert messages[1].metadata == {"foo": "bar"}
    assert messages[2].metadata == {"bar": "foo"}
    assert all(m.metadata is None for m in messages[3:])


def test_returns_independent_copies():
    first = sample_data.test_messages()
    first[1].metadata["foo"] = "changed"
    first[0].content = "changed"
    second = sample_data.test_messages()
    assert second[1].metadata == {"foo": "bar"}
    assert second[0].content == "Hello"


def test_unicode_content_preserved():
    messages = sample_data.test_messages()
    assert "Jökulsárlón" in messages[9].content