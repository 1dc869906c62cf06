"""A sample conversation used to exercise the stores."""

from __future__ import annotations

from zepkit.models import Message

_CONVERSATION = (
    ("user", "Hello", None),
    ("assistant", "Hi there!", {"foo": "bar"}),
    (
        "user",
        "I'm looking to plan a trip to Iceland. Can you help me?",
        {"bar": "foo"},
    ),
    ("assistant", "Of course! I'd be happy to help you plan your trip.", None),
    ("user", "What's the best time of year to go?", None),
    (
        "assistant",
        "The best time to visit Iceland is from June to August. The weather is "
        "milder, and you'll have more daylight for sightseeing.",
        None,
    ),
    ("user", "Do I need a visa?", None),
    (
        "assistant",
        "Visa requirements depend on your nationality. Citizens of the Schengen "
        "Area, the US, Canada, and several other countries can visit Iceland for "
        "up to 90 days without a visa.",
        None,
    ),
    ("user", "What are some must-see attractions?", None),
    (
        "assistant",
        "Some popular attractions include the Blue Lagoon, Golden Circle, "
        "Reynisfjara Black Sand Beach, Gulfoss waterfall, and the Jökulsárlón "
        "Glacier Lagoon.",
        None,
    ),
    ("user", "What should I pack?", None),
    (
        "assistant",
        "Pack warm and waterproof clothing, layers for temperature changes, "
        "comfortable walking shoes, a swimsuit for hot springs, and a camera to "
        "capture the beautiful scenery.",
        None,
    ),
    ("user", "Should I rent a car?", None),
    (
        "assistant",
        "Renting a car is a great idea if you plan on exploring areas outside of "
        "Reykjavik. It gives you more freedom to travel at your own pace and "
        "visit remote locations.",
        None,
    ),
    ("user", "How much does a trip to Iceland typically cost?", None),
    (
        "assistant",
        "Iceland can be expensive. Costs depend on factors like accommodations, "
        "activities, and dining preferences. However, you can expect to spend "
        "around $200-$300 per day, not including flights.",
        None,
    ),
    ("user", "Is it easy to find vegetarian or vegan food in Iceland?", None),
    (
        "assistant",
        "Yes, Reykjavik has several vegetarian and vegan-friendly restaurants. "
        "In smaller towns, you may find fewer options, but most places will have "
        "some vegetarian dishes available.",
        None,
    ),
    (
        "user",
        "Thank you for all this information! I'm excited to start planning my trip.",
        None,
    ),
    (
        "assistant",
        "You're welcome! Have a great time planning and enjoy your trip to Iceland!",
        None,
    ),
)


def test_messages() -> list[Message]:
    """Return a fresh copy of the sample conversation."""
    return [
        Message(role, content, dict(metadata) if metadata is not None else None)
        for role, content, metadata in _CONVERSATION
    ]