import pytest

from lead_rabbit.sanitize import no_cleanup


@pytest.fixture
def identity_cleaner():
    """Stand-in for the upstream cleanup step: returns its input unchanged."""
    return no_cleanup


@pytest.fixture
def recording_cleaner():
    """Cleaner stub that records every call and returns the input unchanged."""
    calls = []

    def _cleaner(text):
        calls.append(text)
        return text

    _cleaner.calls = calls
    return _cleaner


@pytest.fixture
def sample_post_body():
    """Typical Reddit RSS post body with lists, a code sample and the footer."""
    return (
        "Looking for a **CRM** that actually works for a 3 person team.\n"
        "\n"
        "What I need:\n"
        "- pipeline view\n"
        "- email sync with [Gmail](https://mail.google.com)\n"
        "\n"
        "Steps I tried:\n"
        "1. HubSpot free\n"
        "2. a *spreadsheet*\n"
        "\n"
        "    =VLOOKUP(A2, leads, 2)\n"
        "    =COUNTIF(B:B, \"won\")\n"
        "\n"
        "Any ideas? https://example.com/thread\n"
        "submitted by /u/founder_bob [link] [comments]"
    )
