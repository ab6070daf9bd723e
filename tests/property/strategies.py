"""
Hypothesis Strategies for Property-Based Testing

Custom strategies for generating URLs, raw durations and import outcomes.
"""

import string

from hypothesis import strategies as st

from catalog_import.domain.content_import import ImportOutcome

from tests.fixtures.domain_fixtures import create_catalog_record


# =============================================================================
# Primitive Strategies
# =============================================================================

@st.composite
def youtube_video_ids(draw) -> str:
    """Generate valid YouTube video IDs (11 characters, alphanumeric + - and _)."""
    chars = string.ascii_letters + string.digits + "-_"
    return draw(st.text(alphabet=chars, min_size=11, max_size=11))


@st.composite
def valid_youtube_urls(draw) -> str:
    """Generate valid YouTube URLs."""
    video_id = draw(youtube_video_ids())
    prefix = draw(st.sampled_from([
        "https://www.youtube.com/watch?v=",
        "https://youtube.com/watch?v=",
        "https://youtu.be/",
        "https://m.youtube.com/watch?v=",
        "https://www.youtube.com/shorts/",
        "https://www.youtube.com/embed/",
    ]))
    return prefix + video_id


def arbitrary_urls():
    """Anything a caller might pass as a URL, valid or not."""
    return st.one_of(
        st.none(),
        st.integers(),
        st.text(),
        valid_youtube_urls(),
        st.builds(lambda path: "https://" + path, st.text()),
    )


def raw_durations():
    """Duration values as platforms (or broken platforms) report them."""
    return st.one_of(
        st.none(),
        st.booleans(),
        st.integers(),
        st.floats(allow_nan=True, allow_infinity=True),
        st.text(),
        st.builds(
            lambda h, m, s: f"PT{h}H{m}M{s}S",
            st.integers(0, 99), st.integers(0, 59), st.integers(0, 59),
        ),
        st.lists(st.integers(), max_size=3),
    )


# =============================================================================
# Outcome Strategies
# =============================================================================

@st.composite
def import_outcomes(draw) -> ImportOutcome:
    """Generate imported, duplicate or failed outcomes."""
    kind = draw(st.sampled_from(["imported", "duplicate", "failed"]))
    if kind == "imported":
        return ImportOutcome.imported(create_catalog_record(record_id=draw(st.integers(1, 10**6))))
    if kind == "duplicate":
        return ImportOutcome.duplicate()
    return ImportOutcome.failed(draw(st.text(max_size=40)))
