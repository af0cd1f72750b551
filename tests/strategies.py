"""Hypothesis strategies for property-based testing of guarded."""

from guarded import ErrorName, LibraryError
from hypothesis import strategies as st

texts = st.text(min_size=0, max_size=50)

# Values a unit of work may return
return_values = st.one_of(st.none(), st.integers(), texts, st.lists(st.integers(), max_size=5))

# Exceptions a unit of work may raise; built fresh per example
exceptions = st.one_of(
    st.builds(ValueError, texts),
    st.builds(TypeError, texts),
    st.builds(RuntimeError, texts),
    st.builds(KeyError, texts),
    st.builds(OSError, texts),
    st.builds(AssertionError, texts),
    st.builds(LibraryError, st.sampled_from(list(ErrorName)), st.none() | texts),
)

# Outcome of a unit of work: an exception to raise, or a value to return
outcomes = st.one_of(exceptions, return_values)
