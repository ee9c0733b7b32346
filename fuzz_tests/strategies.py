import hypothesis.strategies as st

from unique_collection import UniqueCollection

values = st.integers(min_value=-20, max_value=20) | st.text(max_size=3) | st.none()
value_lists = st.lists(values, max_size=30)
collections = st.builds(UniqueCollection.of, value_lists)
