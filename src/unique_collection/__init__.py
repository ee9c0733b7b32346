from ._unique_collection import UniqueCollection
