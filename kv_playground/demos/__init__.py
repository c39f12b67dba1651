"""Demo module for KV Playground."""

from .caching import run_caching_examples
from .expiration import run_expiration_examples
from .hashes import run_hash_examples
from .lists import run_list_examples
from .pubsub import ChannelListener, run_pubsub_examples
from .sets import run_set_examples
from .sorted_sets import run_sorted_set_examples
from .strings import run_string_examples

__all__ = [
    "ChannelListener",
    "run_caching_examples",
    "run_expiration_examples",
    "run_hash_examples",
    "run_list_examples",
    "run_pubsub_examples",
    "run_set_examples",
    "run_sorted_set_examples",
    "run_string_examples",
]
