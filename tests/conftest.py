import random
import string

import pytest

from lexitrie.index import unload_index


@pytest.fixture(autouse=True)
def reset_index():
    unload_index()
    yield
    unload_index()


@pytest.fixture
def words():
    """A few thousand random lowercase words, fixed seed."""
    rng = random.Random(1234)
    result = set()
    while len(result) < 3000:
        length = rng.randint(1, 12)
        result.add("".join(rng.choice(string.ascii_lowercase) for _ in range(length)))
    return sorted(result)


@pytest.fixture
def word_file(tmp_path, words):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path
