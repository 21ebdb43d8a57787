"""Tests for opaque id generation."""

import re

from src.utils.ids import ID_LENGTH, generate_id

URL_SAFE = re.compile(r"^[A-Za-z0-9_-]+$")


def test_generated_id_is_url_safe_and_fixed_length() -> None:
    """Test the shape of generated ids."""
    for _ in range(100):
        value = generate_id()
        assert len(value) == ID_LENGTH == 22
        assert URL_SAFE.match(value)


def test_generated_ids_do_not_collide() -> None:
    """Test that a large batch of ids is collision-free."""
    ids = {generate_id() for _ in range(100_000)}

    assert len(ids) == 100_000


def test_generated_id_never_contains_tag_separator() -> None:
    """Test that ids cannot be confused with tagged values."""
    assert all("#" not in generate_id() for _ in range(1000))
