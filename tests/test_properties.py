"""Property tests for Base64Engine.

Uses hypothesis to check the codec laws over arbitrary byte strings, with the
standard library's base64 module as an oracle.
"""

from __future__ import annotations

import base64
import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from base64_engine import Base64Engine, InvalidLengthError, standard_engine, url_safe_engine

ENGINES = [standard_engine(), url_safe_engine()]
ORACLES = {
    "standard": base64.b64encode,
    "url_safe": base64.urlsafe_b64encode,
}


@pytest.mark.parametrize("engine", ENGINES)
@given(data=st.binary(max_size=512))
@settings(max_examples=200)
def test_round_trip(engine: Base64Engine, data: bytes) -> None:
    """decode(encode(B)) returns B."""
    assert engine.decode(engine.encode(data)) == data


@pytest.mark.parametrize("engine", ENGINES)
@given(data=st.binary(max_size=512))
def test_length_law(engine: Base64Engine, data: bytes) -> None:
    """Encoded length is 4 * ceil(len(B) / 3)."""
    assert len(engine.encode(data)) == 4 * math.ceil(len(data) / 3)


@pytest.mark.parametrize("engine", ENGINES)
@given(data=st.binary(max_size=512))
def test_padding_count(engine: Base64Engine, data: bytes) -> None:
    """Trailing padding count is (3 - len(B) % 3) % 3 and padding never appears elsewhere."""
    encoded = engine.encode(data)
    expected = (3 - len(data) % 3) % 3

    stripped = encoded.rstrip(engine.config.padding)
    assert len(encoded) - len(stripped) == expected
    assert engine.config.padding not in stripped


@pytest.mark.parametrize("engine", ENGINES)
@given(data=st.binary(min_size=1, max_size=512))
def test_alphabet_closure(engine: Base64Engine, data: bytes) -> None:
    """Every encoded symbol is an alphabet symbol or padding."""
    allowed = set(engine.config.alphabet.symbols) | {engine.config.padding}
    assert set(engine.encode(data)) <= allowed


@pytest.mark.parametrize("name", sorted(ORACLES))
@given(data=st.binary(max_size=512))
def test_matches_standard_library(name: str, data: bytes) -> None:
    """Output agrees with the standard library for the same alphabet."""
    engine = standard_engine() if name == "standard" else url_safe_engine()
    expected = ORACLES[name](data).decode("ascii")

    assert engine.encode(data) == expected
    assert engine.decode(expected) == data


@given(data=st.binary(min_size=1, max_size=64), cut=st.integers(min_value=1, max_value=3))
def test_truncated_input_is_rejected(data: bytes, cut: int) -> None:
    """Dropping 1 to 3 trailing symbols always raises instead of returning partial data."""
    encoded = standard_engine().encode(data)

    with pytest.raises(InvalidLengthError):
        standard_engine().decode(encoded[:-cut])
