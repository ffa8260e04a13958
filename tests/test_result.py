"""Tests for the Ok/Err result type."""

import pytest

from shapeworld.exceptions import SaveFileNotFoundError
from shapeworld.result import Err, Ok


def test_ok():
    result = Ok(3)
    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 3
    assert result.unwrap_or(9) == 3
    assert result.error is None
    assert result.map(lambda v: v * 2) == Ok(6)


def test_err():
    error = SaveFileNotFoundError("nowhere")
    result = Err(error)
    assert result.is_err()
    assert result.value is None
    assert result.unwrap_or(9) == 9
    assert result.map(lambda v: v * 2) is result


def test_err_unwrap_chains_exception():
    error = SaveFileNotFoundError("nowhere")
    with pytest.raises(ValueError) as excinfo:
        Err(error).unwrap()
    assert excinfo.value.__cause__ is error


def test_pattern_matching():
    match Ok("saved"):
        case Ok(value):
            assert value == "saved"
        case Err():
            pytest.fail("expected Ok")
